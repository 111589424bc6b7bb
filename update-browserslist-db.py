#!/usr/bin/env python3
"""Launcher for the browserslist database updater.

Runs straight from a source checkout as well as from an installed package:
 - Prefer a static import so packagers can see the ``browserslist_updater``
   dependency graph.
 - Fall back to adding ``./src`` to ``sys.path`` when running the repository
   directly.
 - Re-export key symbols from the implementation module so tests and scripts
   can import from this file.
"""

import importlib
import sys
from pathlib import Path


def _load_impl():
    """Import ``browserslist_updater.impl``, adding ``./src`` when needed."""
    try:
        from browserslist_updater import impl as _impl  # type: ignore

        return _impl
    except ImportError:
        pass

    _src = Path(__file__).resolve().parent / "src"
    if _src.exists():
        src_str = str(_src)
        if src_str not in sys.path:
            sys.path.insert(0, src_str)
    return importlib.import_module("browserslist_updater.impl")


_impl = _load_impl()

parse_args = _impl.parse_args
configure_logging = _impl.configure_logging
log_event = _impl.log_event
supports_color = _impl.supports_color
c = _impl.c
warn = _impl.warn
err = _impl.err
RESET = _impl.RESET
BOLD = _impl.BOLD
RED = _impl.RED
GREEN = _impl.GREEN
YELLOW = _impl.YELLOW
CaptureError = _impl.CaptureError
ExternalCommandFailure = _impl.ExternalCommandFailure
LockfileAccessError = _impl.LockfileAccessError
LockfileParseError = _impl.LockfileParseError
NoLockfileFoundError = _impl.NoLockfileFoundError
NoManifestFoundError = _impl.NoManifestFoundError
RegistryQueryError = _impl.RegistryQueryError
UpdateDbError = _impl.UpdateDbError
atomic_write = _impl.atomic_write
CommandResult = _impl.CommandResult
check_command = _impl.check_command
find_up = _impl.find_up
get_version = _impl.get_version
pkg_version = _impl.pkg_version
run_command = _impl.run_command
TRACKED_PACKAGE = _impl.TRACKED_PACKAGE
BrowserSnapshot = _impl.BrowserSnapshot
Change = _impl.Change
DiffEntry = _impl.DiffEntry
LockDescriptor = _impl.LockDescriptor
LockFormat = _impl.LockFormat
PackageManager = _impl.PackageManager
RegistryVersionRecord = _impl.RegistryVersionRecord
RewriteResult = _impl.RewriteResult
detect_lockfile = _impl.detect_lockfile
diff_browsers_lists = _impl.diff_browsers_lists
get_browsers_list = _impl.get_browsers_list
get_latest_info = _impl.get_latest_info
parse_browsers_list = _impl.parse_browsers_list
update_db = _impl.update_db
update_lockfile = _impl.update_lockfile
update_npm_lockfile = _impl.update_npm_lockfile
update_yarn_lockfile = _impl.update_yarn_lockfile
subprocess = _impl.subprocess
logging = _impl.logging
main = _impl.main

__all__ = list(_impl.__all__)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
