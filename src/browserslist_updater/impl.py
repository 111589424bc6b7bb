"""Public facade that re-exports the updater's building blocks.

The root launcher script and the tests import everything from one flat
namespace collected here, while the code stays modular internally.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess

from .args import parse_args
from .logging_utils import configure_logging, log_event
from .ui import c, warn, err, supports_color, RESET, BOLD, RED, GREEN, YELLOW
from .errors import (
    CaptureError,
    ExternalCommandFailure,
    LockfileAccessError,
    LockfileParseError,
    NoLockfileFoundError,
    NoManifestFoundError,
    RegistryQueryError,
    UpdateDbError,
)
from .io_safe import atomic_write
from .utils import (
    CommandResult,
    check_command,
    find_up,
    get_version,
    pkg_version,
    run_command,
)
from .updatesets import (
    TRACKED_PACKAGE,
    BrowserSnapshot,
    Change,
    DiffEntry,
    LockDescriptor,
    LockFormat,
    PackageManager,
    RegistryVersionRecord,
    RewriteResult,
    detect_lockfile,
    diff_browsers_lists,
    get_browsers_list,
    get_latest_info,
    parse_browsers_list,
    update_db,
    update_lockfile,
    update_npm_lockfile,
    update_yarn_lockfile,
)
from .main_flow import main

__all__ = [
    "parse_args",
    "configure_logging",
    "log_event",
    "c",
    "warn",
    "err",
    "supports_color",
    "RESET",
    "BOLD",
    "RED",
    "GREEN",
    "YELLOW",
    "CaptureError",
    "ExternalCommandFailure",
    "LockfileAccessError",
    "LockfileParseError",
    "NoLockfileFoundError",
    "NoManifestFoundError",
    "RegistryQueryError",
    "UpdateDbError",
    "atomic_write",
    "CommandResult",
    "check_command",
    "find_up",
    "get_version",
    "pkg_version",
    "run_command",
    "TRACKED_PACKAGE",
    "BrowserSnapshot",
    "Change",
    "DiffEntry",
    "LockDescriptor",
    "LockFormat",
    "PackageManager",
    "RegistryVersionRecord",
    "RewriteResult",
    "detect_lockfile",
    "diff_browsers_lists",
    "get_browsers_list",
    "get_latest_info",
    "parse_browsers_list",
    "update_db",
    "update_lockfile",
    "update_npm_lockfile",
    "update_yarn_lockfile",
    "logging",
    "os",
    "shutil",
    "subprocess",
    "main",
]
