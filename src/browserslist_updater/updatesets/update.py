from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..errors import CaptureError
from ..logging_utils import log_event
from ..utils import Runner
from .apply import update_package_manually, update_with
from .browsers import get_browsers_list
from .detect import detect_lockfile
from .diff import diff_browsers_lists
from .registry import get_latest_info
from .report import Out, report_browser_changes, report_latest, report_updated
from .types import BrowserSnapshot, DiffEntry, LockFormat

TRACKED_PACKAGE = "caniuse-lite"


def update_db(
    cwd: Union[str, Path] = ".",
    package: str = TRACKED_PACKAGE,
    *,
    runner: Optional[Runner] = None,
    out: Out = print,
    dry_run: bool = False,
) -> Optional[List[DiffEntry]]:
    """Refresh ``package`` in the project around ``cwd`` and report changes.

    Lockfile detection, registry and package-manager failures propagate as
    :class:`~browserslist_updater.errors.UpdateDbError`. A failing browser
    list only suppresses the diff. Returns the browser changes, or ``None``
    when they could not be computed (capture failure or dry run).
    """
    lock = detect_lockfile(cwd)
    latest = get_latest_info(lock, package, lock.path.parent, runner)

    capture_error: Optional[CaptureError] = None
    old: Optional[BrowserSnapshot] = None
    try:
        old = get_browsers_list(cwd, runner)
    except CaptureError as e:
        capture_error = e
        log_event("browsers_snapshot_failed", level=logging.WARNING, error_type=e.code)

    report_latest(out, latest.version)

    if lock.format is LockFormat.DELEGATED:
        update_with(out, lock, package, runner=runner, dry_run=dry_run)
    else:
        update_package_manually(
            out, lock, latest, package, runner=runner, dry_run=dry_run
        )

    if dry_run:
        return None

    report_updated(out, package)

    current: Optional[BrowserSnapshot] = None
    if capture_error is None:
        try:
            current = get_browsers_list(cwd, runner)
        except CaptureError as e:
            capture_error = e
            log_event(
                "browsers_snapshot_failed", level=logging.WARNING, error_type=e.code
            )

    if capture_error is not None or old is None or current is None:
        report_browser_changes(out, None, capture_error)
        return None

    changes = diff_browsers_lists(old, current)
    log_event("browsers_diff", changes=len(changes))
    report_browser_changes(out, changes)
    return changes


__all__ = ["TRACKED_PACKAGE", "update_db"]
