"""Applying the update to the project.

npm and classic yarn projects get their lockfile rewritten here, followed by
an install + uninstall of the tracked package so the package manager
re-resolves it without leaving a direct dependency behind. yarn berry and
pnpm refresh the package with their own upgrade command.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..io_safe import atomic_write
from ..logging_utils import log_event
from ..utils import Runner, check_command
from .report import (
    Out,
    report_command,
    report_dry_run,
    report_installed,
    report_up_to_date,
)
from .rewrite import update_lockfile
from .types import LockDescriptor, PackageManager, RegistryVersionRecord


def install_commands(lock: LockDescriptor, package: str) -> Tuple[List[str], List[str]]:
    """Return the ``(install, uninstall)`` commands for a rewritten lockfile."""
    if lock.manager is PackageManager.YARN:
        return ["yarn", "add", "-W", package], ["yarn", "remove", "-W", package]
    manager = lock.manager.value
    return [manager, "install", package], [manager, "uninstall", package]


def upgrade_command(lock: LockDescriptor, package: str) -> List[str]:
    """Return the single upgrade command for delegated lockfiles."""
    if lock.manager is PackageManager.PNPM:
        return ["pnpm", "up", package]
    if lock.manager is PackageManager.YARN:
        return ["yarn", "up", "-R", package]
    raise ValueError(f"{lock.manager.value} lockfiles are rewritten, not delegated")


def update_package_manually(
    out: Out,
    lock: LockDescriptor,
    latest: RegistryVersionRecord,
    package: str,
    *,
    runner: Optional[Runner] = None,
    dry_run: bool = False,
) -> None:
    """Rewrite the lockfile and reinstall ``package``.

    Nothing is written or executed when the lockfile already pins exactly
    ``latest`` or on a dry run.
    """
    result = update_lockfile(lock, latest, package)
    if result.up_to_date(latest):
        log_event("lockfile_up_to_date", package=package, version=latest.version)
        report_up_to_date(out, package, latest.version)
        return

    report_installed(out, package, result.sorted_versions())
    if dry_run:
        report_dry_run(out, str(lock.path))
        return
    atomic_write(lock.path, result.content)

    cwd = lock.path.parent
    install, uninstall = install_commands(lock, package)
    report_command(out, f"Installing new {package} version", install)
    check_command(install, cwd, runner)

    report_command(out, f"Cleaning package.json dependencies from {package}", uninstall)
    check_command(uninstall, cwd, runner)


def update_with(
    out: Out,
    lock: LockDescriptor,
    package: str,
    *,
    runner: Optional[Runner] = None,
    dry_run: bool = False,
) -> None:
    """Let the package manager upgrade ``package`` on its own."""
    cmd = upgrade_command(lock, package)
    report_command(out, f"Updating {package} version", cmd)
    if dry_run:
        report_dry_run(out, str(lock.path))
        return
    check_command(cmd, lock.path.parent, runner)


__all__ = [
    "install_commands",
    "update_package_manually",
    "update_with",
    "upgrade_command",
]
