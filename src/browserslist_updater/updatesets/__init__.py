"""Aggregated update utilities split into small modules.

Each module holds a cohesive part of the update run (detection, registry
lookup, lockfile rewriting, browser snapshots, diffing, reporting) and the
public pieces are re-exported here for easy import.
"""

from __future__ import annotations

from .types import (
    BrowserSnapshot,
    Change,
    DiffEntry,
    LockDescriptor,
    LockFormat,
    PackageManager,
    RegistryVersionRecord,
    RewriteResult,
)
from .detect import LOCKFILES, MANIFEST, detect_lockfile, find_package_dir
from .registry import get_latest_info, registry_command
from .npm_lock import update_npm_lockfile
from .yarn_lock import parse_blocks, serialize_blocks, update_blocks, update_yarn_lockfile
from .rewrite import update_lockfile
from .browsers import get_browsers_list, parse_browsers_list
from .diff import diff_browsers_lists, format_diff
from .apply import install_commands, update_package_manually, update_with, upgrade_command
from .update import TRACKED_PACKAGE, update_db

__all__ = [
    "BrowserSnapshot",
    "Change",
    "DiffEntry",
    "LOCKFILES",
    "LockDescriptor",
    "LockFormat",
    "MANIFEST",
    "PackageManager",
    "RegistryVersionRecord",
    "RewriteResult",
    "TRACKED_PACKAGE",
    "detect_lockfile",
    "diff_browsers_lists",
    "find_package_dir",
    "format_diff",
    "get_browsers_list",
    "get_latest_info",
    "install_commands",
    "parse_blocks",
    "parse_browsers_list",
    "registry_command",
    "serialize_blocks",
    "update_blocks",
    "update_db",
    "update_lockfile",
    "update_npm_lockfile",
    "update_package_manually",
    "update_with",
    "update_yarn_lockfile",
    "upgrade_command",
]
