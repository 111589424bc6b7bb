"""Lockfile detection.

:func:`detect_lockfile` finds the nearest ``package.json`` above the working
directory and picks the lockfile that decides how the tracked package gets
refreshed. The probe order is a policy: a pnpm lockfile wins over a
coexisting npm lockfile, and ``npm-shrinkwrap.json`` is only a fallback.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Tuple, Union

from ..errors import NoLockfileFoundError, NoManifestFoundError
from ..io_safe import read_text
from ..logging_utils import log_event
from ..utils import find_up
from .types import LockDescriptor, LockFormat, PackageManager

MANIFEST = "package.json"

# (filename, manager, format) in probe order
LOCKFILES: Tuple[Tuple[str, PackageManager, LockFormat], ...] = (
    ("pnpm-lock.yaml", PackageManager.PNPM, LockFormat.DELEGATED),
    ("package-lock.json", PackageManager.NPM, LockFormat.STRUCTURED_TREE),
    ("yarn.lock", PackageManager.YARN, LockFormat.LINE_BLOCK),
    ("npm-shrinkwrap.json", PackageManager.NPM, LockFormat.STRUCTURED_TREE),
)

_YARN_V1_RE = re.compile(r"# yarn lockfile v1")


def find_package_dir(cwd: Union[str, Path] = ".") -> Optional[Path]:
    """Return the nearest ancestor of ``cwd`` holding ``package.json``."""
    return find_up(cwd, lambda _dir, names: MANIFEST in names)


def yarn_lockfile_version(content: str) -> int:
    """Return ``1`` for the classic ``yarn.lock`` dialect, ``2`` otherwise."""
    return 1 if _YARN_V1_RE.search(content) else 2


def detect_lockfile(cwd: Union[str, Path] = ".") -> LockDescriptor:
    """Locate the project lockfile starting from ``cwd``.

    Raises :class:`NoManifestFoundError` when no ancestor has a
    ``package.json`` and :class:`NoLockfileFoundError` when the package
    directory has none of the known lockfiles. Classic yarn lockfiles are
    always returned with their text loaded; berry lockfiles are refreshed by
    yarn itself and use the delegated format.
    """
    package_dir = find_package_dir(cwd)
    if package_dir is None:
        raise NoManifestFoundError(str(cwd))

    for name, manager, fmt in LOCKFILES:
        path = package_dir / name
        if not path.exists():
            continue
        lock = LockDescriptor(manager=manager, format=fmt, path=path)
        if manager is PackageManager.YARN:
            content = read_text(path)
            version = yarn_lockfile_version(content)
            lock = LockDescriptor(
                manager=manager,
                format=LockFormat.LINE_BLOCK if version == 1 else LockFormat.DELEGATED,
                path=path,
                content=content,
                yarn_version=version,
            )
        log_event(
            "lockfile_detected",
            manager=lock.manager.value,
            path=str(path),
            version=lock.yarn_version,
        )
        return lock

    raise NoLockfileFoundError(str(package_dir))


__all__ = [
    "LOCKFILES",
    "MANIFEST",
    "detect_lockfile",
    "find_package_dir",
    "yarn_lockfile_version",
]
