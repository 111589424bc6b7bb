"""Rewriter dispatch by lockfile format."""

from __future__ import annotations

from ..logging_utils import log_event
from .npm_lock import update_npm_lockfile
from .types import LockDescriptor, LockFormat, RegistryVersionRecord, RewriteResult
from .yarn_lock import update_yarn_lockfile

_REWRITERS = {
    LockFormat.STRUCTURED_TREE: update_npm_lockfile,
    LockFormat.LINE_BLOCK: update_yarn_lockfile,
}


def update_lockfile(
    lock: LockDescriptor, latest: RegistryVersionRecord, package: str
) -> RewriteResult:
    """Rewrite ``lock`` in memory; the file itself is not touched.

    Raises ``ValueError`` for the delegated format, which has no rewriter.
    """
    rewriter = _REWRITERS.get(lock.format)
    if rewriter is None:
        raise ValueError(f"No lockfile rewriter for {lock.format.value} format")
    lock = lock.load()
    result = rewriter(lock.content or "", latest, package, str(lock.path))
    log_event(
        "lockfile_rewritten",
        package=package,
        path=str(lock.path),
        versions=sorted(result.versions),
    )
    return result


__all__ = ["update_lockfile"]
