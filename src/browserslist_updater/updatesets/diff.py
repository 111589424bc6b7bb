"""Before/after comparison of browser snapshots."""

from __future__ import annotations

from typing import List, Mapping, Sequence

from ..ui import GREEN, RED, c
from .types import Change, DiffEntry


def diff_browsers_lists(
    old: Mapping[str, Sequence[str]], current: Mapping[str, Sequence[str]]
) -> List[DiffEntry]:
    """Return the version changes between two snapshots.

    Browsers of ``old`` come first in their order, then browsers only in
    ``current``. Within a browser removals precede additions. An empty list
    means nothing changed.
    """
    browsers = list(old) + [b for b in current if b not in old]
    entries: List[DiffEntry] = []
    for browser in browsers:
        old_versions = list(old.get(browser, ()))
        current_versions = list(current.get(browser, ()))
        intersection = [v for v in old_versions if v in current_versions]
        entries.extend(
            DiffEntry(browser, v, Change.REMOVED)
            for v in old_versions
            if v not in intersection
        )
        entries.extend(
            DiffEntry(browser, v, Change.ADDED)
            for v in current_versions
            if v not in intersection
        )
    return entries


def format_diff(entries: Sequence[DiffEntry]) -> str:
    return "\n".join(
        c(str(e), RED if e.change is Change.REMOVED else GREEN) for e in entries
    )


__all__ = ["diff_browsers_lists", "format_diff"]
