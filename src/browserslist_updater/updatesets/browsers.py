"""Target browser snapshots.

``npx browserslist`` prints one ``<browser> <version>`` pair per line for the
project's query. The list is captured before and after the update so the
report can show what the new data changed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..errors import CaptureError
from ..logging_utils import log_event
from ..utils import Runner, run_command
from .types import BrowserSnapshot

BROWSERSLIST_CMD = ("npx", "browserslist")


def parse_browsers_list(text: str) -> BrowserSnapshot:
    """Group ``browser version`` lines into a snapshot.

    Blank lines are ignored, so empty output gives an empty snapshot. Any
    other line must have exactly two whitespace-separated fields.
    """
    pairs: List[Tuple[str, str]] = []
    for line in text.splitlines():
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2:
            raise CaptureError(
                f"Unexpected browserslist output line: {line.strip()!r}",
                command=" ".join(BROWSERSLIST_CMD),
            )
        pairs.append((fields[0], fields[1]))
    return BrowserSnapshot(pairs)


def get_browsers_list(
    cwd: Union[str, Path] = ".", runner: Optional[Runner] = None
) -> BrowserSnapshot:
    """Run browserslist in ``cwd`` and parse its output.

    Raises :class:`CaptureError` on a non-zero exit or unparsable output.
    """
    result = (runner or run_command)(list(BROWSERSLIST_CMD), cwd)
    if not result.ok:
        raise CaptureError(
            f"browserslist exited with code {result.returncode}",
            command=" ".join(BROWSERSLIST_CMD),
            output=(result.stderr or result.stdout).strip(),
        )
    snapshot = parse_browsers_list(result.stdout)
    log_event("browsers_snapshot", level=logging.DEBUG, browsers=len(snapshot))
    return snapshot


__all__ = ["BROWSERSLIST_CMD", "get_browsers_list", "parse_browsers_list"]
