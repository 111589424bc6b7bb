"""Human-readable progress and report lines.

Every function takes an ``out`` callable receiving one (possibly multi-line)
message, ``print`` by default, so callers and tests can redirect output.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..errors import UpdateDbError
from ..ui import BOLD, GREEN, RED, YELLOW, c
from .diff import format_diff
from .types import DiffEntry

Out = Callable[[str], None]


def report_latest(out: Out, version: str) -> None:
    out("Latest version:     " + c(version, BOLD + GREEN))


def report_up_to_date(out: Out, package: str, version: str) -> None:
    out(
        "Installed version:  "
        + c(version, BOLD + GREEN)
        + "\n"
        + c(f"{package} is up to date", BOLD + GREEN)
    )


def report_installed(out: Out, package: str, versions: Sequence[str]) -> None:
    label = "Installed version:  " if len(versions) <= 1 else "Installed versions: "
    out(
        label
        + c(", ".join(versions) or "none", BOLD + RED)
        + "\n"
        + f"Removing old {package} from lock file"
    )


def report_command(out: Out, title: str, cmd: Sequence[str]) -> None:
    out(title + "\n" + c("$ " + " ".join(cmd), YELLOW))


def report_dry_run(out: Out, path: str) -> None:
    out(c(f"Dry run: {path} was not modified and nothing was installed", YELLOW))


def report_updated(out: Out, package: str) -> None:
    out(f"{package} has been successfully updated")


def report_browser_changes(
    out: Out,
    changes: Optional[Sequence[DiffEntry]],
    error: Optional[UpdateDbError] = None,
) -> None:
    """Print the target browser diff, or the degraded notice after ``error``."""
    if error is not None:
        out(
            c(
                "\n"
                + str(error)
                + "\n\nProblem with browser list retrieval.\n"
                + "Target browser changes won’t be shown.",
                RED,
            )
        )
    elif changes:
        out("\nTarget browser changes:")
        out(format_diff(changes))
    else:
        out("\n" + c("No target browser changes", GREEN))


__all__ = [
    "Out",
    "report_browser_changes",
    "report_command",
    "report_dry_run",
    "report_installed",
    "report_latest",
    "report_up_to_date",
    "report_updated",
]
