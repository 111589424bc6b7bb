"""Utility helpers for the browserslist database updater.

This module gathers small, dependency‑free helpers used across the tool:
 - Version discovery for the installed/package build
 - A synchronous subprocess runner with captured output
 - The ancestor-directory search used to find ``package.json``
"""

from __future__ import annotations
import os
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Union

from .errors import ExternalCommandFailure
from .logging_utils import log_event

try:  # pragma: no cover
    from importlib.metadata import PackageNotFoundError, version as pkg_version
except Exception:  # pragma: no cover
    PackageNotFoundError = Exception  # type: ignore

    def pkg_version(_: str) -> str:  # type: ignore
        raise PackageNotFoundError

DIST_NAME = "browserslist-db-updater"


def get_version() -> str:
    """Return the tool version string.

    Lookup order (first match wins):
    1) ``importlib.metadata.version('browserslist-db-updater')``
    2) Parse ``pyproject.toml`` for ``project.version`` (source checkout)
    3) Fallback string ``"0.0.0+unknown"``
    """
    pv = getattr(sys.modules.get("update_browserslist_db"), "pkg_version", pkg_version)
    try:
        return pv(DIST_NAME)
    except Exception:
        pass

    pyproj = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproj.exists():
        try:
            text = pyproj.read_text(encoding="utf-8")
            try:
                import tomllib  # type: ignore

                data = tomllib.loads(text)  # type: ignore[name-defined]
                ver = (data.get("project") or {}).get("version")
                if isinstance(ver, str) and ver:
                    return ver
            except Exception:
                import re

                m = re.search(r"(?ms)^\[project\].*?^version\s*=\s*\"([^\"]+)\"", text)
                if m:
                    return m.group(1)
        except Exception:
            pass

    return "0.0.0+unknown"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a finished external command."""

    cmd: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


Runner = Callable[[Sequence[str], Union[str, Path]], CommandResult]


def run_command(cmd: Sequence[str], cwd: Union[str, Path] = ".") -> CommandResult:
    """Run ``cmd`` synchronously in ``cwd`` and capture its output.

    ``cmd[0]`` is resolved through ``shutil.which`` so shims such as
    ``npm.cmd`` work on Windows. There is no timeout. A missing executable is
    reported as exit code 127 instead of raising.
    """
    argv = list(cmd)
    resolved = shutil.which(argv[0])
    if resolved:
        argv[0] = resolved
    log_event("command_run", command=" ".join(cmd), path=str(cwd))
    try:
        proc = subprocess.run(
            argv,
            cwd=os.fspath(cwd),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        return CommandResult(list(cmd), 127, "", str(e))
    return CommandResult(list(cmd), proc.returncode, proc.stdout or "", proc.stderr or "")


def check_command(
    cmd: Sequence[str], cwd: Union[str, Path] = ".", runner: Optional[Runner] = None
) -> CommandResult:
    """Run ``cmd`` and raise :class:`ExternalCommandFailure` on non-zero exit."""
    result = (runner or run_command)(cmd, cwd)
    if not result.ok:
        raise ExternalCommandFailure(cmd, result.returncode, result.stdout, result.stderr)
    return result


def find_up(
    start: Union[str, Path], predicate: Callable[[Path, Iterable[str]], bool]
) -> Optional[Path]:
    """Return the nearest directory from ``start`` upward matching ``predicate``.

    ``predicate`` receives the directory and the names of its entries. The
    search stops at the filesystem root and returns ``None`` when nothing
    matches. Unreadable directories are skipped.
    """
    current = Path(start).resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        try:
            names = os.listdir(directory)
        except OSError:
            continue
        if predicate(directory, names):
            return directory
    return None


__all__ = [
    "CommandResult",
    "DIST_NAME",
    "Runner",
    "check_command",
    "find_up",
    "get_version",
    "pkg_version",
    "run_command",
]
