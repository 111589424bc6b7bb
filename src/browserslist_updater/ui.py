"""Console UI helpers (color and status printers).

ANSI color codes are gated by a conservative capability check that honours
``NO_COLOR`` and only colors output headed for a TTY.
"""

from __future__ import annotations
import os
import sys
from typing import Optional, TextIO

# ANSI color/style codes (used only when supports_color() returns True)
RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"


def supports_color(stream: Optional[TextIO] = None) -> bool:
    """Return True when ANSI colors are likely supported on ``stream``.

    ``stream`` defaults to ``sys.stdout``. Honors ``NO_COLOR`` to disable
    color globally. Any errors during detection result in ``False``.
    """
    try:
        if os.environ.get("NO_COLOR"):
            return False
        target = sys.stdout if stream is None else stream
        return bool(getattr(target, "isatty", lambda: False)())
    except Exception:
        return False


def c(s: str, color: str, stream: Optional[TextIO] = None) -> str:
    """Colorize ``s`` when ``stream`` (default stdout) supports it.

    ``color`` may combine several escape prefixes (e.g. ``BOLD + GREEN``).
    """
    return f"{color}{s}{RESET}" if supports_color(stream) else s


def warn(msg: str) -> None:
    """Print a warning message prefixed with "!"."""
    print(c("! ", YELLOW) + msg)


def err(msg: str) -> None:
    """Print an error message prefixed with "✗" to stderr."""
    print(c("✗ ", RED, sys.stderr) + msg, file=sys.stderr)


__all__ = [
    "supports_color",
    "c",
    "warn",
    "err",
    "RESET",
    "BOLD",
    "RED",
    "GREEN",
    "YELLOW",
]
