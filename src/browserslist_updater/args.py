"""Argument parsing.

Delegates option groups to argsets/ modules to keep concerns separated.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments (defaults to ``sys.argv[1:]``)."""
    p = argparse.ArgumentParser(
        prog="update-browserslist-db",
        description=(
            "Refresh caniuse-lite in the project lockfile and show how the "
            "target browser list changed"
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    from .argsets import add_general_args, add_logging_args

    add_general_args(p)
    add_logging_args(p)

    if argv is None:
        argv = sys.argv[1:]
    return p.parse_args(argv)


__all__ = ["parse_args"]
