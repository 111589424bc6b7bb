"""Argument definitions: General flags and core behavior.

Covers where to look for the project, which package to refresh, dry runs and
the version flag.
"""

from __future__ import annotations

import argparse
import os

from ..updatesets import TRACKED_PACKAGE


def add_general_args(p: argparse.ArgumentParser) -> None:
    """Attach general arguments to the parser.

    The default tracked package can be overridden through the
    ``BROWSERSLIST_UPDATER_PACKAGE`` environment variable.
    """
    general = p.add_argument_group("General")
    general.add_argument(
        "-C",
        "--cwd",
        default=".",
        help="Directory to start the package.json search from",
    )
    general.add_argument(
        "-p",
        "--package",
        default=os.environ.get("BROWSERSLIST_UPDATER_PACKAGE") or TRACKED_PACKAGE,
        help="Package whose lockfile entries are refreshed",
    )
    general.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Show what would change without writing the lockfile or installing",
    )
    general.add_argument(
        "-V", "--version", action="store_true", help="Print version and exit"
    )


__all__ = ["add_general_args"]
