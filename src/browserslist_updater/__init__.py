"""Refresh caniuse-lite in a project's lockfile and report browser changes."""

import sys


def main() -> int:
    """Console entrypoint for the ``update-browserslist-db`` command."""
    from .main_flow import main as _main

    return _main(sys.argv[1:])


__all__ = ["main"]
