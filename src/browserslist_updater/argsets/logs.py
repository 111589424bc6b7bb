"""Argument definitions: Logging flags."""

from __future__ import annotations

import argparse


def add_logging_args(p: argparse.ArgumentParser) -> None:
    """Attach verbosity and log destination arguments to the parser."""
    logs = p.add_argument_group("Logging")
    logs.add_argument(
        "-v", "--verbose", action="store_true", help="Enable INFO/DEBUG logging"
    )
    logs.add_argument(
        "-ll",
        "--log-level",
        "--level",
        choices=["debug", "info", "warning", "error"],
        help="Explicit log level (overrides --verbose)",
    )
    logs.add_argument("-f", "--log-file", help="Write logs to a file")
    logs.add_argument(
        "-J", "--log-json", action="store_true", help="Also log JSON to stdout"
    )


__all__ = ["add_logging_args"]
