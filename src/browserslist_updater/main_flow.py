from __future__ import annotations
import sys
from typing import List, Optional

from .args import parse_args
from .errors import ExternalCommandFailure, UpdateDbError
from .logging_utils import configure_logging, log_event
from .ui import RED, c, err, warn
from .updatesets import update_db
from .utils import get_version


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool; returns the process exit code.

    This is the only place that turns errors into output and exit codes.
    """
    args = parse_args(argv)
    if args.version:
        print(get_version())
        return 0
    configure_logging(args.verbose, args.log_file, args.log_json, args.log_level)

    try:
        update_db(args.cwd, args.package, dry_run=args.dry_run)
    except ExternalCommandFailure as e:
        if e.output:
            print(c(e.output.rstrip("\n"), RED, sys.stderr), file=sys.stderr)
        log_event("command_failed", command=" ".join(e.cmd), returncode=e.returncode)
        err(str(e))
        return 1
    except UpdateDbError as e:
        log_event("update_failed", error_type=e.code)
        err(str(e))
        return 1
    except KeyboardInterrupt:
        print()
        warn("Aborted by user.")
        return 130
    return 0


__all__ = ["main"]
