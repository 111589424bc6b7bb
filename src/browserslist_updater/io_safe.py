"""Safe I/O helpers for lockfile reads and writes.

Lockfiles are replaced as a whole: the new text goes to a temporary file in
the same directory, is fsynced, then renamed over the original. No backup is
kept; the package manager can always regenerate the lockfile.

Both helpers raise typed errors so failures reach the CLI error boundary.
"""

from __future__ import annotations
import os
import tempfile
from pathlib import Path

from .errors import LockfileAccessError, LockfileParseError


def read_text(path: Path) -> str:
    """Read ``path`` as UTF‑8 without newline translation.

    Undecodable bytes raise :class:`LockfileParseError`; any other read
    failure raises :class:`LockfileAccessError`.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise LockfileParseError(
            "Lockfile is not valid UTF-8", path=str(path), entry=str(e)
        ) from e
    except OSError as e:
        raise LockfileAccessError(
            "Cannot read lockfile", path=str(path), reason=str(e)
        ) from e


def _discard(tmppath: str) -> None:
    try:
        os.remove(tmppath)
    except OSError:  # pragma: no cover
        pass


def atomic_write(path: Path, text: str) -> None:
    """Atomically write UTF‑8 text to ``path`` with fsync (no backup).

    Newlines are written exactly as given so untouched lockfile lines stay
    byte-identical. The temporary file is removed on failure and the error is
    raised as :class:`LockfileAccessError`.
    """
    path = Path(path)
    try:
        fd, tmppath = tempfile.mkstemp(
            prefix=path.name + ".", suffix=".tmp", dir=str(path.parent)
        )
    except OSError as e:
        raise LockfileAccessError(
            "Cannot write lockfile", path=str(path), reason=str(e)
        ) from e
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError:  # pragma: no cover
                pass
        if path.exists():
            try:
                os.chmod(tmppath, path.stat().st_mode & 0o777)
            except OSError:  # pragma: no cover
                pass
        os.replace(tmppath, path)
    except OSError as e:
        _discard(tmppath)
        raise LockfileAccessError(
            "Cannot write lockfile", path=str(path), reason=str(e)
        ) from e
    except Exception:
        _discard(tmppath)
        raise


__all__ = ["atomic_write", "read_text"]
