"""Typed error model with stable, machine-readable error codes.

Every failure the updater can report is an :class:`UpdateDbError`. Errors
propagate up to ``main_flow.main`` which prints them and picks the exit code.
:class:`CaptureError` is the only one recovered locally (the browser diff is
skipped instead of aborting the run).
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Optional, Sequence


class ErrorCode(str, Enum):
    """Stable error identifiers."""

    NO_MANIFEST = "E_NO_MANIFEST"
    NO_LOCKFILE = "E_NO_LOCKFILE"
    REGISTRY = "E_REGISTRY"
    CAPTURE = "E_CAPTURE"
    COMMAND = "E_COMMAND"
    LOCKFILE_PARSE = "E_LOCKFILE_PARSE"
    LOCKFILE_IO = "E_LOCKFILE_IO"


class UpdateDbError(Exception):
    """Base error class that carries code, optional hint, and context."""

    code: str
    hint: Optional[str]
    context: Mapping[str, str]

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        hint: Optional[str] = None,
        context: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code.value
        self.hint = hint
        self.context = dict(context or {})

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        for k, v in self.context.items():
            if v:
                parts.append(f"  {k}: {v}")
        return "\n".join(parts)

    def to_dict(self) -> dict:
        payload: dict = {
            "code": self.code,
            "message": str(self),
            "context": dict(self.context),
        }
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class NoManifestFoundError(UpdateDbError):
    def __init__(self, start: str) -> None:
        super().__init__(
            "Cannot find package.json.",
            code=ErrorCode.NO_MANIFEST,
            hint="Is this the right directory to run `npx update-browserslist-db` in?",
            context={"start": start},
        )


class NoLockfileFoundError(UpdateDbError):
    def __init__(self, package_dir: str) -> None:
        super().__init__(
            "No lockfile found.",
            code=ErrorCode.NO_LOCKFILE,
            hint='Run "npm install", "yarn install" or "pnpm install"',
            context={"directory": package_dir},
        )


class RegistryQueryError(UpdateDbError):
    def __init__(self, message: str, *, command: str = "", output: str = "") -> None:
        super().__init__(
            message,
            code=ErrorCode.REGISTRY,
            context={"command": command, "output": output},
        )


class CaptureError(UpdateDbError):
    def __init__(self, message: str, *, command: str = "", output: str = "") -> None:
        super().__init__(
            message,
            code=ErrorCode.CAPTURE,
            context={"command": command, "output": output},
        )


class ExternalCommandFailure(UpdateDbError):
    """A package-manager command exited non-zero (or could not start)."""

    def __init__(
        self,
        cmd: Sequence[str],
        returncode: int,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        cmdline = " ".join(self.cmd)
        super().__init__(
            f"Problem with `{cmdline}` call. Run it manually.",
            code=ErrorCode.COMMAND,
            context={"exit code": str(returncode)},
        )

    @property
    def output(self) -> str:
        return "".join(part for part in (self.stdout, self.stderr) if part)


class LockfileParseError(UpdateDbError):
    def __init__(self, message: str, *, path: str = "", entry: str = "") -> None:
        super().__init__(
            message,
            code=ErrorCode.LOCKFILE_PARSE,
            hint="The lockfile was left untouched; regenerate it with your package manager.",
            context={"path": path, "entry": entry},
        )


class LockfileAccessError(UpdateDbError):
    def __init__(self, message: str, *, path: str = "", reason: str = "") -> None:
        super().__init__(
            message,
            code=ErrorCode.LOCKFILE_IO,
            hint="Check that the lockfile exists and is readable and writable.",
            context={"path": path, "reason": reason},
        )


__all__ = [
    "CaptureError",
    "ErrorCode",
    "ExternalCommandFailure",
    "LockfileAccessError",
    "LockfileParseError",
    "NoLockfileFoundError",
    "NoManifestFoundError",
    "RegistryQueryError",
    "UpdateDbError",
]
