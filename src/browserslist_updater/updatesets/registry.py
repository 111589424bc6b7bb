"""Registry lookup of the tracked package's latest release.

The query goes through the package manager the project uses so registry
configuration (mirrors, auth) is honored. Only the shape of the JSON differs:
classic yarn wraps the manifest in a ``data`` envelope.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Union

from ..errors import RegistryQueryError
from ..logging_utils import log_event
from ..utils import Runner, run_command
from .types import LockDescriptor, PackageManager, RegistryVersionRecord


def registry_command(lock: LockDescriptor, package: str) -> List[str]:
    if lock.manager is PackageManager.YARN:
        if lock.yarn_version == 1:
            return ["yarn", "info", package, "--json"]
        return ["yarn", "npm", "info", package, "--json"]
    return ["npm", "show", package, "--json"]


def get_latest_info(
    lock: LockDescriptor,
    package: str,
    cwd: Union[str, Path] = ".",
    runner: Optional[Runner] = None,
) -> RegistryVersionRecord:
    """Return the latest release of ``package`` from the registry.

    Raises :class:`RegistryQueryError` when the command fails or prints
    something other than a manifest with ``version`` and ``dist.tarball``.
    """
    cmd = registry_command(lock, package)
    cmdline = " ".join(cmd)
    result = (runner or run_command)(cmd, cwd)
    if not result.ok:
        raise RegistryQueryError(
            f"Cannot fetch {package} info from the registry",
            command=cmdline,
            output=(result.stderr or result.stdout).strip(),
        )
    try:
        data = json.loads(result.stdout)
    except ValueError as e:
        raise RegistryQueryError(
            f"Registry returned invalid JSON for {package}: {e}",
            command=cmdline,
            output=result.stdout.strip()[:200],
        ) from e
    if lock.manager is PackageManager.YARN and lock.yarn_version == 1:
        data = data.get("data") if isinstance(data, dict) else None

    latest = RegistryVersionRecord.from_json(data)
    if latest is None:
        raise RegistryQueryError(
            f"Registry data for {package} lacks version or tarball",
            command=cmdline,
        )
    log_event("latest_version", package=package, version=latest.version)
    return latest


__all__ = ["get_latest_info", "registry_command"]
