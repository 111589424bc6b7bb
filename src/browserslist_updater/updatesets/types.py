"""Typed containers for a database update run.

These dataclasses describe the detected lockfile (``LockDescriptor``), the
registry's latest release (``RegistryVersionRecord``), the outcome of a
lockfile rewrite (``RewriteResult``), a point-in-time browser list
(``BrowserSnapshot``) and a single line of the browser diff (``DiffEntry``).
All of them are immutable once built.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, Tuple

from ..io_safe import read_text


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


class LockFormat(str, Enum):
    """How the tracked package gets refreshed for a lockfile."""

    STRUCTURED_TREE = "structured-tree"
    LINE_BLOCK = "line-block"
    DELEGATED = "delegated"


@dataclass(frozen=True)
class LockDescriptor:
    """A detected lockfile.

    ``content`` is loaded lazily through :meth:`load`; ``yarn_version`` is
    ``1`` for the classic ``yarn.lock`` dialect and ``2`` for berry.
    """

    manager: PackageManager
    format: LockFormat
    path: Path
    content: Optional[str] = field(default=None, repr=False)
    yarn_version: Optional[int] = None

    def load(self) -> "LockDescriptor":
        if self.content is not None:
            return self
        return replace(self, content=read_text(self.path))


@dataclass(frozen=True)
class RegistryVersionRecord:
    """Latest release metadata of the tracked package."""

    version: str
    tarball: str
    integrity: Optional[str] = None

    @classmethod
    def from_json(cls, data: object) -> Optional["RegistryVersionRecord"]:
        """Build a record from ``npm show --json`` shaped data.

        Returns ``None`` when ``version`` or ``dist.tarball`` is missing.
        """
        if not isinstance(data, dict):
            return None
        version = data.get("version")
        dist = data.get("dist") if isinstance(data.get("dist"), dict) else {}
        tarball = dist.get("tarball")
        integrity = dist.get("integrity")
        if not isinstance(version, str) or not version:
            return None
        if not isinstance(tarball, str) or not tarball:
            return None
        if not isinstance(integrity, str) or not integrity:
            integrity = None
        return cls(version=version, tarball=tarball, integrity=integrity)


@dataclass(frozen=True)
class RewriteResult:
    """New lockfile text plus every version of the package seen before."""

    content: str
    versions: FrozenSet[str] = frozenset()

    def up_to_date(self, latest: RegistryVersionRecord) -> bool:
        return self.versions == {latest.version}

    def sorted_versions(self) -> Tuple[str, ...]:
        return tuple(sorted(self.versions))


class BrowserSnapshot(Mapping[str, Tuple[str, ...]]):
    """Ordered ``browser -> versions`` mapping.

    Browsers keep first-seen order and each browser's versions are distinct
    and keep first-seen order, so iteration (and therefore diff output) is
    deterministic.
    """

    __slots__ = ("_data",)

    def __init__(self, pairs: Iterable[Tuple[str, str]] = ()) -> None:
        data: Dict[str, Tuple[str, ...]] = {}
        for browser, version in pairs:
            versions = data.get(browser, ())
            if version not in versions:
                data[browser] = versions + (version,)
        self._data = data

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "BrowserSnapshot":
        return cls(
            (browser, version)
            for browser, versions in mapping.items()
            for version in versions
        )

    def __getitem__(self, browser: str) -> Tuple[str, ...]:
        return self._data[browser]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if set(self) != set(other):
            return False
        return all(set(self[b]) == set(other[b]) for b in self)

    def __hash__(self) -> int:
        return hash(frozenset((b, frozenset(v)) for b, v in self._data.items()))

    def __repr__(self) -> str:
        return f"BrowserSnapshot({self._data!r})"


class Change(str, Enum):
    REMOVED = "-"
    ADDED = "+"


@dataclass(frozen=True)
class DiffEntry:
    browser: str
    version: str
    change: Change

    def __str__(self) -> str:
        return f"{self.change.value} {self.browser} {self.version}"


__all__ = [
    "BrowserSnapshot",
    "Change",
    "DiffEntry",
    "LockDescriptor",
    "LockFormat",
    "PackageManager",
    "RegistryVersionRecord",
    "RewriteResult",
]
