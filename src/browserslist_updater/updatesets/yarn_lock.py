"""Classic ``yarn.lock`` (v1) rewriting.

The file is treated as a list of blocks separated by blank-line runs. The
runs are kept as blocks of their own so serializing the list reproduces the
input byte for byte; the file's final newline is kept as a separator too,
so the last entry has the same line count as the others. Only blocks
declaring the tracked package are touched, and only on the lines they
already have::

    caniuse-lite@^1.0.0:
      version "1.0.0"
      resolved "https://registry.yarnpkg.com/caniuse-lite/-/caniuse-lite-1.0.0.tgz"
      integrity sha512-...

Line 4 is only rewritten when the block is exactly four lines long; a block
listing dependencies or lacking an integrity line keeps its remaining lines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import FrozenSet, List, Sequence, Set, Tuple

from ..errors import LockfileParseError
from .types import RegistryVersionRecord, RewriteResult

_SEPARATOR_RE = re.compile(r"(\n{2,}|\n\Z)")
_VERSION_RE = re.compile(r'version "(.*?)"')
_VERSION_FIELD_RE = re.compile(r'version "[^"]*"')
_RESOLVED_FIELD_RE = re.compile(r'resolved "[^"]+"')
_INTEGRITY_FIELD_RE = re.compile(r"integrity .+")


@dataclass(frozen=True)
class Block:
    lines: Tuple[str, ...]
    separator: bool = False

    @property
    def header(self) -> str:
        return self.lines[0] if self.lines else ""

    def declares(self, package: str) -> bool:
        return not self.separator and (package + "@") in self.header

    def text(self) -> str:
        return "\n".join(self.lines)


def parse_blocks(text: str) -> List[Block]:
    """Split lockfile text into entry blocks and blank-line separators."""
    blocks: List[Block] = []
    for i, chunk in enumerate(_SEPARATOR_RE.split(text)):
        # re.split puts captured separators at odd indexes
        blocks.append(Block(tuple(chunk.split("\n")), separator=i % 2 == 1))
    return blocks


def serialize_blocks(blocks: Sequence[Block]) -> str:
    return "".join(block.text() for block in blocks)


def block_version(block: Block, path: str = "") -> str:
    """Return the ``version "X"`` value from the second line of ``block``."""
    match = _VERSION_RE.search(block.lines[1]) if len(block.lines) > 1 else None
    if not match:
        raise LockfileParseError(
            "Cannot read version of lockfile entry", path=path, entry=block.header
        )
    return match.group(1)


def update_block(block: Block, latest: RegistryVersionRecord) -> Block:
    """Point a package block at ``latest``, keeping its line count."""
    lines = list(block.lines)
    lines[1] = _VERSION_FIELD_RE.sub(
        lambda _m: f'version "{latest.version}"', lines[1]
    )
    if len(lines) > 2:
        lines[2] = _RESOLVED_FIELD_RE.sub(
            lambda _m: f'resolved "{latest.tarball}"', lines[2]
        )
    if len(lines) == 4:
        if latest.integrity:
            lines[3] = _INTEGRITY_FIELD_RE.sub(
                lambda _m: f"integrity {latest.integrity}", lines[3]
            )
        else:
            lines[3] = ""
    return replace(block, lines=tuple(lines))


def update_blocks(
    blocks: Sequence[Block],
    latest: RegistryVersionRecord,
    package: str,
    path: str = "",
) -> Tuple[List[Block], FrozenSet[str]]:
    """Rewrite outdated ``package`` blocks; return new blocks and seen versions."""
    versions: Set[str] = set()
    updated: List[Block] = []
    for block in blocks:
        if block.declares(package):
            version = block_version(block, path)
            versions.add(version)
            if version != latest.version:
                block = update_block(block, latest)
        updated.append(block)
    return updated, frozenset(versions)


def update_yarn_lockfile(
    content: str, latest: RegistryVersionRecord, package: str, path: str = ""
) -> RewriteResult:
    blocks, versions = update_blocks(parse_blocks(content), latest, package, path)
    return RewriteResult(content=serialize_blocks(blocks), versions=versions)


__all__ = [
    "Block",
    "block_version",
    "parse_blocks",
    "serialize_blocks",
    "update_block",
    "update_blocks",
    "update_yarn_lockfile",
]
