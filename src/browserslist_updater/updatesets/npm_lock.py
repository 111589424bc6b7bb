"""``package-lock.json`` / ``npm-shrinkwrap.json`` rewriting.

The tracked package is removed from the lockfile rather than bumped: the
following ``npm install <pkg>`` resolves and records the latest release
itself. Removal walks the nested ``dependencies`` tree (lockfile v1/v2) and
the flat ``packages`` map (lockfile v2/v3). Nodes are never mutated; each
step returns a fresh copy.
"""

from __future__ import annotations

import json
from typing import Any, Dict, FrozenSet, Set, Tuple

from ..errors import LockfileParseError
from .types import RegistryVersionRecord, RewriteResult


def _record(versions: Set[str], entry: Any) -> None:
    if isinstance(entry, dict) and isinstance(entry.get("version"), str):
        versions.add(entry["version"])


def strip_package(node: Any, package: str) -> Tuple[Any, FrozenSet[str]]:
    """Return ``node`` without ``package`` in any ``dependencies`` mapping.

    The second item holds every version recorded for the removed entries,
    at any depth.
    """
    if not isinstance(node, dict) or not isinstance(node.get("dependencies"), dict):
        return node, frozenset()

    versions: Set[str] = set()
    deps: Dict[str, Any] = {}
    for name, child in node["dependencies"].items():
        if name == package:
            _record(versions, child)
            continue
        new_child, found = strip_package(child, package)
        versions.update(found)
        deps[name] = new_child

    new_node = dict(node)
    new_node["dependencies"] = deps
    return new_node, frozenset(versions)


def strip_packages_map(root: Any, package: str) -> Tuple[Any, FrozenSet[str]]:
    """Drop ``node_modules/<package>`` entries from a v2/v3 ``packages`` map."""
    if not isinstance(root, dict) or not isinstance(root.get("packages"), dict):
        return root, frozenset()

    suffix = "node_modules/" + package
    versions: Set[str] = set()
    packages: Dict[str, Any] = {}
    for key, entry in root["packages"].items():
        if key == suffix or key.endswith("/" + suffix):
            _record(versions, entry)
            continue
        packages[key] = entry

    new_root = dict(root)
    new_root["packages"] = packages
    return new_root, frozenset(versions)


def update_npm_lockfile(
    content: str, latest: RegistryVersionRecord, package: str, path: str = ""
) -> RewriteResult:
    """Strip every ``package`` entry from an npm lockfile.

    ``latest`` is unused beyond the shared rewriter signature: npm records
    the new release during the follow-up install. Key order is preserved and
    the output uses two-space indentation.
    """
    try:
        tree = json.loads(content)
    except ValueError as e:
        raise LockfileParseError(f"Invalid JSON lockfile: {e}", path=path) from e

    tree, nested = strip_package(tree, package)
    tree, flat = strip_packages_map(tree, package)

    text = json.dumps(tree, indent=2, ensure_ascii=False)
    if content.endswith("\n"):
        text += "\n"
    return RewriteResult(content=text, versions=nested | flat)


__all__ = ["strip_package", "strip_packages_map", "update_npm_lockfile"]
