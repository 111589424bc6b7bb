import sys
import tempfile
import unittest
from pathlib import Path
import importlib.util


def load_cli():
    spec = importlib.util.spec_from_file_location(
        "update_browserslist_db",
        Path(__file__).resolve().parents[1] / "update-browserslist-db.py",
    )
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module


cli = load_cli()

from browserslist_updater.updatesets import detect  # noqa: E402

YARN_V1 = "# THIS IS AN AUTOGENERATED FILE. DO NOT EDIT THIS FILE DIRECTLY.\n# yarn lockfile v1\n\n\n"
YARN_BERRY = '__metadata:\n  version: 6\n  cacheKey: 8\n\n"caniuse-lite@npm:^1.0.0":\n  version: 1.0.0\n'


def make_project(root: Path, *lockfiles: str, yarn: str = YARN_V1) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "package.json").write_text('{"name": "app"}\n', encoding="utf-8")
    for name in lockfiles:
        text = yarn if name == "yarn.lock" else "{}\n"
        (root / name).write_text(text, encoding="utf-8")
    return root


class LockfileDetectionTests(unittest.TestCase):
    def test_pnpm_wins_over_npm(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = make_project(Path(tmp), "package-lock.json", "pnpm-lock.yaml")
            lock = cli.detect_lockfile(root)
            self.assertEqual(lock.manager, cli.PackageManager.PNPM)
            self.assertEqual(lock.format, cli.LockFormat.DELEGATED)
            self.assertEqual(lock.path.name, "pnpm-lock.yaml")

    def test_npm_lockfile(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = make_project(Path(tmp), "package-lock.json")
            lock = cli.detect_lockfile(root)
            self.assertEqual(lock.manager, cli.PackageManager.NPM)
            self.assertEqual(lock.format, cli.LockFormat.STRUCTURED_TREE)
            self.assertIsNone(lock.content)
            self.assertIsNone(lock.yarn_version)

    def test_npm_wins_over_yarn_and_shrinkwrap(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = make_project(
                Path(tmp), "yarn.lock", "npm-shrinkwrap.json", "package-lock.json"
            )
            self.assertEqual(cli.detect_lockfile(root).path.name, "package-lock.json")

    def test_yarn_wins_over_shrinkwrap(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = make_project(Path(tmp), "yarn.lock", "npm-shrinkwrap.json")
            self.assertEqual(cli.detect_lockfile(root).path.name, "yarn.lock")

    def test_shrinkwrap_fallback(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = make_project(Path(tmp), "npm-shrinkwrap.json")
            lock = cli.detect_lockfile(root)
            self.assertEqual(lock.manager, cli.PackageManager.NPM)
            self.assertEqual(lock.path.name, "npm-shrinkwrap.json")

    def test_classic_yarn_is_loaded_and_rewritten_in_place(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = make_project(Path(tmp), "yarn.lock")
            lock = cli.detect_lockfile(root)
            self.assertEqual(lock.manager, cli.PackageManager.YARN)
            self.assertEqual(lock.yarn_version, 1)
            self.assertEqual(lock.format, cli.LockFormat.LINE_BLOCK)
            self.assertEqual(lock.content, YARN_V1)

    def test_yarn_berry_is_delegated(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = make_project(Path(tmp), "yarn.lock", yarn=YARN_BERRY)
            lock = cli.detect_lockfile(root)
            self.assertEqual(lock.yarn_version, 2)
            self.assertEqual(lock.format, cli.LockFormat.DELEGATED)

    def test_walks_up_to_package_dir(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = make_project(Path(tmp) / "app", "package-lock.json")
            nested = root / "src" / "components"
            nested.mkdir(parents=True)
            lock = cli.detect_lockfile(nested)
            self.assertEqual(lock.path, (root / "package-lock.json").resolve())

    def test_nearest_manifest_wins(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            outer = make_project(Path(tmp), "package-lock.json")
            inner = make_project(outer / "packages" / "web", "yarn.lock")
            lock = cli.detect_lockfile(inner)
            self.assertEqual(lock.path.name, "yarn.lock")

    def test_missing_lockfile(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = make_project(Path(tmp))
            with self.assertRaises(cli.NoLockfileFoundError) as ctx:
                cli.detect_lockfile(root)
            self.assertIn("yarn install", str(ctx.exception))
            self.assertEqual(ctx.exception.code, "E_NO_LOCKFILE")

    def test_missing_manifest(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(cli.NoManifestFoundError) as ctx:
                cli.detect_lockfile(tmp)
            self.assertIn("Cannot find package.json", str(ctx.exception))


def test_yarn_lockfile_version_marker():
    assert detect.yarn_lockfile_version(YARN_V1) == 1
    assert detect.yarn_lockfile_version(YARN_BERRY) == 2
    assert detect.yarn_lockfile_version("") == 2


def test_find_up_passes_entry_names(tmp_path):
    (tmp_path / "marker.txt").write_text("", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    found = cli.find_up(nested, lambda _dir, names: "marker.txt" in names)
    assert found == tmp_path.resolve()


def test_find_up_returns_none(tmp_path):
    assert cli.find_up(tmp_path, lambda _dir, names: False) is None


def test_lock_descriptor_load_reads_once(tmp_path):
    path = tmp_path / "package-lock.json"
    path.write_text("{}\n", encoding="utf-8")
    lock = cli.LockDescriptor(
        manager=cli.PackageManager.NPM,
        format=cli.LockFormat.STRUCTURED_TREE,
        path=path,
    )
    loaded = lock.load()
    assert lock.content is None
    assert loaded.content == "{}\n"
    path.write_text("changed", encoding="utf-8")
    assert loaded.load() is loaded


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
