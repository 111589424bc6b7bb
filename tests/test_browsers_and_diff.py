import unittest

import pytest

from browserslist_updater.errors import CaptureError
from browserslist_updater.updatesets.browsers import get_browsers_list, parse_browsers_list
from browserslist_updater.updatesets.diff import diff_browsers_lists, format_diff
from browserslist_updater.updatesets.types import BrowserSnapshot, Change, DiffEntry
from browserslist_updater.utils import CommandResult


def runner_returning(returncode, stdout="", stderr=""):
    calls = []

    def fake_run(cmd, cwd):
        calls.append((list(cmd), cwd))
        return CommandResult(list(cmd), returncode, stdout, stderr)

    fake_run.calls = calls
    return fake_run


class ParseBrowsersListTests(unittest.TestCase):
    def test_groups_versions_by_browser(self) -> None:
        snapshot = parse_browsers_list("and_chr 91\nchrome 91\nchrome 90\nie 11\n")
        self.assertEqual(list(snapshot), ["and_chr", "chrome", "ie"])
        self.assertEqual(snapshot["chrome"], ("91", "90"))

    def test_empty_output_is_empty_snapshot(self) -> None:
        self.assertEqual(len(parse_browsers_list("")), 0)
        self.assertEqual(len(parse_browsers_list("\n  \n")), 0)

    def test_tolerates_surrounding_whitespace(self) -> None:
        snapshot = parse_browsers_list("  safari   14.1 \r\n")
        self.assertEqual(dict(snapshot), {"safari": ("14.1",)})

    def test_duplicate_lines_collapse(self) -> None:
        snapshot = parse_browsers_list("ie 11\nie 11\n")
        self.assertEqual(snapshot["ie"], ("11",))

    def test_unparsable_line_raises(self) -> None:
        with self.assertRaises(CaptureError):
            parse_browsers_list("chrome 91\nnot a browser line\n")


def test_get_browsers_list_runs_npx_browserslist(tmp_path):
    runner = runner_returning(0, "firefox 89\n")
    snapshot = get_browsers_list(tmp_path, runner)
    assert runner.calls == [(["npx", "browserslist"], tmp_path)]
    assert dict(snapshot) == {"firefox": ("89",)}


def test_get_browsers_list_failure_raises_capture_error(tmp_path):
    runner = runner_returning(1, "", "Unknown browser query")
    with pytest.raises(CaptureError) as exc:
        get_browsers_list(tmp_path, runner)
    assert exc.value.code == "E_CAPTURE"
    assert "Unknown browser query" in str(exc.value)


def test_snapshot_equality_ignores_version_order():
    a = BrowserSnapshot.from_mapping({"ie": ["10", "11"], "chrome": ["90"]})
    b = BrowserSnapshot.from_mapping({"chrome": ["90"], "ie": ["11", "10"]})
    assert a == b
    assert hash(a) == hash(b)
    assert a != BrowserSnapshot.from_mapping({"ie": ["11"], "chrome": ["90"]})


OLD = BrowserSnapshot.from_mapping({"IE": ["10", "11"], "Chrome": ["90"]})
NEW = BrowserSnapshot.from_mapping(
    {"IE": ["11"], "Chrome": ["90", "91"], "Firefox": ["89"]}
)


def test_diff_order_and_content():
    assert diff_browsers_lists(OLD, NEW) == [
        DiffEntry("IE", "10", Change.REMOVED),
        DiffEntry("Chrome", "91", Change.ADDED),
        DiffEntry("Firefox", "89", Change.ADDED),
    ]


def test_diff_accepts_plain_mappings():
    old = {"IE": ["10", "11"], "Chrome": ["90"]}
    new = {"IE": ["11"], "Chrome": ["90", "91"], "Firefox": ["89"]}
    assert [str(e) for e in diff_browsers_lists(old, new)] == [
        "- IE 10",
        "+ Chrome 91",
        "+ Firefox 89",
    ]


def test_removals_precede_additions_within_browser():
    old = {"safari": ["14", "13"]}
    new = {"safari": ["15", "14"]}
    assert [str(e) for e in diff_browsers_lists(old, new)] == [
        "- safari 13",
        "+ safari 15",
    ]


@pytest.mark.parametrize(
    "old,new",
    [
        (OLD, NEW),
        ({}, {"op_mini": ["all"]}),
        ({"edge": ["91"]}, {}),
        ({"ie": ["11"]}, {"ie": ["11"]}),
    ],
)
def test_diff_is_content_symmetric(old, new):
    forward = diff_browsers_lists(old, new)
    backward = diff_browsers_lists(new, old)
    removed = {(e.browser, e.version) for e in forward if e.change is Change.REMOVED}
    added_back = {(e.browser, e.version) for e in backward if e.change is Change.ADDED}
    assert removed == added_back
    added = {(e.browser, e.version) for e in forward if e.change is Change.ADDED}
    removed_back = {
        (e.browser, e.version) for e in backward if e.change is Change.REMOVED
    }
    assert added == removed_back


def test_diff_empty_iff_identical():
    assert diff_browsers_lists(OLD, OLD) == []
    same = BrowserSnapshot.from_mapping({"Chrome": ["90"], "IE": ["11", "10"]})
    assert diff_browsers_lists(OLD, same) == []
    assert diff_browsers_lists(OLD, NEW) != []


def test_format_diff_plain(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert format_diff(diff_browsers_lists(OLD, NEW)) == (
        "- IE 10\n+ Chrome 91\n+ Firefox 89"
    )


def test_format_diff_colors(monkeypatch):
    import browserslist_updater.updatesets.diff as diff_mod

    monkeypatch.setattr("browserslist_updater.ui.supports_color", lambda stream=None: True)
    out = diff_mod.format_diff([DiffEntry("IE", "10", Change.REMOVED)])
    assert out == "\033[31m- IE 10\033[0m"


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
