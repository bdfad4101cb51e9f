import json

import pytest

from lotide.comparison import compare
from lotide.reporting import (
    FAIL_BANNER,
    PASS_BANNER,
    ColorScheme,
    OutputMode,
    Reporter,
    ReportStyle,
    inspect_value,
)


class TestTextReport:
    """Default colored layout."""

    def test_pass_report_exact_layout(self):
        report = Reporter().render(True, 1, 1)
        assert report == (
            "\n"
            "\x1b[32mTEST PASSED🥳🥳🥳\n\x1b[0m"
            "\x1b[36mresult:\n\x1b[0m1\n"
            "\x1b[36mexpected:\n\x1b[0m1\n"
            "\n----------"
        )

    def test_fail_report_uses_yellow_banner(self):
        report = Reporter().render(False, "a", "b")
        assert "\x1b[33mTEST FAILED💥💥💥\n\x1b[0m" in report
        assert PASS_BANNER not in report

    @pytest.mark.parametrize("actual, expected", [(1, 2), ([1], {"a": 1}), (None, "x")])
    def test_banner_follows_flag_not_values(self, actual, expected):
        reporter = Reporter()
        assert PASS_BANNER in reporter.render(True, actual, expected)
        assert FAIL_BANNER in reporter.render(False, actual, expected)

    def test_mapping_contents_are_expanded(self):
        report = Reporter(ReportStyle.plain()).render(True, {"a": "1", "b": "2"}, {"b": "2", "a": "1"})
        assert "{'a': '1', 'b': '2'}" in report
        assert "{'b': '2', 'a': '1'}" in report

    def test_report_ends_with_separator(self):
        assert Reporter().render(False, [], []).endswith("\n\n----------")

    def test_custom_colors(self):
        style = ReportStyle(colors=ColorScheme(success="<ok>", reset="</>"))
        report = Reporter(style).render(True, 1, 1)
        assert "<ok>TEST PASSED🥳🥳🥳\n</>" in report


class TestPlainReport:
    """No escape codes, same layout."""

    def test_plain_layout(self):
        report = Reporter(ReportStyle.plain()).render(False, [1, "2"], [1, 2])
        assert report == (
            "\n"
            "TEST FAILED💥💥💥\n"
            "result:\n[1, '2']\n"
            "expected:\n[1, 2]\n"
            "\n----------"
        )

    def test_no_escape_codes(self):
        report = Reporter(ReportStyle.plain()).render(True, {"a": 1}, {"a": 1})
        assert "\x1b" not in report


class TestMismatchLine:
    """render_result with show_mismatch."""

    def test_mismatch_line_added_when_enabled(self):
        actual = {"c": "1", "d": ["2", 3]}
        expected = {"c": "1", "d": ["2", 3, 4]}
        style = ReportStyle(mode=OutputMode.PLAIN, show_mismatch=True)
        report = Reporter(style).render_result(compare(actual, expected), actual, expected)
        assert "mismatch at d: length\n\n----------" in report

    def test_root_mismatch_shown_as_root(self):
        style = ReportStyle(mode=OutputMode.PLAIN, show_mismatch=True)
        report = Reporter(style).render_result(compare(1, "1"), 1, "1")
        assert "mismatch at <root>: type" in report

    def test_no_mismatch_line_by_default(self):
        reporter = Reporter()
        result = compare([1], [2])
        assert reporter.render_result(result, [1], [2]) == reporter.render(False, [1], [2])

    def test_no_mismatch_line_when_equal(self):
        style = ReportStyle(show_mismatch=True)
        report = Reporter(style).render_result(compare([1], [1]), [1], [1])
        assert "mismatch" not in report


class TestJsonReport:
    """Machine-readable mode."""

    def test_passed_payload(self):
        report = Reporter(ReportStyle(mode=OutputMode.JSON)).render(True, [1, 2], [1, 2])
        assert json.loads(report) == {
            "status": "passed",
            "equal": True,
            "actual": [1, 2],
            "expected": [1, 2],
        }

    def test_failed_payload_carries_path(self):
        reporter = Reporter(ReportStyle(mode=OutputMode.JSON))
        payload = json.loads(reporter.render_result(compare([1, "2"], [1, 2]), [1, "2"], [1, 2]))
        assert payload["status"] == "failed"
        assert payload["path"] == "[1]"
        assert payload["reason"] == "type"

    def test_unserializable_values_fall_back_to_text(self):
        reporter = Reporter(ReportStyle(mode=OutputMode.JSON))
        payload = json.loads(reporter.render(False, {1, 2}, None))
        assert payload["actual"] == "{1, 2}"
        assert payload["expected"] is None


class TestInspectValue:
    """Rendering never raises."""

    def test_self_referencing_list(self):
        items = [1]
        items.append(items)
        assert "Recursion" in inspect_value(items)

    def test_broken_repr(self):
        class Broken:
            def __repr__(self):
                raise RuntimeError("boom")

        assert inspect_value(Broken()) == "<unrepresentable Broken>"

    def test_strings_are_quoted(self):
        assert inspect_value("1") == "'1'"


class TestReportStyle:
    """Style defaults and NO_COLOR."""

    def test_defaults(self):
        style = ReportStyle()
        assert style.mode == OutputMode.TEXT
        assert style.colors.success == "\x1b[32m"
        assert style.colors.failure == "\x1b[33m"
        assert style.colors.label_result == "\x1b[36m"
        assert style.show_mismatch is False

    def test_no_color_env_selects_plain(self):
        assert ReportStyle.from_env({"NO_COLOR": "1"}).mode == OutputMode.PLAIN

    def test_empty_no_color_is_ignored(self):
        assert ReportStyle.from_env({"NO_COLOR": ""}).mode == OutputMode.TEXT

    def test_palette_is_empty_outside_text_mode(self):
        assert ReportStyle(mode=OutputMode.JSON).palette == ColorScheme.colorless()
