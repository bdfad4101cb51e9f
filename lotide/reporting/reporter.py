"""
Reporter for rendering assertion outcomes.

This module provides the Reporter class, a pure formatter that turns
a comparison outcome and its two inputs into a pass/fail report.
"""

from __future__ import annotations

import json
import pprint
from typing import Any

from ..comparison import ComparisonResult
from .models import OutputMode, ReportStyle

PASS_BANNER = "TEST PASSED🥳🥳🥳"
FAIL_BANNER = "TEST FAILED💥💥💥"
SEPARATOR = "----------"


class Reporter:
    """
    Renders pass/fail reports.

    The Reporter does no I/O: callers print (or store) the returned
    string. Rendering never raises for any input.

    Example:
        reporter = Reporter()
        print(reporter.render(True, {"a": 1}, {"a": 1}))

        # Without colors, e.g. for CI logs
        reporter = Reporter(ReportStyle.plain())
    """

    def __init__(self, style: ReportStyle | None = None):
        self.style = style or ReportStyle()

    def render(self, equal: bool, actual: Any, expected: Any) -> str:
        """
        Render a report for an equality check.

        Args:
            equal: Outcome of the comparison
            actual: The value that was checked
            expected: The value it was checked against

        Returns:
            The formatted report
        """
        return self._render(equal, actual, expected, None)

    def render_result(self, result: ComparisonResult, actual: Any, expected: Any) -> str:
        """
        Render a report from a ComparisonResult.

        Identical to render() unless the style asks for the first
        mismatch, which is then added above the separator.
        """
        return self._render(result.equal, actual, expected, result)

    def _render(
        self,
        equal: bool,
        actual: Any,
        expected: Any,
        result: ComparisonResult | None,
    ) -> str:
        if self.style.mode == OutputMode.JSON:
            return self._render_json(equal, actual, expected, result)

        colors = self.style.palette
        parts = ["\n"]
        if equal:
            parts.append(f"{colors.success}{PASS_BANNER}\n{colors.reset}")
        else:
            parts.append(f"{colors.failure}{FAIL_BANNER}\n{colors.reset}")
        parts.append(f"{colors.label_result}result:\n{colors.reset}{inspect_value(actual)}\n")
        parts.append(f"{colors.label_expected}expected:\n{colors.reset}{inspect_value(expected)}\n")

        if self._shows_mismatch(equal, result):
            parts.append(f"{result}\n")

        parts.append(f"\n{SEPARATOR}")
        return "".join(parts)

    def _render_json(
        self,
        equal: bool,
        actual: Any,
        expected: Any,
        result: ComparisonResult | None,
    ) -> str:
        payload: dict[str, Any] = {
            "status": "passed" if equal else "failed",
            "equal": equal,
            "actual": _safe_serialize(actual),
            "expected": _safe_serialize(expected),
        }
        if result is not None and not equal and result.path is not None:
            payload["path"] = result.path
            payload["reason"] = result.reason.value if result.reason else None
        return json.dumps(payload, ensure_ascii=False)

    def _shows_mismatch(self, equal: bool, result: ComparisonResult | None) -> bool:
        return (
            self.style.show_mismatch
            and not equal
            and result is not None
            and result.path is not None
        )


def inspect_value(value: Any) -> str:
    """
    Human-readable rendering that expands containers.

    Key order is kept as inserted and self-referencing containers are
    shown with a recursion marker.
    """
    try:
        return pprint.pformat(value, sort_dicts=False)
    except Exception:
        return f"<unrepresentable {type(value).__name__}>"


def _safe_serialize(value: Any) -> Any:
    """Return value if it is JSON-serializable, else its rendering."""
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError, RecursionError):
        return inspect_value(value)
