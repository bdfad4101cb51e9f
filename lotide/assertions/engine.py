"""
Assertion engine composing comparison and reporting.

Each assertion compares two values, prints a pass/fail report and
returns the ComparisonResult so callers can also raise or tally.
A failed assertion never raises and never stops later assertions.
"""

from __future__ import annotations

from typing import Any, Callable

from rich.console import Console

from ..comparison import Comparator, ComparisonResult, MismatchKind, kind_of
from ..reporting import Reporter, ReportStyle


class AssertionEngine:
    """
    Engine for running equality assertions.

    Supports three value shapes plus a generic check:
    - assert_equal: primitives, strict value-and-type equality
    - assert_arrays_equal: ordered sequences (lists, tuples)
    - assert_objects_equal: mappings, independent of key order
    - assert_matches: any shape, reporting the first mismatch path

    Example:
        engine = AssertionEngine()
        engine.assert_objects_equal({"a": "1", "b": "2"}, {"b": "2", "a": "1"})

        # Collect outcomes without printing
        result = engine.assert_arrays_equal([1, "2"], [1, 2], emit=False)
        if not result:
            raise AssertionError(result)
    """

    def __init__(
        self,
        comparator: Comparator | None = None,
        reporter: Reporter | None = None,
        console: Console | None = None,
    ):
        self.comparator = comparator or Comparator()
        self.reporter = reporter or Reporter(ReportStyle.from_env())
        self.console = console or Console()

    def assert_equal(self, actual: Any, expected: Any, emit: bool = True) -> ComparisonResult:
        """
        Assert that two primitives are strictly equal.

        Args:
            actual: The value produced by the code under test
            expected: The value it should equal
            emit: Print the report to the console

        Returns:
            ComparisonResult indicating equal or not
        """
        if self.comparator.equal_primitives(actual, expected):
            result = ComparisonResult.match()
        else:
            result = ComparisonResult.mismatch(
                "", _primitive_reason(actual, expected), actual, expected
            )
        return self._report(result, actual, expected, emit)

    def assert_arrays_equal(self, actual: Any, expected: Any, emit: bool = True) -> ComparisonResult:
        """Assert that two ordered sequences are equal element by element."""
        return self._check(self.comparator.compare_sequences, actual, expected, emit)

    def assert_objects_equal(self, actual: Any, expected: Any, emit: bool = True) -> ComparisonResult:
        """Assert that two mappings hold the same keys and equal values."""
        return self._check(self.comparator.compare_mappings, actual, expected, emit)

    def assert_matches(self, actual: Any, expected: Any, emit: bool = True) -> ComparisonResult:
        """Assert that two values of any supported shape are equal."""
        return self._check(self.comparator.compare, actual, expected, emit)

    def _check(
        self,
        compare: Callable[[Any, Any], ComparisonResult],
        actual: Any,
        expected: Any,
        emit: bool,
    ) -> ComparisonResult:
        return self._report(compare(actual, expected), actual, expected, emit)

    def _report(
        self,
        result: ComparisonResult,
        actual: Any,
        expected: Any,
        emit: bool,
    ) -> ComparisonResult:
        if emit:
            self.emit(self.reporter.render_result(result, actual, expected))
        return result

    def emit(self, report: str) -> None:
        """
        Write a rendered report to the console's stream unchanged.

        The report already carries its own escape codes (or none, per the
        style), so it bypasses rich rendering. A quiet console prints nothing.
        """
        if self.console.quiet:
            return
        self.console.file.write(report + "\n")
        self.console.file.flush()


def _primitive_reason(actual: Any, expected: Any) -> MismatchKind:
    if kind_of(actual) != kind_of(expected):
        return MismatchKind.TYPE
    return MismatchKind.VALUE


# Convenience functions for quick assertions
def assert_equal(actual: Any, expected: Any) -> ComparisonResult:
    """Print a report on whether two primitives are strictly equal."""
    return AssertionEngine().assert_equal(actual, expected)


def assert_arrays_equal(actual: Any, expected: Any) -> ComparisonResult:
    """Print a report on whether two sequences are equal."""
    return AssertionEngine().assert_arrays_equal(actual, expected)


def assert_objects_equal(actual: Any, expected: Any) -> ComparisonResult:
    """Print a report on whether two mappings are equal."""
    return AssertionEngine().assert_objects_equal(actual, expected)
