"""
Structural comparator.

Values are compared with strict value-and-type equality: a number never
equals its string form and a boolean never equals 1. Containers
(lists/tuples and mappings) are compared by contents, mappings
independently of key order.

A type or shape mismatch is an ordinary "not equal" outcome, so nothing
in this module raises for unsupported or mismatched input.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import ComparisonResult, MismatchKind


class _Missing:
    """Placeholder for a key absent from the expected mapping."""

    def __repr__(self) -> str:
        return "<missing>"


MISSING = _Missing()

_CONTAINERS = ("sequence", "mapping")

# Walk stack markers and path segment kinds
_VISIT = object()
_LEAVE = object()
_KEY = object()
_INDEX = object()


def kind_of(value: Any) -> str:
    """
    Classify a value for strict comparison.

    Returns one of "null", "boolean", "number", "string", "sequence",
    "mapping" or "other". Booleans are not numbers and strings are not
    sequences.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return "other"


def is_sequence(value: Any) -> bool:
    return kind_of(value) == "sequence"


def is_mapping(value: Any) -> bool:
    return kind_of(value) == "mapping"


def strict_equal(a: Any, b: Any) -> bool:
    """
    Exact value-and-type equality.

    Containers compare by identity here; use a Comparator to compare
    their contents. NaN equals NaN so that every value equals itself.
    """
    kind = kind_of(a)
    if kind != kind_of(b):
        return False

    if kind == "number":
        if a != a and b != b:
            return True
        return a == b
    if kind in _CONTAINERS:
        return a is b
    if kind == "other":
        if type(a) is not type(b):
            return False
        try:
            return a is b or bool(a == b)
        except Exception:
            return False
    return a == b


def _format_path(node: tuple | None) -> str:
    """Render a (parent, segment kind, segment) chain as e.g. "a.b[1]"."""
    segments = []
    while node is not None:
        node, segment_kind, segment = node
        segments.append((segment_kind, segment))

    path = ""
    for segment_kind, segment in reversed(segments):
        if segment_kind is _INDEX:
            path += f"[{segment}]"
        elif isinstance(segment, str) and segment.isidentifier():
            path += f".{segment}" if path else segment
        else:
            path += f"[{segment!r}]"
    return path


class Comparator:
    """
    Decides structural equality between two values.

    With ``deep=True`` (the default) every nested list, tuple and mapping
    is compared by contents, and reference cycles are handled by treating
    a pair of containers already under comparison as equal.

    With ``deep=False`` only the top-level container is walked, plus one
    level into list values of a top-level mapping. Anything nested
    further compares by identity.

    Example:
        comparator = Comparator()
        comparator.equal_mappings({"a": 1, "b": 2}, {"b": 2, "a": 1})  # True

        result = comparator.compare({"d": ["2", 3]}, {"d": ["2", 3, 4]})
        result.path    # "d"
        result.reason  # MismatchKind.LENGTH
    """

    def __init__(self, deep: bool = True):
        self.deep = deep

    def equal_primitives(self, a: Any, b: Any) -> bool:
        """Strict equality of two primitives (containers by identity)."""
        return strict_equal(a, b)

    def equal_sequences(self, seq_a: Any, seq_b: Any) -> bool:
        """
        Compare two ordered sequences element by element.

        Returns False when either input is not a list or tuple, when the
        lengths differ, or at the first unequal element.
        """
        return self.compare_sequences(seq_a, seq_b).equal

    def equal_mappings(self, map_a: Any, map_b: Any) -> bool:
        """
        Compare two mappings regardless of key order.

        Returns False when either input is not a mapping, when the key
        counts differ, or at the first key of ``map_a`` that is missing
        from ``map_b`` or holds an unequal value.
        """
        return self.compare_mappings(map_a, map_b).equal

    def compare_sequences(self, seq_a: Any, seq_b: Any) -> ComparisonResult:
        """Like equal_sequences, but returns the full result."""
        if not (is_sequence(seq_a) and is_sequence(seq_b)):
            return ComparisonResult.mismatch("", MismatchKind.TYPE, seq_a, seq_b)
        return self._walk(seq_a, seq_b)

    def compare_mappings(self, map_a: Any, map_b: Any) -> ComparisonResult:
        """Like equal_mappings, but returns the full result."""
        if not (is_mapping(map_a) and is_mapping(map_b)):
            return ComparisonResult.mismatch("", MismatchKind.TYPE, map_a, map_b)
        return self._walk(map_a, map_b)

    def compare(self, actual: Any, expected: Any) -> ComparisonResult:
        """
        Compare two values of any supported shape.

        Args:
            actual: The value produced by the code under test
            expected: The value it should equal

        Returns:
            ComparisonResult; on mismatch it points at the first difference
        """
        return self._walk(actual, expected)

    def _descends(self, kind: str, level: int, parent: str | None) -> bool:
        if self.deep or level == 0:
            return True
        return level == 1 and parent == "mapping" and kind == "sequence"

    def _walk(self, actual: Any, expected: Any) -> ComparisonResult:
        """
        Depth-first walk on an explicit stack.

        Children are pushed in reverse so mismatches are found left to
        right. A leave marker below a container's children drops its pair
        from the cycle guard.
        """
        seen: set[tuple[int, int]] = set()
        stack: list[tuple] = [(_VISIT, actual, expected, None, 0, None)]

        while stack:
            frame = stack.pop()
            if frame[0] is _LEAVE:
                seen.discard(frame[1])
                continue

            _, a, b, node, level, parent = frame
            if b is MISSING:
                return ComparisonResult.mismatch(
                    _format_path(node), MismatchKind.MISSING_KEY, a, MISSING
                )

            kind = kind_of(a)
            if kind != kind_of(b):
                return ComparisonResult.mismatch(_format_path(node), MismatchKind.TYPE, a, b)

            if kind in _CONTAINERS and self._descends(kind, level, parent):
                pair = (id(a), id(b))
                if pair in seen:
                    continue

                if kind == "mapping":
                    if len(a) != len(b):
                        return ComparisonResult.mismatch(
                            _format_path(node), MismatchKind.KEY_COUNT, a, b
                        )
                    present = {(kind_of(key), key) for key in b}
                    children = [
                        (
                            _VISIT,
                            a[key],
                            b[key] if (kind_of(key), key) in present else MISSING,
                            (node, _KEY, key),
                            level + 1,
                            "mapping",
                        )
                        for key in a
                    ]
                else:
                    if len(a) != len(b):
                        return ComparisonResult.mismatch(
                            _format_path(node), MismatchKind.LENGTH, a, b
                        )
                    children = [
                        (_VISIT, item_a, item_b, (node, _INDEX, index), level + 1, "sequence")
                        for index, (item_a, item_b) in enumerate(zip(a, b))
                    ]

                seen.add(pair)
                stack.append((_LEAVE, pair))
                stack.extend(reversed(children))
                continue

            if not strict_equal(a, b):
                return ComparisonResult.mismatch(_format_path(node), MismatchKind.VALUE, a, b)

        return ComparisonResult.match()


_default_comparator = Comparator()


# Convenience functions using the default (deep) comparator
def equal_primitives(a: Any, b: Any) -> bool:
    """Strict value-and-type equality."""
    return strict_equal(a, b)


def equal_sequences(seq_a: Any, seq_b: Any) -> bool:
    """Check two ordered sequences for structural equality."""
    return _default_comparator.equal_sequences(seq_a, seq_b)


def equal_mappings(map_a: Any, map_b: Any) -> bool:
    """Check two mappings for structural equality, ignoring key order."""
    return _default_comparator.equal_mappings(map_a, map_b)


def compare(actual: Any, expected: Any, deep: bool = True) -> ComparisonResult:
    """Compare two values and locate the first difference."""
    comparator = _default_comparator if deep else Comparator(deep=False)
    return comparator.compare(actual, expected)
