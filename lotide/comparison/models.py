"""
Comparison result models.

This module defines the outcome of a structural comparison,
including where the first difference was found.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MismatchKind(str, Enum):
    """Why two values were found unequal."""
    TYPE = "type"  # different kinds, e.g. number vs string
    LENGTH = "length"
    KEY_COUNT = "key_count"
    MISSING_KEY = "missing_key"
    VALUE = "value"


@dataclass(frozen=True)
class ComparisonResult:
    """
    Result of comparing two values.

    Only ``equal`` carries meaning for the comparison itself. The other
    fields describe the first mismatch and are empty when equal.

    Attributes:
        equal: Whether the two values are structurally equal
        path: Key path of the first mismatch ("" for the root), e.g. "d[2]"
        reason: What kind of mismatch was found
        actual: Value found at ``path`` on the actual side
        expected: Value found at ``path`` on the expected side
    """
    equal: bool
    path: str | None = None
    reason: MismatchKind | None = None
    actual: Any = None
    expected: Any = None

    def __bool__(self) -> bool:
        return self.equal

    def __str__(self) -> str:
        if self.equal:
            return "equal"
        where = self.path or "<root>"
        reason = self.reason.value if self.reason else "unknown"
        return f"mismatch at {where}: {reason}"

    @classmethod
    def match(cls) -> ComparisonResult:
        """Create an equal result."""
        return cls(equal=True)

    @classmethod
    def mismatch(
        cls,
        path: str,
        reason: MismatchKind,
        actual: Any = None,
        expected: Any = None,
    ) -> ComparisonResult:
        """Create an unequal result pointing at the first difference."""
        return cls(
            equal=False,
            path=path,
            reason=reason,
            actual=actual,
            expected=expected,
        )
