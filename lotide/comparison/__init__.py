"""
Structural Comparison

This package decides whether two values are equal under strict
value-and-type rules, looking inside lists, tuples and mappings.

Supported shapes:
    - Primitives: str, int/float, bool, None
    - Ordered sequences: list, tuple
    - Mappings: dict and other collections.abc.Mapping types

Usage:
    from lotide.comparison import Comparator, equal_mappings

    equal_mappings({"a": "1", "b": "2"}, {"b": "2", "a": "1"})  # True

    result = Comparator().compare({"d": ["2", 3]}, {"d": ["2", 3, 4]})
    if not result:
        print(result)  # mismatch at d: length
"""

# Models
from .models import ComparisonResult, MismatchKind

# Comparator
from .comparator import (
    MISSING,
    Comparator,
    is_mapping,
    is_sequence,
    kind_of,
    strict_equal,
    # Convenience functions
    compare,
    equal_mappings,
    equal_primitives,
    equal_sequences,
)

__all__ = [
    # Models
    "ComparisonResult",
    "MismatchKind",
    # Comparator
    "MISSING",
    "Comparator",
    "is_mapping",
    "is_sequence",
    "kind_of",
    "strict_equal",
    # Convenience functions
    "compare",
    "equal_mappings",
    "equal_primitives",
    "equal_sequences",
]
