"""
lotide - Structural Equality Assertions

This package compares values structurally and prints readable
pass/fail reports.

Subpackages:
    - comparison: Strict, key-order-independent structural equality
    - reporting: Pass/fail report rendering and style configuration
    - assertions: Assertion entry points printing reports

Usage:
    from lotide import assert_objects_equal, compare, Reporter

    assert_objects_equal({"a": "1", "b": "2"}, {"b": "2", "a": "1"})

    result = compare({"c": "1", "d": ["2", 3]}, {"c": "1", "d": ["2", 3, 4]})
    print(result)  # mismatch at d: length

    report = Reporter().render(result.equal, [1, 2], [1, 2, 3])
"""

__version__ = "0.1.0"

# Re-export comparison for convenience
from .comparison import (
    # Models
    ComparisonResult,
    MismatchKind,
    # Comparator
    Comparator,
    # Convenience functions
    compare,
    equal_mappings,
    equal_primitives,
    equal_sequences,
)

# Re-export reporting for convenience
from .reporting import (
    # Models
    ColorScheme,
    OutputMode,
    ReportStyle,
    # Loader
    load_style,
    # Reporter
    Reporter,
)

# Re-export assertions for convenience
from .assertions import (
    # Engine
    AssertionEngine,
    # Convenience functions
    assert_arrays_equal,
    assert_equal,
    assert_objects_equal,
)

__all__ = [
    # Package info
    "__version__",
    # Comparison - Models
    "ComparisonResult",
    "MismatchKind",
    # Comparison - Comparator
    "Comparator",
    "compare",
    "equal_mappings",
    "equal_primitives",
    "equal_sequences",
    # Reporting - Models
    "ColorScheme",
    "OutputMode",
    "ReportStyle",
    # Reporting - Loader
    "load_style",
    # Reporting - Reporter
    "Reporter",
    # Assertions - Engine
    "AssertionEngine",
    # Assertions - Convenience functions
    "assert_arrays_equal",
    "assert_equal",
    "assert_objects_equal",
]
