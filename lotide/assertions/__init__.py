"""
Assertion Engine for Equality Checks

This package compares an actual value with an expected one and prints
a pass/fail report for the result.

Supported assertions:
    - assert_equal: strict equality of primitives
    - assert_arrays_equal: element-wise equality of sequences
    - assert_objects_equal: key-order-independent equality of mappings

Usage:
    from lotide.assertions import assert_objects_equal, AssertionEngine

    assert_objects_equal({"c": "1", "d": ["2", 3]}, {"d": ["2", 3], "c": "1"})

    # Using the engine
    engine = AssertionEngine()
    result = engine.assert_arrays_equal(middle([1, 2, 3, 4]), [2, 3])

    # Check result
    if not result.equal:
        print(result)  # mismatch at <path>: <reason>
"""

# Engine
from .engine import (
    AssertionEngine,
    # Convenience functions
    assert_arrays_equal,
    assert_equal,
    assert_objects_equal,
)

__all__ = [
    # Engine
    "AssertionEngine",
    # Convenience functions
    "assert_arrays_equal",
    "assert_equal",
    "assert_objects_equal",
]
