"""
JSONPath selection of sub-values.

Lets callers compare only part of a document, e.g. ``$.results[0]``.
"""

from __future__ import annotations

from typing import Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JsonPathParserError


def select(data: Any, path: str) -> tuple[list[Any], str | None]:
    """
    Evaluate a JSONPath expression on data.

    Args:
        data: The JSON data to search
        path: JSONPath expression

    Returns:
        Tuple of (matched values, error). If error is not None, the
        values list is empty.
    """
    try:
        jsonpath_expr = parse_jsonpath(path)
    except JsonPathParserError as e:
        return [], f"Invalid JSONPath expression {path!r}: {e}"
    except Exception as e:
        return [], f"Failed to parse JSONPath {path!r}: {type(e).__name__}: {e}"

    try:
        matches = jsonpath_expr.find(data)
    except Exception as e:
        return [], f"Failed to evaluate JSONPath {path!r}: {type(e).__name__}: {e}"

    return [m.value for m in matches], None


def select_one(data: Any, path: str) -> tuple[Any, str | None]:
    """
    Select the value at a path.

    A single match is returned as-is; several matches are returned as a
    list. No match is reported as an error.
    """
    values, error = select(data, path)
    if error:
        return None, error
    if not values:
        return None, f"Path {path!r} matched nothing"
    if len(values) == 1:
        return values[0], None
    return values, None
