"""
Report style loader.

Reads a ReportStyle from a YAML file. Problems are collected in a
StyleValidationResult instead of being raised.

Example file:

    mode: text
    show_mismatch: true
    colors:
      success: green
      failure: red
      label_result: cyan
      label_expected: magenta
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .models import ANSI_COLORS, ColorScheme, OutputMode, ReportStyle


@dataclass
class StyleError:
    """A single problem found in a style file."""
    path: str  # e.g. "colors.success"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {self.value!r}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class StyleValidationResult:
    """Outcome of validating a style file."""
    errors: list[StyleError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None,
    ) -> None:
        self.errors.append(StyleError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Style file is valid"
        lines = [f"Style validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


TOP_LEVEL_KEYS = {"mode", "show_mismatch", "colors"}
COLOR_KEYS = {"success", "failure", "label_result", "label_expected", "reset"}
VALID_MODES = {m.value for m in OutputMode}


def load_style(path: str | Path) -> tuple[ReportStyle | None, StyleValidationResult]:
    """
    Load and validate a report style from a YAML file.

    Args:
        path: Path to the YAML style file

    Returns:
        Tuple of (ReportStyle or None, StyleValidationResult).
        If validation fails, the style is None.
    """
    path = Path(path)
    result = StyleValidationResult()

    if not path.exists():
        result.add_error(str(path), "File not found", suggestion="Check the file path is correct")
        return None, result

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        result.add_error(
            str(path),
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)",
        )
        return None, result

    return parse_style(data, result)


def parse_style(
    data: Any,
    result: StyleValidationResult | None = None,
) -> tuple[ReportStyle | None, StyleValidationResult]:
    """Validate already-parsed style data and build a ReportStyle."""
    result = result or StyleValidationResult()

    # An empty file means "all defaults"
    if data is None:
        return ReportStyle(), result

    if not isinstance(data, dict):
        result.add_error(
            "<root>",
            "Style must be a YAML object (not a list or scalar)",
            value=type(data).__name__,
        )
        return None, result

    for key in sorted(set(data) - TOP_LEVEL_KEYS, key=str):
        result.add_error(
            str(key),
            f"Unknown field '{key}'",
            suggestion=f"Valid fields are: {', '.join(sorted(TOP_LEVEL_KEYS))}",
        )

    mode = data.get("mode", OutputMode.TEXT.value)
    if not isinstance(mode, str) or mode not in VALID_MODES:
        result.add_error(
            "mode",
            "Invalid output mode",
            value=mode,
            suggestion=f"Use one of: {', '.join(sorted(VALID_MODES))}",
        )

    show_mismatch = data.get("show_mismatch", False)
    if not isinstance(show_mismatch, bool):
        result.add_error("show_mismatch", "Must be true or false", value=show_mismatch)

    colors = _parse_colors(data.get("colors", {}), result)

    if not result.is_valid:
        return None, result

    style = ReportStyle(
        mode=OutputMode(mode),
        colors=colors,
        show_mismatch=show_mismatch,
    )
    return style, result


def _parse_colors(data: Any, result: StyleValidationResult) -> ColorScheme:
    if data is None:
        return ColorScheme()
    if not isinstance(data, dict):
        result.add_error("colors", "Must be an object", value=data)
        return ColorScheme()

    codes: dict[str, str] = {}
    for key, value in data.items():
        if key not in COLOR_KEYS:
            result.add_error(
                f"colors.{key}",
                f"Unknown color slot '{key}'",
                suggestion=f"Valid slots are: {', '.join(sorted(COLOR_KEYS))}",
            )
            continue
        if not isinstance(value, str):
            result.add_error(f"colors.{key}", "Must be a string", value=value)
            continue
        # Named colors map to codes; anything else is used as a raw code
        codes[key] = ANSI_COLORS.get(value.lower(), value)

    return ColorScheme(**codes)
