"""
Report style models.

This module defines how an assertion report is presented: the output
mode and the ANSI color codes used for its banner and labels.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Mapping


class OutputMode(str, Enum):
    """How a report is rendered."""
    TEXT = "text"  # colored, for terminals
    PLAIN = "plain"  # same layout without escape codes
    JSON = "json"  # one JSON object per report


RESET = "\x1b[0m"

# Named colors accepted in style files
ANSI_COLORS: dict[str, str] = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "none": "",
}


@dataclass(frozen=True)
class ColorScheme:
    """
    ANSI codes for each colored part of a report.

    Attributes:
        success: Banner color when the values are equal
        failure: Banner color when they are not
        label_result: Color of the "result:" label
        label_expected: Color of the "expected:" label
        reset: Code that ends a colored span
    """
    success: str = ANSI_COLORS["green"]
    failure: str = ANSI_COLORS["yellow"]
    label_result: str = ANSI_COLORS["cyan"]
    label_expected: str = ANSI_COLORS["cyan"]
    reset: str = RESET

    @classmethod
    def colorless(cls) -> ColorScheme:
        return cls(success="", failure="", label_result="", label_expected="", reset="")


@dataclass(frozen=True)
class ReportStyle:
    """
    Presentation settings for the Reporter.

    Attributes:
        mode: Output mode (text, plain or json)
        colors: Color codes used in text mode
        show_mismatch: Add a line naming the first mismatching path
    """
    mode: OutputMode = OutputMode.TEXT
    colors: ColorScheme = field(default_factory=ColorScheme)
    show_mismatch: bool = False

    @property
    def palette(self) -> ColorScheme:
        """The colors actually applied; empty outside text mode."""
        if self.mode == OutputMode.TEXT:
            return self.colors
        return ColorScheme.colorless()

    def with_mode(self, mode: OutputMode) -> ReportStyle:
        return replace(self, mode=mode)

    @classmethod
    def plain(cls) -> ReportStyle:
        """Style without any escape codes."""
        return cls(mode=OutputMode.PLAIN)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ReportStyle:
        """
        Default style, honouring the NO_COLOR convention.

        Any non-empty NO_COLOR value selects plain mode.
        """
        environ = os.environ if environ is None else environ
        if environ.get("NO_COLOR"):
            return cls.plain()
        return cls()
