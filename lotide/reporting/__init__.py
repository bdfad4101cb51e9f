"""
Reporting for Assertion Outcomes

This package renders the outcome of an equality check as a
pass/fail report.

Features:
    - Colored banner (green pass, yellow fail)
    - Expanded rendering of both compared values
    - Plain and JSON output modes
    - Optional first-mismatch line
    - YAML style files

Usage:
    from lotide.reporting import Reporter, ReportStyle, load_style

    reporter = Reporter()
    print(reporter.render(False, [1, "2"], [1, 2]))

    style, validation = load_style("style.yaml")
    if validation.is_valid:
        reporter = Reporter(style)
"""

# Models
from .models import ANSI_COLORS, ColorScheme, OutputMode, ReportStyle

# Loader
from .loader import StyleError, StyleValidationResult, load_style, parse_style

# Reporter
from .reporter import FAIL_BANNER, PASS_BANNER, SEPARATOR, Reporter, inspect_value

__all__ = [
    # Models
    "ANSI_COLORS",
    "ColorScheme",
    "OutputMode",
    "ReportStyle",
    # Loader
    "StyleError",
    "StyleValidationResult",
    "load_style",
    "parse_style",
    # Reporter
    "FAIL_BANNER",
    "PASS_BANNER",
    "SEPARATOR",
    "Reporter",
    "inspect_value",
]
