#!/usr/bin/env python3
"""
lotide CLI - structural equality checks

Usage:
    lotide compare <actual> <expected> [OPTIONS]
    lotide demo
    lotide --version
"""

import json
from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .assertions import AssertionEngine
from .comparison import Comparator, ComparisonResult
from .reporting import OutputMode, Reporter, ReportStyle, load_style
from .selection import select_one
from .subjects import count_letters, middle

app = typer.Typer(
    name="lotide",
    help="🔍 lotide - structural equality checks with readable reports",
    add_completion=False,
)
console = Console()


class Shape(str, Enum):
    """Which assertion to run."""
    AUTO = "auto"
    PRIMITIVE = "primitive"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def version_callback(value: bool):
    if value:
        console.print(f"🔍 lotide v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    🔍 lotide - structural equality checks with readable reports

    Compare two JSON values and print a pass/fail report.
    """
    pass


def load_value(raw: str, from_file: bool) -> tuple[Any, str | None]:
    """Parse a JSON literal, or the JSON file it names."""
    if from_file:
        path = Path(raw)
        if not path.exists():
            return None, f"File not found: {raw}"
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return None, f"Cannot read {raw}: {e}"

    try:
        return json.loads(raw), None
    except json.JSONDecodeError as e:
        return None, f"Invalid JSON: {e}"


def build_style(
    style_file: Path | None,
    output: OutputMode | None,
    no_color: bool,
    explain: bool,
) -> ReportStyle:
    """Resolve the report style from a style file and CLI flags."""
    if style_file is not None:
        style, validation = load_style(style_file)
        if not validation.is_valid:
            console.print(f"\n[red]❌ Invalid style file:[/red] {style_file}")
            console.print(str(validation), markup=False)
            raise typer.Exit(code=2)
    else:
        style = ReportStyle.from_env()

    if output is not None:
        style = style.with_mode(output)
    if no_color and style.mode == OutputMode.TEXT:
        style = style.with_mode(OutputMode.PLAIN)
    if explain:
        style = replace(style, show_mismatch=True)
    return style


def run_assertion(
    engine: AssertionEngine,
    shape: Shape,
    actual: Any,
    expected: Any,
) -> ComparisonResult:
    """Dispatch to the assertion matching the requested shape."""
    if shape == Shape.PRIMITIVE:
        return engine.assert_equal(actual, expected)
    if shape == Shape.SEQUENCE:
        return engine.assert_arrays_equal(actual, expected)
    if shape == Shape.MAPPING:
        return engine.assert_objects_equal(actual, expected)
    return engine.assert_matches(actual, expected)


def _fail_input(message: str) -> None:
    console.print(f"[red]❌ {escape(message)}[/red]", highlight=False)
    raise typer.Exit(code=2)


@app.command()
def compare(
    actual: str = typer.Argument(
        ...,
        help="Actual value as JSON (a file path with --file)",
    ),
    expected: str = typer.Argument(
        ...,
        help="Expected value as JSON (a file path with --file)",
    ),
    from_file: bool = typer.Option(
        False, "--file", "-f",
        help="Treat ACTUAL and EXPECTED as paths to JSON files"
    ),
    shape: Shape = typer.Option(
        Shape.AUTO, "--shape", "-s",
        help="Assertion to run: auto, primitive, sequence or mapping"
    ),
    shallow: bool = typer.Option(
        False, "--shallow",
        help="Only look one level into nested containers"
    ),
    path: Optional[str] = typer.Option(
        None, "--path", "-p",
        help="JSONPath selecting the part of both values to compare"
    ),
    output: Optional[OutputMode] = typer.Option(
        None, "--output", "-o",
        help="Output format: text, plain or json"
    ),
    no_color: bool = typer.Option(
        False, "--no-color",
        help="Disable ANSI colors"
    ),
    style_file: Optional[Path] = typer.Option(
        None, "--style",
        help="YAML file with report style settings"
    ),
    explain: bool = typer.Option(
        False, "--explain", "-e",
        help="Show where the first mismatch is"
    ),
):
    """
    Compare two JSON values.

    Prints a pass/fail report and exits with 0 when the values are
    equal, 1 when they differ and 2 when the input cannot be used.
    """
    style = build_style(style_file, output, no_color, explain)

    actual_value, error = load_value(actual, from_file)
    if error:
        _fail_input(f"actual: {error}")
    expected_value, error = load_value(expected, from_file)
    if error:
        _fail_input(f"expected: {error}")

    if path:
        actual_value, error = select_one(actual_value, path)
        if error:
            _fail_input(f"actual: {error}")
        expected_value, error = select_one(expected_value, path)
        if error:
            _fail_input(f"expected: {error}")

    engine = AssertionEngine(
        comparator=Comparator(deep=not shallow),
        reporter=Reporter(style),
        console=console,
    )
    result = run_assertion(engine, shape, actual_value, expected_value)

    raise typer.Exit(code=0 if result.equal else 1)


def demo_cases() -> list[tuple[str, Shape, Any, Any, bool]]:
    """Example checks as (label, shape, actual, expected, should_pass)."""
    ab = {"a": "1", "b": "2"}
    ba = {"b": "2", "a": "1"}
    abc = {"a": "1", "b": "2", "c": "3"}
    cd = {"c": "1", "d": ["2", 3]}
    dc = {"d": ["2", 3], "c": "1"}
    cd_long = {"c": "1", "d": ["2", 3, 4]}

    return [
        ("objects: key order", Shape.MAPPING, ab, ba, True),
        ("objects: extra key", Shape.MAPPING, ab, abc, False),
        ("objects: list values", Shape.MAPPING, cd, dc, True),
        ("objects: list length", Shape.MAPPING, cd, cd_long, False),
        ("arrays: no coercion", Shape.SEQUENCE, [1, "2"], [1, 2], False),
        ("middle([1])", Shape.SEQUENCE, middle([1]), [], True),
        ("middle([1, 2])", Shape.SEQUENCE, middle([1, 2]), [], True),
        ("middle([1, 2, 3])", Shape.SEQUENCE, middle([1, 2, 3]), [2], True),
        ("middle([1, 2, 3, 4, 5])", Shape.SEQUENCE, middle([1, 2, 3, 4, 5]), [3], True),
        ("middle([1, 2, 3, 4])", Shape.SEQUENCE, middle([1, 2, 3, 4]), [2, 3], True),
        ("middle([1, 2, 3, 4, 5, 6])", Shape.SEQUENCE, middle([1, 2, 3, 4, 5, 6]), [3, 4], True),
        ('count_letters("Apple")["A"]', Shape.PRIMITIVE, count_letters("Apple")["A"], 1, True),
        ('count_letters("Apple")["p"]', Shape.PRIMITIVE, count_letters("Apple")["p"], 2, True),
        ('count_letters("LHL")', Shape.MAPPING, count_letters("LHL"), {"L": 2, "H": 1}, True),
    ]


@app.command()
def demo(
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show the summary table"
    ),
):
    """
    Run the example checks.

    Some examples are meant to fail; the command exits with 1 only when
    an example does not behave as listed.
    """
    engine = AssertionEngine(
        reporter=Reporter(ReportStyle.from_env()),
        console=Console(quiet=True) if quiet else console,
    )

    table = Table(title="Examples")
    table.add_column("Check", style="cyan")
    table.add_column("Outcome")
    table.add_column("As expected")

    unexpected = 0
    for label, shape, actual, expected, should_pass in demo_cases():
        if not quiet:
            console.print(f"▶ [bold]{escape(label)}[/bold]", highlight=False)
        result = run_assertion(engine, shape, actual, expected)

        as_listed = result.equal == should_pass
        if not as_listed:
            unexpected += 1
        outcome = "[green]passed[/green]" if result.equal else "[yellow]failed[/yellow]"
        table.add_row(escape(label), outcome, "✅" if as_listed else "❌")

    console.print()
    console.print(table)
    raise typer.Exit(code=1 if unexpected else 0)


@app.command()
def info():
    """
    Show information about lotide.
    """
    console.print(f"""
🔍 [bold]lotide[/bold] v{__version__}

Structural equality checks with readable reports

[bold]Features:[/bold]
  • Strict value-and-type equality (no coercion)
  • Key-order-independent mapping comparison
  • First-mismatch paths such as d[2]
  • Text, plain and JSON reports
  • JSONPath selection of sub-values

[bold]Quick Start:[/bold]
  lotide compare '{{"a": 1, "b": 2}}' '{{"b": 2, "a": 1}}'
  lotide compare --file actual.json expected.json --explain
""")


if __name__ == "__main__":
    app()
