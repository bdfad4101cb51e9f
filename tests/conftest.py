import io

import pytest
from rich.console import Console

from lotide.assertions import AssertionEngine
from lotide.reporting import Reporter, ReportStyle


@pytest.fixture
def captured_console():
    """Non-terminal console writing into a buffer."""
    return Console(file=io.StringIO(), width=120, force_terminal=False)


@pytest.fixture
def engine(captured_console):
    return AssertionEngine(reporter=Reporter(ReportStyle()), console=captured_console)


@pytest.fixture
def output(captured_console):
    """Text written to the captured console so far."""
    return lambda: captured_console.file.getvalue()
