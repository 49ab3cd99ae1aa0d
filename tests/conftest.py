import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add the repository root to sys.path so the flat modules import
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from binos_display import Display


@pytest.fixture
def display():
    """Display writing to in-memory buffers instead of the terminal."""
    out = Console(file=io.StringIO(), width=120, color_system=None)
    err = Console(file=io.StringIO(), width=120, color_system=None)
    return Display(console=out, err_console=err)


@pytest.fixture
def scripted():
    """Build an ask() callable that returns the given answers in order."""
    def build(*answers):
        remaining = list(answers)
        asked = []

        def ask(prompt):
            asked.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        ask.asked = asked
        return ask
    return build
