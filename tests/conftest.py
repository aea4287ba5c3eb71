"""Pytest configuration for Detective Quest tests."""

import sys
import os

import pytest

# Add src directory to path for imports
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, PROJECT_ROOT)
sys.path.insert(0, os.path.join(PROJECT_ROOT, "src"))

from core.event_system import event_bus  # noqa: E402
from ui.crt_effects import CRTOutput  # noqa: E402


@pytest.fixture(autouse=True)
def clean_event_bus():
    """Every test starts and ends with no subscribers on the shared bus."""
    event_bus.clear()
    yield
    event_bus.clear()


@pytest.fixture
def crt():
    output = CRTOutput()
    output.start_capture()
    return output


@pytest.fixture
def game(crt):
    from engine import GameState

    state = GameState(crt=crt)
    yield state
    state.cleanup()


def scripted_input(*lines):
    """Build a read_line callable that replays ``lines`` then raises EOFError."""
    remaining = list(lines)
    prompts = []

    def read_line(prompt=""):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read_line.prompts = prompts
    return read_line


@pytest.fixture
def script():
    """Factory fixture for scripted console input."""
    return scripted_input
