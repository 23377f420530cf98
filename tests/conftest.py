"""Shared pytest fixtures for unit tests."""

import logging
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from albumtools.shared.colors import Colors


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Path to the repository root."""
    return PROJECT_ROOT


@pytest.fixture
def sample_track_list() -> str:
    """A pasted track list with ordinals, durations and a blank line."""
    return (
        "1. Intro 1:23\n"
        "2. First Song 4:56\n"
        "\n"
        "3. Second Song 5:12\n"
        "4. Outro 2:34\n"
    )


@pytest.fixture(autouse=True)
def _reset_terminal_state():
    """Restore colors and drop handlers left on the package logger."""
    yield
    Colors.enable()
    logger = logging.getLogger("albumtools")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
