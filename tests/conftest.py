"""
Pytest configuration and fixtures.
"""

import logging
from pathlib import Path
from typing import Callable

import pytest


EXAMPLE_CONFIG = Path(__file__).parent.parent / "odissey.conf"


@pytest.fixture
def example_config_path() -> Path:
    """Path to the example config shipped with the project."""
    return EXAMPLE_CONFIG


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write configuration text into a temporary file and return its path."""

    def write(text: str, name: str = "odissey.conf") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return write


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so they don't outlive a test."""
    yield
    root = logging.getLogger("odissey")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
