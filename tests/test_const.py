"""
Tests for constants.
"""

from odissey import __version__
from odissey.const import APP_NAME, APP_VERSION, DEFAULT_PORT


def test_constants():
    """Test that constants are defined."""
    assert APP_NAME == "odissey"
    assert APP_VERSION == "0.1.0"
    assert __version__ == APP_VERSION
    assert DEFAULT_PORT == 6432
