"""
Tests for constants.
"""

from iniscan import __version__
from iniscan.const import APP_NAME, APP_VERSION, COMMENT_MARKERS, DEFAULT_SECTION, DELIMITERS


def test_constants():
    """Test that constants are defined."""
    assert APP_NAME == "iniscan"
    assert APP_VERSION == __version__
    assert DEFAULT_SECTION == "default"
    assert set(COMMENT_MARKERS) == {"#", ";"}
    assert set(DELIMITERS) == {"=", ":"}
