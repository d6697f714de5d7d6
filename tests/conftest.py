"""
Pytest configuration and fixtures.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_ini(tmp_path: Path) -> Callable[..., Path]:
    """Write INI text (or raw bytes) to a temporary file and return its path."""

    def _write(content: str | bytes, name: str = "settings.ini") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write
