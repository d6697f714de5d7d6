"""
INI reading module: character cursor, section/option reader and loader.
"""

from .cursor import Cursor, ErrorKind, ParseError
from .loader import ConfigError, ConfigLoader
from .reader import Document, Reader, read_all, read_string

__all__ = [
    "Cursor",
    "ErrorKind",
    "ParseError",
    "Document",
    "Reader",
    "read_all",
    "read_string",
    "ConfigError",
    "ConfigLoader",
]
