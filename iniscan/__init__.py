"""
Streaming reader for INI-style configuration text.
"""

from .config import ConfigError, ConfigLoader, Document, ErrorKind, ParseError, Reader, read_all, read_string
from .const import APP_VERSION

__version__ = APP_VERSION

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "Document",
    "ErrorKind",
    "ParseError",
    "Reader",
    "read_all",
    "read_string",
    "__version__",
]
