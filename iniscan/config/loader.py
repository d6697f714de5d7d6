"""
Configuration loader for files and strings.
"""

import io
from pathlib import Path

from ..const import DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING, DEFAULT_SECTION
from ..logging import get_logger
from .cursor import ParseError
from .reader import Document, Reader

logger = get_logger("config")


class ConfigError(Exception):
    """Exception raised for configuration errors."""

    pass


class ConfigLoader:
    """
    Loads INI documents from files or strings.

    Usage:
        loader = ConfigLoader()
        sections = loader.load_file("/etc/myapp/settings.ini")
        # or
        sections = loader.load_string(config_text)
    """

    def __init__(
        self,
        default_section: str = DEFAULT_SECTION,
        encoding: str = DEFAULT_ENCODING,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.default_section = default_section
        self.encoding = encoding
        self.chunk_size = chunk_size
        self.last_document: Document | None = None

    def _read(self, stream, source: str) -> Document:
        try:
            reader = Reader(stream, self.default_section, self.encoding, self.chunk_size)
            document = reader.read_all()
        except ParseError as e:
            raise ConfigError(f"{source}: {e}") from e
        except LookupError as e:
            raise ConfigError(f"Unknown encoding: {self.encoding}") from e
        except ValueError as e:
            raise ConfigError(f"Invalid reader settings: {e}") from e

        self.last_document = document
        logger.info(f"Loaded {len(document)} section(s) from {source}")
        return document

    def load_file(self, path: str | Path) -> Document:
        """
        Load a document from a file.

        Args:
            path: Path to the INI file

        Returns:
            Mapping of section name to option map

        Raises:
            ConfigError: If the file cannot be opened or parsed
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ConfigError(f"Not a file: {path}")

        logger.debug(f"Reading {path}")
        try:
            with path.open("rb") as fp:
                return self._read(fp, str(path))
        except OSError as e:
            raise ConfigError(f"Failed to open {path}: {e}") from e

    # Alias kept for callers that expect a shorter name
    def load(self, path: str | Path) -> Document:
        """Alias for load_file."""
        return self.load_file(path)

    def load_string(self, source: str, filename: str = "<string>") -> Document:
        """
        Load a document from a string.

        Args:
            source: INI source text
            filename: Name used in error messages

        Returns:
            Mapping of section name to option map

        Raises:
            ConfigError: If the text cannot be parsed
        """
        logger.debug(f"Reading {filename}")
        return self._read(io.StringIO(source), filename)
