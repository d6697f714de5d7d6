"""
Single-pass reader for INI-style configuration text.

A configuration file contains zero or more sections, each with zero or more
options. Lines are separated by "\\n"; a "\\r" right before "\\n" is dropped.

Grammar (one logical line at a time):
    comment   := ('#' | ';') any* '\\n'
    header    := '[' name ']' any* '\\n'
    option    := key [('=' | ':') ' '* value] ['\\n']

Options that appear before any header belong to the default section.
Blank lines and lines whose key is empty after trimming are ignored.
A '#' or ';' that starts a value or follows a space starts an inline comment.
"""

import io
from typing import Any

from ..const import (
    COMMENT_MARKERS,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_ENCODING,
    DEFAULT_SECTION,
    DELIMITERS,
    SECTION_CLOSE,
    SECTION_OPEN,
)
from ..logging import get_logger
from .cursor import Cursor, ErrorKind

logger = get_logger("config.reader")

# Section name -> option key -> option value
Document = dict[str, dict[str, str]]


class Reader:
    """
    Reads sections of options from a stream.

    The stream may be a text or binary file-like object; the caller opens
    and closes it. Each read_all() call scans with a fresh cursor, so one
    Reader is not meant to be shared between threads.

    Usage:
        with open("settings.ini", "rb") as fp:
            sections = Reader(fp).read_all()
    """

    def __init__(
        self,
        stream: Any,
        default_section: str = DEFAULT_SECTION,
        encoding: str = DEFAULT_ENCODING,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        if not default_section:
            raise ValueError("default_section must not be empty")

        self.stream = stream
        self.default_section = default_section
        self.encoding = encoding
        self.chunk_size = chunk_size

    def read_all(self) -> Document:
        """
        Read every section from the stream.

        End of input is not an error. On any error nothing is returned.

        Raises:
            ParseError: On a malformed section header or a failed read
        """
        cursor = Cursor(self.stream, self.encoding, self.chunk_size)
        sections: Document = {}
        current = self.default_section

        while True:
            cursor.new_line()
            char = cursor.next_char()

            if char is None:
                return sections

            if char in COMMENT_MARKERS:
                cursor.skip_to("\n")
            elif char == SECTION_OPEN:
                current = self._parse_header(cursor)
                sections.setdefault(current, {})
                logger.debug(f"Line {cursor.line}: section [{current}]")
            else:
                cursor.push_back()
                key, value = self._parse_option(cursor)
                key = key.strip()
                if key:
                    sections.setdefault(current, {})[key] = value
                else:
                    logger.debug(f"Line {cursor.line}: empty key, line ignored")

    def _parse_header(self, cursor: Cursor) -> str:
        """Parse a section name after the opening bracket."""
        field = cursor.field
        field.clear()

        while True:
            char = cursor.next_char()
            if char is None or char in COMMENT_MARKERS:
                raise cursor.error(ErrorKind.INVALID_SECTION_HEADER)
            if char == SECTION_CLOSE:
                break
            field.append(char)

        if not field:
            raise cursor.error(ErrorKind.EMPTY_SECTION_HEADER)

        name = "".join(field)
        # Trailing text is ignored; a missing final newline is fine
        cursor.skip_to("\n")
        return name

    def _parse_option(self, cursor: Cursor) -> tuple[str, str]:
        """
        Parse one option line into an untrimmed key and a value.

        Without a delimiter the whole line is the key and the value is empty.
        """
        field = cursor.field
        field.clear()
        key: str | None = None
        last: str | None = None

        while True:
            char = cursor.next_char()
            if char is None or char == "\n":
                break

            if char in COMMENT_MARKERS and (last is None or last == " "):
                if last == " ":
                    field.pop()
                cursor.skip_to("\n")
                break

            if key is None and char in DELIMITERS:
                key = "".join(field)
                field.clear()
                cursor.skip_spaces()
                last = None
                continue

            field.append(char)
            last = char

        text = "".join(field)
        if key is None:
            return text, ""
        return key, text


def read_all(
    stream: Any,
    default_section: str = DEFAULT_SECTION,
    encoding: str = DEFAULT_ENCODING,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Document:
    """
    Convenience function to read every section from a stream.

    Args:
        stream: Text or binary file-like object positioned at the start
        default_section: Name for options that appear before any header
        encoding: Encoding used when the stream yields bytes
        chunk_size: Number of characters or bytes read per call

    Returns:
        Mapping of section name to option map
    """
    reader = Reader(stream, default_section, encoding, chunk_size)
    return reader.read_all()


def read_string(text: str, default_section: str = DEFAULT_SECTION) -> Document:
    """Convenience function to read every section from a string."""
    return read_all(io.StringIO(text), default_section)
