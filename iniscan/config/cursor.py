"""
Character cursor over a readable stream.

Delivers the input one logical character at a time:
- Text streams (read() returns str) are consumed as-is
- Binary streams (read() returns bytes) are decoded incrementally
- "\\r\\n" is folded into "\\n"; a bare "\\r" stays a literal character
- Line and column counters are kept for error reporting

The cursor has no knowledge of INI grammar.
"""

import codecs
from enum import Enum
from typing import Any

from ..const import DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING


class ErrorKind(Enum):
    """Kinds of failure a parse can stop with."""

    READ_FAILURE = "read failure"
    INVALID_SECTION_HEADER = "invalid section header"
    EMPTY_SECTION_HEADER = "empty section header"


class ParseError(Exception):
    """
    Exception raised for located parse errors.

    Carries the line (first line is 1) and the column counter at the point
    where the error was detected. Read failures chain the original exception.
    """

    def __init__(self, kind: ErrorKind, line: int, column: int, detail: str | None = None):
        self._kind = kind
        self._line = line
        self._column = column
        self._detail = detail
        message = f"{kind.value}: {detail}" if detail else kind.value
        super().__init__(f"line {line}, column {column}: {message}")

    def __reduce__(self):
        # Rebuild from the fields, not from the rendered message
        return (self.__class__, (self._kind, self._line, self._column, self._detail))

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column


class Cursor:
    """
    Single-use cursor for one parse.

    Owns the accumulation buffer (``field``) that the reader fills with the
    characters of the key, value or section name being assembled.
    """

    def __init__(
        self,
        stream: Any,
        encoding: str = DEFAULT_ENCODING,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        self.stream = stream
        self.chunk_size = chunk_size
        self.line = 0
        self.column = 0
        self.field: list[str] = []

        # Raises LookupError for unknown encodings
        self._decoder = codecs.getincrementaldecoder(encoding)()
        self._chunk = ""
        self._pos = 0
        self._eof = False
        self._pending: list[str] = []
        self._last: str | None = None

    def error(self, kind: ErrorKind, detail: str | None = None) -> ParseError:
        """Create a ParseError located at the current position."""
        return ParseError(kind, self.line, self.column, detail)

    def _fill(self) -> bool:
        """Load the next chunk from the stream. Returns False at end of input."""
        while not self._eof:
            try:
                data = self.stream.read(self.chunk_size)
                final = not data
                if isinstance(data, (bytes, bytearray)):
                    data = self._decoder.decode(data, final=final)
            except (OSError, ValueError) as e:
                # UnicodeDecodeError is a ValueError
                raise self.error(ErrorKind.READ_FAILURE, str(e)) from e

            self._eof = final
            if data:
                self._chunk = data
                self._pos = 0
                return True
        return False

    def _read_raw(self) -> str | None:
        """Read one character, ignoring line-ending folding."""
        if self._pending:
            return self._pending.pop()

        if self._pos >= len(self._chunk) and not self._fill():
            return None

        char = self._chunk[self._pos]
        self._pos += 1
        return char

    def new_line(self) -> None:
        """Start a new scan line: bump the line counter, reset the column."""
        self.line += 1
        self.column = 0

    def next_char(self) -> str | None:
        """Read one logical character, or None at end of input."""
        char = self._read_raw()

        # Anytime \r is followed by \n the pair is folded to \n.
        # Text mixing bare \r with \r\n is not normalized any further.
        if char == "\r":
            peeked = self._read_raw()
            if peeked == "\n":
                char = "\n"
            elif peeked is not None:
                self._pending.append(peeked)

        self.column += 1
        self._last = char
        return char

    def push_back(self) -> None:
        """Return the last character read so the next read yields it again."""
        if self._last is not None:
            self._pending.append(self._last)
            self._last = None
        self.column -= 1

    def peek(self) -> str | None:
        """Look at the next logical character without consuming it."""
        char = self.next_char()
        self.push_back()
        return char

    def skip_to(self, delim: str) -> None:
        """Consume characters up to and including delim, or to end of input."""
        while True:
            char = self.next_char()
            if char is None or char == delim:
                return

    def skip_spaces(self) -> None:
        """Consume space characters, stopping before the first non-space."""
        while self.peek() == " ":
            self.next_char()
