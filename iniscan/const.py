"""
Application constants and parser defaults.
"""

# Application info
APP_NAME = "iniscan"
APP_VERSION = "0.1.0"

# Grammar
COMMENT_MARKERS = "#;"
DELIMITERS = "=:"
SECTION_OPEN = "["
SECTION_CLOSE = "]"

# Default values
DEFAULT_SECTION = "default"
DEFAULT_ENCODING = "utf-8"
DEFAULT_CHUNK_SIZE = 4096
