"""
Logging configuration for iniscan.

Everything logs under the "iniscan" logger namespace. The library itself
never installs handlers; setup_logging() is called by the command line
entry point (or by an application that wants the same output).

Features:
- Console output on stderr, colored when attached to a terminal
- Optional rotating log file
- Per-module log level overrides
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path

ROOT_LOGGER = "iniscan"


class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BRIGHT_RED = "\033[91m"


LEVEL_COLORS = {
    logging.DEBUG: Colors.DIM + Colors.CYAN,
    logging.INFO: Colors.GREEN,
    logging.WARNING: Colors.YELLOW,
    logging.ERROR: Colors.RED,
    logging.CRITICAL: Colors.BOLD + Colors.BRIGHT_RED,
}

# Matched against the logger name, first hit wins
COMPONENT_COLORS = {
    "reader": Colors.CYAN,
    "config": Colors.MAGENTA,
    "main": Colors.GREEN,
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors the level, the component name and the message.

    The record is restored after formatting so other handlers see it intact.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def _component_color(self, name: str) -> str:
        for key, color in COMPONENT_COLORS.items():
            if key in name:
                return color
        return ""

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        saved = (record.levelname, record.name, record.msg)

        level_color = LEVEL_COLORS.get(record.levelno, "")
        record.levelname = f"{level_color}{record.levelname:8}{Colors.RESET}"

        component_color = self._component_color(record.name.lower())
        if component_color:
            record.name = f"{component_color}{record.name}{Colors.RESET}"

        if record.levelno >= logging.ERROR:
            record.msg = f"{Colors.RED}{record.msg}{Colors.RESET}"
        elif record.levelno >= logging.WARNING:
            record.msg = f"{Colors.YELLOW}{record.msg}{Colors.RESET}"

        try:
            return super().format(record)
        finally:
            record.levelname, record.name, record.msg = saved


class PlainFormatter(logging.Formatter):
    """Formatter without colors, with a fixed-width level name."""

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        record.levelname = f"{levelname:8}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


@dataclass
class LogConfig:
    """Logging configuration."""

    console_level: str = "WARNING"
    console_colors: bool = True

    file_enabled: bool = False
    file_path: str = "iniscan.log"
    file_level: str = "DEBUG"
    file_max_bytes: int = 1024 * 1024  # 1 MB
    file_backup_count: int = 3

    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    # Module name (without the "iniscan." prefix) -> level
    module_levels: dict[str, str] | None = None


def get_log_level(level_str: str) -> int:
    """Convert a level name to a logging constant, defaulting to INFO."""
    levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "warn": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return levels.get(level_str.lower(), logging.INFO)


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Install handlers on the package logger, replacing any previous ones.

    Args:
        config: Logging configuration (uses defaults if None)
    """
    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)  # Filtering happens in the handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(get_log_level(config.console_level))
    use_colors = config.console_colors and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    console_handler.setFormatter(
        ColoredFormatter(fmt=config.format, datefmt=config.date_format, use_colors=use_colors)
    )
    root_logger.addHandler(console_handler)

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
        )
        file_handler.setLevel(get_log_level(config.file_level))
        file_handler.setFormatter(PlainFormatter(fmt=config.format, datefmt=config.date_format))
        root_logger.addHandler(file_handler)

    if config.module_levels:
        for module_name, level_str in config.module_levels.items():
            get_logger(module_name).setLevel(get_log_level(level_str))


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (prefixed with "iniscan." unless already)

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
