"""
Entry point for iniscan.

Usage:
    python -m iniscan /path/to/settings.ini
    python -m iniscan --format summary /path/to/settings.ini
    python -m iniscan --help
"""

import argparse
import json
import sys
from pathlib import Path

from . import __version__
from .config.loader import ConfigError, ConfigLoader
from .config.reader import Document
from .const import DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING, DEFAULT_SECTION
from .logging import LogConfig, get_logger, setup_logging

logger = get_logger("main")


def print_summary(document: Document) -> None:
    """Print section names with their option counts."""
    print(f"Sections: {len(document)}")
    for name in sorted(document):
        print(f"  [{name}] {len(document[name])} option(s)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iniscan",
        description="Parse an INI file and print its sections",
    )

    parser.add_argument(
        "path",
        help="Path to the INI file",
    )

    parser.add_argument(
        "-f", "--format",
        choices=("json", "summary"),
        default="json",
        help="Output format (default: json)",
    )

    parser.add_argument(
        "-s", "--section",
        metavar="NAME",
        help="Print only this section",
    )

    parser.add_argument(
        "--default-section",
        metavar="NAME",
        default=DEFAULT_SECTION,
        help=f"Name for options before any header (default: {DEFAULT_SECTION})",
    )

    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"File encoding (default: {DEFAULT_ENCODING})",
    )

    parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        metavar="N",
        help=f"Bytes read per call (default: {DEFAULT_CHUNK_SIZE})",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file

    setup_logging(log_config)

    path = Path(args.path)
    if not path.exists():
        print(f"File not found: {path}", file=sys.stderr)
        return 1

    loader = ConfigLoader(
        default_section=args.default_section,
        encoding=args.encoding,
        chunk_size=args.chunk_size,
    )
    try:
        document = loader.load_file(path)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    if args.section is not None:
        if args.section not in document:
            print(f"Section not found: {args.section}", file=sys.stderr)
            return 1
        document = {args.section: document[args.section]}

    if args.format == "summary":
        print_summary(document)
    else:
        print(json.dumps(document, indent=2, sort_keys=True))

    return 0


if __name__ == "__main__":
    sys.exit(main())
