"""CLI entry point for ics-decode."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .config import load_settings
from .decoder import decode
from .utils.exceptions import ConfigurationError, IcsDecodeError
from .utils.logging import setup_logging


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="ics-decode - Decode an iCalendar file and print it as JSON"
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="iCalendar file to decode (default: standard input)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (overrides config)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    # Setup logging
    log_level = "DEBUG" if args.verbose else settings.log_level
    logger = setup_logging(level=log_level, log_file=settings.log_file)

    indent = args.indent if args.indent is not None else settings.json_indent
    if indent < 0:
        print(f"Invalid indent: {indent}", file=sys.stderr)
        return 1

    try:
        if args.file == "-":
            logger.debug("Reading calendar from standard input")
            calendar = decode(sys.stdin.buffer, settings)
        else:
            logger.debug(f"Reading calendar from {args.file}")
            with open(args.file, "rb") as f:
                calendar = decode(f, settings)
    except IcsDecodeError as e:
        logger.debug("Decode failed", exc_info=True)
        print(f"Decode error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    print(calendar.to_json(indent=indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
