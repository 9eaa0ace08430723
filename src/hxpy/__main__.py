"""
Entry point for hxpy.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .app import Editor
from .config import EditorConfig
from .core.buffer import Buffer
from .exceptions import HxError
from .ui.terminal import Terminal

logger = logging.getLogger("hxpy")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog="hxpy",
        description="hxpy - Terminal Hex Editor",
        epilog="Octets per line and grouping are best kept multiples of 2 to prevent garbled display."
    )
    parser.add_argument(
        "file",
        type=str,
        help="File to open"
    )
    parser.add_argument(
        "-o", "--octets",
        type=str,
        default=None,
        help="Amount of octets per line (16-64, default 16)"
    )
    parser.add_argument(
        "-g", "--grouping",
        type=str,
        default=None,
        help="Grouping of bytes in one line (2-16, default 4)"
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"hxpy version {__version__}"
    )
    return parser.parse_args(argv)


def setup_logging(config: EditorConfig) -> None:
    """Log to a file if one is configured; the terminal is taken by the editor."""

    if not config.log_file:
        logger.addHandler(logging.NullHandler())
        return

    file_handler = logging.FileHandler(config.log_file)
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s"))
    logger.addHandler(file_handler)
    logger.setLevel(config.log_level)
    logger.info("Start logging...")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the application."""

    args = parse_args(argv)
    config = EditorConfig.from_args(args)
    setup_logging(config)

    buf = Buffer()
    try:
        buf.load_file(args.file)
    except HxError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        with Terminal(timeout=config.read_timeout) as terminal:
            Editor(terminal, buf, config).run()
    except HxError as e:
        logger.error("Fatal: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
