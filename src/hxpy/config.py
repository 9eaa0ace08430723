"""Configuration for hxpy.

Options come from the command line; logging is configured through the
``HXPY_LOG_FILE`` and ``HXPY_LOG_LEVEL`` environment variables since the
terminal itself is taken by the editor.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_OCTETS_PER_LINE = 16
MIN_OCTETS_PER_LINE = 16
MAX_OCTETS_PER_LINE = 64

DEFAULT_GROUPING = 4
MIN_GROUPING = 2
MAX_GROUPING = 16

DEFAULT_READ_TIMEOUT = 0.1

LOG_FILE_ENV = "HXPY_LOG_FILE"
LOG_LEVEL_ENV = "HXPY_LOG_LEVEL"


def parse_int_option(value: Optional[str], minimum: int, maximum: int, default: int) -> int:
    """Parse an integer option, falling back to ``default`` when invalid or out of range."""

    if value is None:
        return default

    try:
        parsed = int(value, 10)
    except (TypeError, ValueError):
        return default

    if parsed < minimum or parsed > maximum:
        return default

    return parsed


@dataclass
class EditorConfig:
    """Settings the editor is started with."""

    octets_per_line: int = DEFAULT_OCTETS_PER_LINE
    grouping: int = DEFAULT_GROUPING
    read_timeout: float = DEFAULT_READ_TIMEOUT
    log_file: Optional[str] = None
    log_level: int = logging.INFO

    @classmethod
    def from_args(cls, args: argparse.Namespace, environ: Optional[Mapping[str, str]] = None) -> EditorConfig:
        """Build the configuration from parsed arguments and the environment."""

        env = os.environ if environ is None else environ

        level_name = env.get(LOG_LEVEL_ENV, "INFO").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO

        return cls(
            octets_per_line=parse_int_option(
                args.octets, MIN_OCTETS_PER_LINE, MAX_OCTETS_PER_LINE, DEFAULT_OCTETS_PER_LINE
            ),
            grouping=parse_int_option(args.grouping, MIN_GROUPING, MAX_GROUPING, DEFAULT_GROUPING),
            log_file=env.get(LOG_FILE_ENV) or None,
            log_level=level,
        )
