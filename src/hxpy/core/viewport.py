"""
Coordinate mapping between byte offsets and screen positions.

The cursor is addressed with 1-based (x, y) coordinates inside the visible
hex grid, where x is the byte column within a row and y the screen row. The
viewport ``line`` is the index of the topmost visible row, so the byte under
the cursor lives at::

    (cursor_y - 1 + line) * octets_per_line + (cursor_x - 1)

The last screen row is reserved for the status line.
"""

from dataclasses import dataclass
from typing import Tuple

MIN_SCREEN_ROWS = 3


def offset_at(cursor_x: int, cursor_y: int, line: int,
              octets_per_line: int, content_length: int) -> int:
    """Get the byte offset under the cursor, clamped to the buffer contents."""

    offset = (cursor_y - 1 + line) * octets_per_line + (cursor_x - 1)

    if offset <= 0 or content_length <= 0:
        return 0
    if offset >= content_length:
        return content_length - 1

    return offset


def position_at(offset: int, line: int, octets_per_line: int) -> Tuple[int, int]:
    """
    Get the cursor position showing the given offset.

    The viewport is not scrolled; the returned row may lie outside the
    visible screen if the caller did not scroll first.
    """

    return offset % octets_per_line + 1, offset // octets_per_line - line + 1


def scroll_limit(content_length: int, octets_per_line: int, screen_rows: int) -> int:
    """Get the largest legal viewport line."""

    return max(0, content_length // octets_per_line - (screen_rows - 2))


def clamp_scroll(line: int, units: int, content_length: int,
                 octets_per_line: int, screen_rows: int) -> int:
    """Scroll ``line`` by ``units`` rows and clamp it into the legal range."""

    line += units
    upper = scroll_limit(content_length, octets_per_line, screen_rows)

    if line >= upper:
        line = upper
    if line <= 0:
        line = 0

    return line


@dataclass
class Viewport:
    """Geometry of the hex grid on screen."""

    octets_per_line: int = 16
    grouping: int = 4
    screen_rows: int = 24
    screen_cols: int = 80
    line: int = 0

    def __post_init__(self) -> None:
        if self.octets_per_line < 1 or self.grouping < 1:
            raise ValueError("octets_per_line and grouping must be at least 1")

        self.screen_rows = max(MIN_SCREEN_ROWS, self.screen_rows)

    @property
    def visible_rows(self) -> int:
        """Number of screen rows used for the hex grid."""

        return self.screen_rows - 1

    @property
    def page_size(self) -> int:
        """Number of rows scrolled by page up/down."""

        return self.screen_rows - 2

    def resize(self, rows: int, cols: int) -> None:
        """Update the terminal dimensions."""

        self.screen_rows = max(MIN_SCREEN_ROWS, rows)
        self.screen_cols = cols

    def scroll(self, units: int, content_length: int) -> None:
        """Scroll by ``units`` rows within the legal range."""

        self.line = clamp_scroll(self.line, units, content_length,
                                 self.octets_per_line, self.screen_rows)


@dataclass
class Cursor:
    """1-based cursor position inside the hex grid."""

    x: int = 1
    y: int = 1
