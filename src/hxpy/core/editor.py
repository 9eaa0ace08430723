"""
Editor state: buffer, viewport, cursor, mode and status of the single
editor instance, plus cursor movement and scrolling on top of the
coordinate mapper.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Dict

from .buffer import Buffer
from .viewport import Cursor, Viewport, offset_at, position_at

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Editing mode, gating which keys are meaningful."""

    NORMAL = "normal"
    INSERT = "insert"
    REPLACE = "replace"
    COMMAND = "command"


class Severity(Enum):
    """Status message severity."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Direction(Enum):
    """Cursor movement directions."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


MODE_MESSAGES: Final[Dict[Mode, str]] = {
    Mode.NORMAL: "",
    Mode.INSERT: "-- INSERT --",
    Mode.REPLACE: "-- REPLACE --",
    Mode.COMMAND: ":",
}


@dataclass
class Status:
    """Latest status line message."""

    message: str = ""
    severity: Severity = Severity.INFO


@dataclass
class EditorState:
    """Mutable state of the editor, exclusively owned by the control loop."""

    buffer: Buffer
    viewport: Viewport = field(default_factory=Viewport)
    cursor: Cursor = field(default_factory=Cursor)
    mode: Mode = Mode.NORMAL
    status: Status = field(default_factory=Status)

    def set_status(self, severity: Severity, message: str) -> None:
        """Replace the status message."""

        self.status = Status(message, severity)

    def set_mode(self, mode: Mode) -> None:
        """Switch to another mode and show its indicator."""

        if mode is not self.mode:
            logger.debug("Mode %s -> %s", self.mode.value, mode.value)

        self.mode = mode
        self.set_status(Severity.INFO, MODE_MESSAGES[mode])

    def offset_at_cursor(self) -> int:
        """Get the byte offset the cursor is on."""

        vp = self.viewport
        return offset_at(self.cursor.x, self.cursor.y, vp.line,
                         vp.octets_per_line, self.buffer.content_length)

    def scroll(self, units: int) -> None:
        """Scroll the viewport, keeping the cursor on existing content."""

        self.viewport.scroll(units, self.buffer.content_length)
        logger.debug("Scrolled %+d to line %d", units, self.viewport.line)
        self._clamp_cursor_to_content()

    def _clamp_cursor_to_content(self) -> None:
        """Pull the cursor back onto the last byte if it points past the end."""

        offset = self.offset_at_cursor()
        if offset >= self.buffer.content_length - 1:
            vp = self.viewport
            self.cursor.x, self.cursor.y = position_at(offset, vp.line, vp.octets_per_line)

    def move_cursor(self, direction: Direction, amount: int = 1) -> None:
        """
        Move the cursor ``amount`` steps. Moving past the row edges wraps to
        the previous/next row, moving past the top or bottom of the screen
        scrolls, and the cursor never ends up past the last byte.
        """

        cursor = self.cursor
        vp = self.viewport

        if direction is Direction.UP:
            cursor.y -= amount
        elif direction is Direction.DOWN:
            cursor.y += amount
        elif direction is Direction.LEFT:
            cursor.x -= amount
        elif direction is Direction.RIGHT:
            cursor.x += amount

        if cursor.x <= 1 and cursor.y <= 1 and vp.line <= 0:
            cursor.x = 1
            cursor.y = 1
            return

        while cursor.x < 1:
            cursor.x += vp.octets_per_line
            cursor.y -= 1
        while cursor.x > vp.octets_per_line:
            cursor.x -= vp.octets_per_line
            cursor.y += 1

        if cursor.y < 1 and vp.line <= 0:
            cursor.y = 1

        if cursor.y > vp.visible_rows:
            units = cursor.y - vp.visible_rows
            cursor.y = vp.visible_rows
            self.viewport.scroll(units, self.buffer.content_length)
        elif cursor.y < 1:
            units = cursor.y - 1
            cursor.y = 1
            self.viewport.scroll(units, self.buffer.content_length)

        self._clamp_cursor_to_content()

    def move_to_line_start(self) -> None:
        self.cursor.x = 1

    def move_to_line_end(self) -> None:
        self.cursor.x = self.viewport.octets_per_line
        self._clamp_cursor_to_content()

    def goto_offset(self, offset: int) -> None:
        """Place the cursor on ``offset``, scrolling just enough to show it."""

        vp = self.viewport
        length = self.buffer.content_length
        row = offset // vp.octets_per_line

        if row < vp.line:
            vp.line = row
        elif row >= vp.line + vp.visible_rows:
            vp.line = row - vp.visible_rows + 1
        vp.scroll(0, length)

        self.cursor.x, self.cursor.y = position_at(offset, vp.line, vp.octets_per_line)

    def resize(self, rows: int, cols: int) -> None:
        """Apply new terminal dimensions, keeping the cursor on the same byte."""

        offset = self.offset_at_cursor()
        self.viewport.resize(rows, cols)
        self.goto_offset(offset)

    def goto_start(self) -> None:
        self.viewport.line = 0
        self.cursor.x, self.cursor.y = position_at(0, 0, self.viewport.octets_per_line)

    def goto_end(self) -> None:
        """Scroll to the final row and place the cursor on the last byte."""

        vp = self.viewport
        length = self.buffer.content_length
        vp.scroll(length, length)
        self.cursor.x, self.cursor.y = position_at(max(0, length - 1), vp.line, vp.octets_per_line)
