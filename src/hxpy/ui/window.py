"""
Screen rendering module for the hex editor UI.

A frame is composed as one string of text and ANSI control sequences and
written to the terminal in a single call::

    000000000: 4d495420 4c696365 6e73650a 0a436f70  MIT License..Cop
    000000010: 79726967 68742028 63292032 30313620  yright (c) 2016
"""

import logging
from typing import Dict, Final, List

from pygments.console import ansiformat, codes, colorize

from ..core.editor import EditorState, Severity
from ..utils.hex_utils import format_offset

logger = logging.getLogger(__name__)

ADDRESS_DIGITS: Final[int] = 9
ADDRESS_WIDTH: Final[int] = ADDRESS_DIGITS + 1  # address plus ':'

HIDE_CURSOR: Final[str] = "\x1b[?25l"
SHOW_CURSOR: Final[str] = "\x1b[?25h"
CURSOR_HOME: Final[str] = "\x1b[H"
CLEAR_TO_END: Final[str] = "\x1b[0J"
CLEAR_SCREEN: Final[str] = "\x1b[0m\x1b[H\x1b[2J"
RESET: Final[str] = "\x1b[0m"

ASCII_HIGHLIGHT: Final[str] = "\x1b[30;47m"
ASCII_CURSOR_ROW: Final[str] = codes["reset"] + codes["bold"] + codes["green"]

STATUS_STYLES: Final[Dict[Severity, str]] = {
    Severity.INFO: "\x1b[0;30;47m",     # black on light gray
    Severity.WARNING: "\x1b[0;30;43m",  # black on yellow
    Severity.ERROR: "\x1b[1;37;41m",    # bold white on red
}


def move_to(row: int, col: int) -> str:
    """Control sequence moving the terminal cursor (1-based)."""

    return f"\x1b[{row};{col}H"


def hex_area_width(octets_per_line: int, grouping: int) -> int:
    """Width in characters of the hex part of a full row, separators included."""

    return octets_per_line * 2 + (octets_per_line + grouping - 1) // grouping


def hex_column(cursor_x: int, grouping: int) -> int:
    """Terminal column (1-based) of the first hex digit of byte column ``cursor_x``."""

    col = cursor_x - 1
    return ADDRESS_WIDTH + 2 + col * 2 + col // grouping


class Renderer:
    """Composes complete screen frames from the editor state."""

    def render(self, state: EditorState) -> str:
        """Build the frame for the current state."""

        parts: List[str] = [HIDE_CURSOR, CURSOR_HOME]

        self.draw_contents(state, parts)
        self.draw_status(state, parts)
        self.draw_ruler(state, parts)

        cursor = state.cursor
        parts.append(move_to(cursor.y, hex_column(cursor.x, state.viewport.grouping)))
        parts.append(SHOW_CURSOR)

        return ''.join(parts)

    def draw_contents(self, state: EditorState, parts: List[str]) -> None:
        """Draw the address, hex and ASCII columns of the visible rows."""

        buf = state.buffer
        vp = state.viewport
        length = buf.content_length
        opl = vp.octets_per_line

        if length <= 0:
            parts.append(CLEAR_TO_END)
            return

        start_offset = vp.line * opl
        if start_offset >= length:
            start_offset = ((length - 1) // opl) * opl

        end_offset = min(start_offset + vp.visible_rows * opl, length)
        full_width = hex_area_width(opl, vp.grouping)

        logger.debug("Rows: %d, start offset: %09x, end offset: %09x",
                     vp.screen_rows, start_offset, end_offset)

        for rownum, row_offset in enumerate(range(start_offset, end_offset, opl), 1):
            data, ascii_str = buf.get_line(row_offset // opl, opl)

            hex_parts = []
            for col, value in enumerate(data):
                if col % vp.grouping == 0:
                    hex_parts.append(' ')
                hex_parts.append(f"{value:02x}")

            parts.append(colorize("yellow", format_offset(row_offset, ADDRESS_DIGITS)))
            parts.append(":")

            if len(data) == opl:
                parts.append(''.join(hex_parts))
                parts.append("  ")
                parts.append(self.draw_ascii(state, rownum, ascii_str))
                parts.append("\r\n")
                continue

            # Pad the last, partial row so the ASCII column stays aligned.
            parts.append(''.join(hex_parts).ljust(full_width))
            parts.append(RESET + "  ")
            parts.append(self.draw_ascii(state, rownum, ascii_str))

        parts.append(CLEAR_TO_END)

    def draw_ascii(self, state: EditorState, rownum: int, ascii_str: str) -> str:
        """Render the ASCII column of a row, highlighting the byte under the cursor."""

        cursor = state.cursor
        if rownum != cursor.y:
            return ansiformat("*gray*", ascii_str)

        out = []
        for col, char in enumerate(ascii_str, 1):
            out.append(ASCII_HIGHLIGHT if col == cursor.x else ASCII_CURSOR_ROW)
            out.append(char)
        out.append(codes["reset"])

        return ''.join(out)

    def draw_status(self, state: EditorState, parts: List[str]) -> None:
        """Draw the status message on the last screen row."""

        vp = state.viewport
        status = state.status

        parts.append(move_to(vp.screen_rows, 0))
        parts.append(STATUS_STYLES[status.severity])
        parts.append(status.message[:vp.screen_cols])
        parts.append(RESET)

    def draw_ruler(self, state: EditorState, parts: List[str]) -> None:
        """Draw offset, byte value and position percentage at the bottom right."""

        buf = state.buffer
        if buf.content_length <= 0:
            return

        offset = state.offset_at_cursor()
        value = buf.get_byte(offset)
        percentage = int((offset + 1) / buf.content_length * 100)

        ruler = f"0x{format_offset(offset)},{offset} ({value:02x})  {percentage}%"

        vp = state.viewport
        parts.append(RESET)
        parts.append(move_to(vp.screen_rows, max(1, vp.screen_cols - len(ruler))))
        parts.append(ruler)
