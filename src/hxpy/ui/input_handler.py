"""
Input handler module dispatching key codes to editor actions.
"""

import logging
from enum import Enum
from functools import partial
from typing import Callable, Dict, Final, Optional

from ..core.editor import Direction, EditorState, Mode, Severity
from ..utils.hex_utils import combine_nibbles, describe_key, format_offset, hex_digit_value
from .keyboard import Key

logger = logging.getLogger(__name__)

UNSAVED_CHANGES_STATUS_MESSAGE: Final[str] = "Buffer has unsaved changes. Press Ctrl+S to save or Ctrl+Q again to quit without saving."
NOTHING_TO_DELETE_STATUS_MESSAGE: Final[str] = "Nothing to delete"
EMPTY_BUFFER_STATUS_MESSAGE: Final[str] = "Buffer is empty"


class Action(Enum):
    """What the application loop has to do after a key was handled."""

    NONE = "none"
    SAVE = "save"
    QUIT = "quit"


class InputHandler:
    """Mode state machine: maps keys to cursor, viewport and buffer changes."""

    def __init__(self, state: EditorState) -> None:
        self.state = state
        self.current_hex_digit: Optional[int] = None
        self.pending_key: Optional[int] = None
        self._quit_warning_shown = False
        self.command_handlers: Dict[int, Callable[[], None]] = self._setup_handlers()
        self.normal_handlers: Dict[int, Callable[[], None]] = self._setup_normal_handlers()
        self.mode_handlers: Dict[Mode, Callable[[int], Action]] = {
            Mode.NORMAL: self._handle_normal,
            Mode.INSERT: self._handle_hex_input,
            Mode.REPLACE: self._handle_hex_input,
            Mode.COMMAND: self._handle_command,
        }

    def _setup_handlers(self) -> Dict[int, Callable[[], None]]:
        """Set up the handlers of keys available in every mode."""

        state = self.state
        return {
            Key.UP: partial(state.move_cursor, Direction.UP),
            Key.DOWN: partial(state.move_cursor, Direction.DOWN),
            Key.LEFT: partial(state.move_cursor, Direction.LEFT),
            Key.RIGHT: partial(state.move_cursor, Direction.RIGHT),
            Key.HOME: state.move_to_line_start,
            Key.END: state.move_to_line_end,
            Key.PAGE_UP: self._page_up,
            Key.PAGE_DOWN: self._page_down,
        }

    def _setup_normal_handlers(self) -> Dict[int, Callable[[], None]]:
        """Set up the normal mode command handlers."""

        state = self.state
        return {
            ord('h'): partial(state.move_cursor, Direction.LEFT),
            ord('j'): partial(state.move_cursor, Direction.DOWN),
            ord('k'): partial(state.move_cursor, Direction.UP),
            ord('l'): partial(state.move_cursor, Direction.RIGHT),
            ord('b'): self._group_back,
            ord('w'): self._group_forward,
            ord('x'): self._delete_byte,
            ord('i'): partial(state.set_mode, Mode.INSERT),
            ord('r'): partial(state.set_mode, Mode.REPLACE),
            ord(':'): partial(state.set_mode, Mode.COMMAND),
            ord('G'): state.goto_end,
            ord('g'): self._start_goto_start,
            ord(']'): partial(self._increment_byte, 1),
            ord('['): partial(self._increment_byte, -1),
        }

    def handle_key(self, key: int) -> Action:
        """Handle a single key and tell the caller what else has to happen."""

        logger.debug("Key %s in %s mode", describe_key(key), self.state.mode.value)

        if key != Key.CTRL_Q:
            self._quit_warning_shown = False

        if key == Key.ESC:
            self._reset_pending()
            self.state.set_mode(Mode.NORMAL)
            return Action.NONE

        if self.pending_key is not None:
            return self._handle_pending(key)

        if self.current_hex_digit is not None:
            return self._handle_hex_input(key)

        if key == Key.CTRL_Q:
            return self._quit()

        if key == Key.CTRL_S:
            return Action.SAVE

        if key in self.command_handlers:
            self.command_handlers[key]()
            return Action.NONE

        return self.mode_handlers[self.state.mode](key)

    def _reset_pending(self) -> None:
        self.current_hex_digit = None
        self.pending_key = None

    def _handle_normal(self, key: int) -> Action:
        if key in self.normal_handlers:
            self.normal_handlers[key]()

        return Action.NONE

    def _handle_command(self, key: int) -> Action:
        # Typed commands are not supported, keys are dropped until ESC.
        return Action.NONE

    def _handle_pending(self, key: int) -> Action:
        """Complete a two-key sequence; a mismatching second key drops it."""

        pending = self.pending_key
        self.pending_key = None

        if pending == ord('g') and key == ord('g'):
            self.state.goto_start()

        return Action.NONE

    def _start_goto_start(self) -> None:
        self.pending_key = ord('g')

    def _handle_hex_input(self, key: int) -> Action:
        """Handle hex digit input in insert and replace mode."""

        value = hex_digit_value(key) if key < 256 else None
        if value is None:
            self.current_hex_digit = None
            self.state.set_status(Severity.ERROR, f"'{self._key_name(key)}' is not valid hex")
            return Action.NONE

        if self.current_hex_digit is None:
            self.current_hex_digit = value
            return Action.NONE

        byte = combine_nibbles(self.current_hex_digit, value)
        self.current_hex_digit = None

        if self.state.mode is Mode.INSERT:
            self._insert_byte(byte)
        else:
            self._replace_byte(byte)

        return Action.NONE

    @staticmethod
    def _key_name(key: int) -> str:
        if key >= Key.UP:
            return Key(key).name

        return describe_key(key)

    def _replace_byte(self, value: int) -> None:
        buf = self.state.buffer
        if buf.content_length == 0:
            self.state.set_status(Severity.WARNING, EMPTY_BUFFER_STATUS_MESSAGE)
            return

        offset = self.state.offset_at_cursor()
        buf.replace_byte(offset, value)
        self.state.move_cursor(Direction.RIGHT)
        self.state.set_status(
            Severity.INFO,
            f"Replaced byte at offset {format_offset(offset)} with {value:02x}"
        )

    def _insert_byte(self, value: int) -> None:
        """Insert after the byte under the cursor and move onto the new byte."""

        buf = self.state.buffer
        offset = self.state.offset_at_cursor() + 1 if buf.content_length else 0

        buf.insert_byte(offset, value)
        self.state.goto_offset(offset)
        self.state.set_status(
            Severity.INFO,
            f"Inserted byte {value:02x} at offset {format_offset(offset)}"
        )

    def _delete_byte(self) -> None:
        """Delete the byte at the cursor."""

        buf = self.state.buffer
        offset = self.state.offset_at_cursor()

        if not buf.delete_byte(offset):
            self.state.set_status(Severity.WARNING, NOTHING_TO_DELETE_STATUS_MESSAGE)
            return

        # Deleting the last byte moves the cursor one step left.
        self.state.goto_offset(min(offset, max(0, buf.content_length - 1)))

    def _increment_byte(self, amount: int) -> None:
        buf = self.state.buffer
        if buf.content_length == 0:
            self.state.set_status(Severity.WARNING, EMPTY_BUFFER_STATUS_MESSAGE)
            return

        offset = self.state.offset_at_cursor()
        buf.replace_byte(offset, (buf.get_byte(offset) + amount) & 0xFF)

    def _group_back(self) -> None:
        self.state.move_cursor(Direction.LEFT, self.state.viewport.grouping)

    def _group_forward(self) -> None:
        self.state.move_cursor(Direction.RIGHT, self.state.viewport.grouping)

    def _page_up(self) -> None:
        self.state.scroll(-self.state.viewport.page_size)

    def _page_down(self) -> None:
        self.state.scroll(self.state.viewport.page_size)

    def _quit(self) -> Action:
        """Quit, asking for a second Ctrl+Q when there are unsaved changes."""

        if self.state.buffer.dirty and not self._quit_warning_shown:
            self._quit_warning_shown = True
            self.state.set_status(Severity.WARNING, UNSAVED_CHANGES_STATUS_MESSAGE)
            return Action.NONE

        return Action.QUIT
