"""
Keyboard module decoding raw terminal bytes into key codes.

Plain bytes are returned verbatim. Cursor keys arrive as escape sequences,
e.g. the up arrow is ``1b 5b 41`` and page down ``1b 5b 36 7e``; these are
mapped onto the virtual codes of :class:`Key`, which start at 1000 so they
never collide with byte values.
"""

import logging
from enum import IntEnum
from typing import Dict, Final, Optional, Protocol

logger = logging.getLogger(__name__)


class Key(IntEnum):
    NULL = 0
    CTRL_Q = 0x11
    CTRL_S = 0x13
    ESC = 0x1B

    UP = 1000
    DOWN = 1001
    RIGHT = 1002
    LEFT = 1003
    HOME = 1004
    END = 1005
    PAGE_UP = 1006
    PAGE_DOWN = 1007


CSI_FINAL_KEYS: Final[Dict[int, Key]] = {
    ord('A'): Key.UP,
    ord('B'): Key.DOWN,
    ord('C'): Key.RIGHT,
    ord('D'): Key.LEFT,
    ord('H'): Key.HOME,
    ord('F'): Key.END,
}

CSI_TILDE_KEYS: Final[Dict[int, Key]] = {
    ord('1'): Key.HOME,
    ord('4'): Key.END,
    ord('5'): Key.PAGE_UP,
    ord('6'): Key.PAGE_DOWN,
}


class ByteSource(Protocol):
    """Something bytes can be read from one at a time."""

    def read_byte(self) -> Optional[int]:
        """
        Read a single byte, waiting at most one poll interval.

        Returns None if nothing arrived in time. May raise InterruptedError
        when the wait was interrupted by a resize of the terminal.
        """


class KeyDecoder:
    """Reads one logical key per call from a byte source. Keeps no state between calls."""

    def __init__(self, source: ByteSource) -> None:
        self.source = source

    def read_key(self) -> Optional[int]:
        """
        Read the next key.

        Returns:
            int: A byte value or a Key code, or None if no key was pressed
            within the poll interval or the read was interrupted
        """

        try:
            ch = self.source.read_byte()
            if ch is None:
                return None

            if ch == Key.ESC:
                return self._read_escape_sequence()

        except InterruptedError:
            logger.debug("Key read interrupted")
            return None

        return ch

    def _read_escape_sequence(self) -> int:
        """Decode the bytes following ESC, falling back to a bare ESC."""

        first = self._read_follow_up()
        if first is None:
            return Key.ESC

        second = self._read_follow_up()
        if second is None:
            return Key.ESC

        if first != ord('['):
            logger.debug("Unknown escape sequence %02x %02x", first, second)
            return Key.ESC

        if ord('0') <= second <= ord('9'):
            third = self._read_follow_up()
            if third is None:
                return Key.ESC

            if third == ord('~') and second in CSI_TILDE_KEYS:
                return CSI_TILDE_KEYS[second]

            logger.debug("Unknown escape sequence [%c%c", second, third)
            return Key.ESC

        return CSI_FINAL_KEYS.get(second, Key.ESC)

    def _read_follow_up(self) -> Optional[int]:
        """Read a byte of an escape sequence, retrying reads cut short by a resize."""

        while True:
            try:
                return self.source.read_byte()
            except InterruptedError:
                logger.debug("Escape sequence read interrupted, retrying")
