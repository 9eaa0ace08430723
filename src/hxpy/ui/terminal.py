"""
Terminal module: raw mode, size queries, timed byte reads and frame output.
"""

import errno
import logging
import os
import select
import signal
import termios
import tty
from typing import Any, Optional, Tuple

from ..exceptions import TerminalError
from .window import CLEAR_SCREEN

logger = logging.getLogger(__name__)


class Terminal:
    """The controlling terminal, used as a context manager around the editor loop."""

    def __init__(self, stdin_fd: int = 0, stdout_fd: int = 1, timeout: float = 0.1) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.timeout = timeout
        self.resize_pending = False
        self._saved_attrs: Optional[Any] = None
        self._saved_winch_handler: Any = None
        self._waiting = False

    def __enter__(self) -> 'Terminal':
        self.enable_raw_mode()
        self._saved_winch_handler = signal.signal(signal.SIGWINCH, self._handle_winch)
        self.clear_screen()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if self._saved_winch_handler is not None:
            signal.signal(signal.SIGWINCH, self._saved_winch_handler)
            self._saved_winch_handler = None

        self.clear_screen()
        self.disable_raw_mode()

    def enable_raw_mode(self) -> None:
        """Put the terminal in raw mode, saving the previous settings."""

        if not os.isatty(self.stdin_fd):
            raise TerminalError("Input is not a TTY")

        try:
            self._saved_attrs = termios.tcgetattr(self.stdin_fd)
            tty.setraw(self.stdin_fd, when=termios.TCSAFLUSH)
        except termios.error as e:
            raise TerminalError(f"Unable to set terminal to raw mode: {e}") from e

    def disable_raw_mode(self) -> None:
        """Restore the terminal settings saved by enable_raw_mode."""

        if self._saved_attrs is None:
            return

        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_attrs)
        self._saved_attrs = None

    def get_size(self) -> Tuple[int, int]:
        """Get the terminal size as (rows, columns)."""

        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError as e:
            raise TerminalError(f"Failed to query terminal size: {e}") from e

        return size.lines, size.columns

    def _handle_winch(self, signum: int, frame: Any) -> None:
        self.resize_pending = True
        logger.debug("SIGWINCH received")

        # Abort a blocked read so the loop can redraw right away.
        if self._waiting:
            raise InterruptedError(errno.EINTR, "read interrupted by terminal resize")

    def consume_resize(self) -> bool:
        """Return True once per received resize notification."""

        pending = self.resize_pending
        self.resize_pending = False
        return pending

    def read_byte(self) -> Optional[int]:
        """
        Read one byte, waiting at most ``timeout`` seconds.

        Returns None if nothing was typed in time. Raises InterruptedError if
        the terminal was resized while waiting.
        """

        self._waiting = True
        try:
            ready, _, _ = select.select([self.stdin_fd], [], [], self.timeout)
        finally:
            self._waiting = False

        if not ready:
            return None

        data = os.read(self.stdin_fd, 1)
        if not data:
            return None

        return data[0]

    def write(self, frame: str) -> None:
        """Write a complete frame to the terminal."""

        data = frame.encode('utf-8', errors='replace')
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    def clear_screen(self) -> None:
        self.write(CLEAR_SCREEN)
