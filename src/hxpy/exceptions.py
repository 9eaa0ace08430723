"""
Exceptions raised by the hex editor.
"""


class HxError(Exception):
    """Base class for unrecoverable editor errors."""


class FileLoadError(HxError):
    """The file to edit could not be read into memory."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Cannot open file '{filename}': {reason}")
        self.filename = filename
        self.reason = reason


class TerminalError(HxError):
    """The terminal cannot be used (no tty, unknown size, raw mode failure)."""
