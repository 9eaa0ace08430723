"""
Buffer module holding the bytes of the file being edited.
"""

import logging
import os
import stat
from typing import Optional, Tuple

from ..exceptions import FileLoadError
from ..utils.hex_utils import to_printable

logger = logging.getLogger(__name__)


class Buffer:
    """In-memory byte buffer of a single file."""

    def __init__(self, initial_data: bytes = b'') -> None:
        self.contents = bytearray(initial_data)
        self.dirty = False
        self.filename: Optional[str] = None
        self.readonly = False

    @property
    def content_length(self) -> int:
        """Number of bytes in the buffer."""

        return len(self.contents)

    def _check_offset(self, offset: int, limit: int) -> None:
        if not 0 <= offset < limit:
            raise IndexError(f"Offset {offset} out of range for buffer of {self.content_length} bytes")

    @staticmethod
    def _check_value(value: int) -> None:
        if not 0 <= value <= 255:
            raise ValueError("Byte value must be between 0 and 255")

    def get_byte(self, offset: int) -> int:
        """Get the byte value at the specified offset."""

        self._check_offset(offset, self.content_length)
        return self.contents[offset]

    def get_line(self, row: int, octets_per_line: int) -> Tuple[bytes, str]:
        """Get a row of bytes and its ASCII representation."""

        start = row * octets_per_line
        end = min(start + octets_per_line, self.content_length)
        data = bytes(self.contents[start:end])

        return data, ''.join(to_printable(b) for b in data)

    def insert_byte(self, offset: int, value: int) -> None:
        """Insert a byte at the specified offset. Offset may equal the length (append)."""

        self._check_value(value)
        self._check_offset(offset, self.content_length + 1)

        self.contents.insert(offset, value)
        self.dirty = True

    def delete_byte(self, offset: int) -> bool:
        """
        Delete the byte at the specified offset.

        Returns:
            bool: False if the buffer was empty and nothing was deleted
        """

        if self.content_length == 0:
            return False

        self._check_offset(offset, self.content_length)

        del self.contents[offset]
        self.dirty = True
        return True

    def replace_byte(self, offset: int, value: int) -> None:
        """Replace the byte at the specified offset."""

        self._check_value(value)
        self._check_offset(offset, self.content_length)

        self.contents[offset] = value
        self.dirty = True

    def load_file(self, filename: str) -> None:
        """Load data from a file."""

        try:
            st = os.stat(filename)
        except OSError as e:
            raise FileLoadError(filename, e.strerror or str(e)) from e

        if not stat.S_ISREG(st.st_mode):
            raise FileLoadError(filename, "not a regular file")

        try:
            with open(filename, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise FileLoadError(filename, e.strerror or str(e)) from e

        self.contents = bytearray(data)
        self.filename = filename
        self.dirty = False
        self.readonly = not os.access(filename, os.W_OK)

        logger.info("Loaded %s (%d bytes, readonly=%s)", filename, len(data), self.readonly)

    def save_file(self, filename: Optional[str] = None) -> None:
        """
        Save data to a file.

        Args:
            filename: Optional filename to save to. If None, uses current filename.

        Raises:
            IOError: If there is no filename or the file cannot be written
        """

        save_filename = filename or self.filename
        if not save_filename:
            raise IOError("No filename specified")

        try:
            with open(save_filename, 'wb') as f:
                f.write(bytes(self.contents))
        except OSError as e:
            logger.warning("Saving %s failed: %s", save_filename, e)
            raise IOError(f"Unable to write '{save_filename}': {e.strerror or e}") from e

        self.filename = save_filename
        self.dirty = False
        logger.info("Wrote %d bytes to %s", self.content_length, save_filename)
