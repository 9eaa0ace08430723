"""Shared fixtures for hxpy tests."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple, Union

import pytest

from hxpy.core.buffer import Buffer
from hxpy.core.editor import EditorState
from hxpy.core.viewport import Viewport

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Remove control sequences, leaving the visible characters."""
    return ANSI_ESCAPE.sub("", text)


class FakeSource:
    """Byte source replaying a script of bytes, timeouts (None) and exceptions."""

    def __init__(self, items: Iterable[Union[int, str, None, BaseException]]):
        self.items: List[Union[int, None, BaseException]] = [
            ord(item) if isinstance(item, str) else item for item in items
        ]
        self.reads = 0

    def read_byte(self) -> Optional[int]:
        self.reads += 1
        if not self.items:
            return None
        item = self.items.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class FakeTerminal(FakeSource):
    """Terminal stand-in: scripted input, recorded output, adjustable size.

    Once the script is exhausted it keeps answering Ctrl+Q so run() ends.
    """

    def __init__(self, items=(), size: Tuple[int, int] = (24, 80)):
        super().__init__(items)
        self.size = size
        self.frames: List[str] = []
        self.clears = 0
        self.resize_pending = False

    def read_byte(self) -> Optional[int]:
        if not self.items:
            return 0x11
        return super().read_byte()

    def get_size(self) -> Tuple[int, int]:
        return self.size

    def write(self, frame: str) -> None:
        self.frames.append(frame)

    def clear_screen(self) -> None:
        self.clears += 1

    def consume_resize(self) -> bool:
        pending = self.resize_pending
        self.resize_pending = False
        return pending


@pytest.fixture
def make_state():
    """Factory for editor states over the given bytes."""

    def _make(data: bytes = b"", rows: int = 24, cols: int = 80,
              octets_per_line: int = 16, grouping: int = 4) -> EditorState:
        return EditorState(Buffer(data), Viewport(octets_per_line, grouping, rows, cols))

    return _make
