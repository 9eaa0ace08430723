"""
Core package for the hex editor engine.

This package implements the editing engine: the Buffer class holding the
file's bytes, the coordinate mapping between byte offsets and screen
positions, and the EditorState tying buffer, viewport, cursor, mode and
status together.
"""

from .buffer import Buffer
from .editor import Direction, EditorState, Mode, Severity, Status
from .viewport import Cursor, Viewport, clamp_scroll, offset_at, position_at

__all__ = [
    'Buffer',
    'Cursor',
    'Direction',
    'EditorState',
    'Mode',
    'Severity',
    'Status',
    'Viewport',
    'clamp_scroll',
    'offset_at',
    'position_at',
]
