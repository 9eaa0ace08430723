"""
Utility package for hex editor support functions.
"""

from .hex_utils import (
    is_hex_char,
    hex_digit_value,
    combine_nibbles,
    format_offset,
    to_printable,
    describe_key
)

__all__ = [
    'is_hex_char',
    'hex_digit_value',
    'combine_nibbles',
    'format_offset',
    'to_printable',
    'describe_key'
]
