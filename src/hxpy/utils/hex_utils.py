"""
Utility functions for hex formatting and parsing.
"""

from typing import Optional


def is_hex_char(ch: int) -> bool:
    """Check if a key code is a valid hex digit."""

    return (0x30 <= ch <= 0x39) or (0x41 <= ch <= 0x46) or (0x61 <= ch <= 0x66)


def hex_digit_value(ch: int) -> Optional[int]:
    """
    Get the numeric value of a hex digit key code.

    Args:
        ch (int): Key code of the digit

    Returns:
        int: Value between 0 and 15, or None if the key is not a hex digit
    """

    if not is_hex_char(ch):
        return None

    return int(chr(ch), 16)


def combine_nibbles(high: int, low: int) -> int:
    """
    Combine two hex digit values into one byte value.

    Args:
        high (int): Value of the first digit (high nibble)
        low (int): Value of the second digit (low nibble)

    Returns:
        int: Byte value between 0 and 255
    """

    return ((high & 0x0F) << 4) | (low & 0x0F)


def format_offset(offset: int, width: int = 9) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted lowercase hex string
    """

    return f"{offset:0{width}x}"


def to_printable(value: int) -> str:
    """Get the character shown in the ASCII column for a byte."""

    return chr(value) if 32 <= value <= 126 else '.'


def describe_key(key: int) -> str:
    """Human readable representation of a key code for status messages."""

    if 32 <= key <= 126:
        return chr(key)

    return f"0x{key:02x}" if key < 256 else f"<{key}>"
