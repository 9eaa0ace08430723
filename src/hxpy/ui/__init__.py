"""
UI package for the hex editor interface components.

This package implements the terminal facing parts of the editor: the
KeyDecoder turning raw input bytes into keys, the InputHandler mode state
machine, the Renderer composing screen frames and the Terminal wrapper
around the tty.
"""

from .input_handler import Action, InputHandler
from .keyboard import Key, KeyDecoder
from .terminal import Terminal
from .window import Renderer

__all__ = ['Action', 'InputHandler', 'Key', 'KeyDecoder', 'Renderer', 'Terminal']
