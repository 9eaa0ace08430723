"""
Application module running the editor control loop.
"""

import logging
from typing import Optional

from .config import EditorConfig
from .core.buffer import Buffer
from .core.editor import EditorState, Severity
from .core.viewport import Viewport
from .ui.input_handler import Action, InputHandler
from .ui.keyboard import KeyDecoder
from .ui.terminal import Terminal
from .ui.window import Renderer

logger = logging.getLogger(__name__)


class Editor:
    """The editor instance: decodes keys, dispatches them and redraws the screen."""

    def __init__(self, terminal: Terminal, buf: Buffer, config: Optional[EditorConfig] = None) -> None:
        config = config or EditorConfig()
        rows, cols = terminal.get_size()

        self.terminal = terminal
        self.state = EditorState(
            buf,
            Viewport(config.octets_per_line, config.grouping, rows, cols),
        )
        self.decoder = KeyDecoder(terminal)
        self.input_handler = InputHandler(self.state)
        self.renderer = Renderer()

        self._announce_file()

    def _announce_file(self) -> None:
        buf = self.state.buffer
        if not buf.filename:
            return

        message = f"\"{buf.filename}\" ({buf.content_length} bytes)"
        if buf.readonly:
            self.state.set_status(Severity.WARNING, message + " [readonly]")
            return

        self.state.set_status(Severity.INFO, message)

    def refresh(self) -> None:
        """Draw the current state to the terminal."""

        self.terminal.write(self.renderer.render(self.state))

    def on_resize(self) -> None:
        """Pick up new terminal dimensions and redraw everything."""

        rows, cols = self.terminal.get_size()
        self.state.resize(rows, cols)
        logger.debug("Resized to %dx%d", cols, rows)

        self.terminal.clear_screen()
        self.refresh()

    def save(self) -> None:
        buf = self.state.buffer

        try:
            buf.save_file()
        except IOError as e:
            self.state.set_status(Severity.ERROR, str(e))
            return

        self.state.set_status(Severity.INFO, f"\"{buf.filename}\", {buf.content_length} bytes written")

    def process_keypress(self) -> bool:
        """
        Read and handle one key.

        Returns:
            bool: False if the editor should quit
        """

        key = self.decoder.read_key()
        if key is None:
            return True

        action = self.input_handler.handle_key(key)
        if action is Action.QUIT:
            return False

        if action is Action.SAVE:
            self.save()

        self.refresh()
        return True

    def run(self) -> None:
        """Run the control loop until the user quits."""

        self.refresh()

        while True:
            if self.terminal.consume_resize():
                self.on_resize()

            if not self.process_keypress():
                break
