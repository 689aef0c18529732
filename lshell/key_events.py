"""Handling of editing keys and arrow-key escape sequences."""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

from lshell.history import CommandHistory
from lshell.input_buffer import InputBuffer

RESET_LINE = "\033[2K\033[G"
MOVE_RIGHT = "\033[C"
MOVE_LEFT = "\033[D"
PROMPT = "> "

ESC = "\x1b"
OPEN_BRACKET = "["
UP_ARROW = "A"
DOWN_ARROW = "B"
RIGHT_ARROW = "C"
LEFT_ARROW = "D"
DELETE = "\x7f"


class KeyEventHandler:
    """Applies special keys to an input buffer and echoes the result.

    ``read_char`` returns the next character typed, so that the rest of an
    escape sequence can be consumed; ``out`` receives the terminal output.
    """

    def __init__(
        self,
        history: CommandHistory,
        buffer: InputBuffer,
        read_char: Callable[[], str],
        out: TextIO,
    ) -> None:
        self.history = history
        self.buffer = buffer
        self.read_char = read_char
        self.out = out

    def handle(self, char: str) -> bool:
        """Act on ``char`` if it starts a key event; return whether it did."""
        if char == ESC:
            return self._escape_sequence()
        if char == DELETE:
            try:
                self.buffer.remove()
            except IndexError:
                pass
            self._redraw()
            return True
        return False

    def _escape_sequence(self) -> bool:
        if self.read_char() != OPEN_BRACKET:
            return False
        actions = {
            UP_ARROW: self.up_arrow,
            DOWN_ARROW: self.down_arrow,
            RIGHT_ARROW: self.right_arrow,
            LEFT_ARROW: self.left_arrow,
        }
        action = actions.get(self.read_char())
        if action is None:
            return False
        action()
        return True

    def _redraw(self) -> None:
        self.out.write(RESET_LINE + PROMPT + self.buffer.render())
        self.out.flush()

    def up_arrow(self) -> None:
        """Show the previous command of the history, if there is one."""
        command = self.history.previous()
        if command is not None:
            self.buffer.load(command)
            self._redraw()

    def down_arrow(self) -> None:
        """Show the next command of the history, or the fresh line after it."""
        command = self.history.next()
        if command is not None:
            self.buffer.load(command)
            self._redraw()

    def left_arrow(self) -> None:
        """Move the cursor one place left."""
        if self.buffer.shift_left():
            self.out.write(MOVE_LEFT)
            self.out.flush()

    def right_arrow(self) -> None:
        """Move the cursor one place right."""
        if self.buffer.shift_right():
            self.out.write(MOVE_RIGHT)
            self.out.flush()