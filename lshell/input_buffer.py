"""Editable line buffer with an insertion cursor."""

from __future__ import annotations

MOVE_LEFT = "\033[D"


class InputBuffer:
    """Characters typed on the current line, plus the position of the cursor.

    Characters are inserted at the cursor.  Removal deletes the character
    just before the cursor, as a backspace key does.
    """

    def __init__(self) -> None:
        self._chars: list[str] = []
        self.cursor = 0

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"InputBuffer({str(self)!r}, cursor={self.cursor})"

    def load(self, data: str) -> None:
        """Replace the contents with ``data`` and put the cursor at its end."""
        self._chars = list(data)
        self.cursor = len(self._chars)

    def is_empty(self) -> bool:
        """Return True when the buffer holds no characters."""
        return not self._chars

    def add(self, char: str) -> None:
        """Insert a single character at the cursor and move the cursor past it."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self._chars.insert(self.cursor, char)
        self.cursor += 1

    def remove(self) -> None:
        """Delete the character before the cursor.

        Raises IndexError when there is nothing before the cursor.
        """
        if self.cursor == 0:
            raise IndexError("nothing to remove before the cursor")
        self.cursor -= 1
        del self._chars[self.cursor]

    def clear(self) -> None:
        """Empty the buffer and reset the cursor."""
        self._chars.clear()
        self.cursor = 0

    def render(self) -> str:
        """Return the text followed by the escapes that put the terminal cursor in place."""
        return str(self) + MOVE_LEFT * (len(self._chars) - self.cursor)

    def shift_right(self) -> bool:
        """Move the cursor one place right; return whether it moved."""
        if self.cursor < len(self._chars):
            self.cursor += 1
            return True
        return False

    def shift_left(self) -> bool:
        """Move the cursor one place left; return whether it moved."""
        if self.cursor > 0:
            self.cursor -= 1
            return True
        return False