"""History of the command lines entered in the shell."""

from __future__ import annotations

from collections.abc import Iterator


class CommandHistory:
    """Ordered list of past commands with a browsing cursor.

    The cursor ranges from 0 to ``len(self)``; the position ``len(self)``
    stands for the fresh line after the newest command.
    """

    def __init__(self) -> None:
        self._commands: list[str] = []
        self.cursor = 0

    def __len__(self) -> int:
        return len(self._commands)

    def __getitem__(self, index: int) -> str:
        return self._commands[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __repr__(self) -> str:
        return f"CommandHistory({self._commands!r}, cursor={self.cursor})"

    def is_empty(self) -> bool:
        """Return True when no command has been recorded."""
        return not self._commands

    def push(self, command: str | None) -> None:
        """Record a command and move the cursor to the fresh line.

        Empty commands are not recorded.
        """
        if command:
            self._commands.append(command)
        self.reset_cursor()

    def previous(self) -> str | None:
        """Step back to the older command and return it, or None at the oldest."""
        if self.cursor == 0:
            return None
        self.cursor -= 1
        return self._commands[self.cursor]

    def next(self) -> str | None:
        """Step forward to the newer command and return it.

        Returns an empty string on stepping onto the fresh line, and None
        when already there.
        """
        if self.cursor >= len(self._commands):
            return None
        self.cursor += 1
        if self.cursor == len(self._commands):
            return ""
        return self._commands[self.cursor]

    def reset_cursor(self) -> None:
        """Put the cursor back on the fresh line."""
        self.cursor = len(self._commands)

    def copy(self) -> CommandHistory:
        """Return an independent copy with the same commands and cursor."""
        duplicate = CommandHistory()
        duplicate._commands = list(self._commands)
        duplicate.cursor = self.cursor
        return duplicate