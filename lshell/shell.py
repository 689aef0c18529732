"""Read-parse-execute loop of the shell."""

from __future__ import annotations

import re
import subprocess
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from lshell.builtins import find_builtin
from lshell.history import CommandHistory
from lshell.input_buffer import InputBuffer
from lshell.key_events import PROMPT, KeyEventHandler

_DELIMITERS = re.compile(r"[ \t\r\n\a]+")
_SEED_HISTORY = ("man man", "gcc -v")


def read_line(
    history: CommandHistory, read_char: Callable[[], str], out: TextIO
) -> str | None:
    """Read one line, key by key, echoing it and handling editing keys.

    ``read_char`` returns an empty string at end of input.  Returns the line
    typed, or None when input ended before anything was typed.
    """
    buffer = InputBuffer()
    handler = KeyEventHandler(history, buffer, read_char, out)
    while True:
        char = read_char()
        if handler.handle(char):
            continue
        if char in ("\n", ""):
            out.write("\n")
            out.flush()
            if char == "" and buffer.is_empty():
                return None
            return str(buffer)
        buffer.add(char)
        out.write("\r" + PROMPT + buffer.render())
        out.flush()


def parse(line: str) -> list[str]:
    """Split a command line into its words."""
    return [word for word in _DELIMITERS.split(line) if word]


def launch(args: Sequence[str]) -> bool:
    """Run an external program and wait for it; keep the shell running."""
    try:
        subprocess.run(list(args), check=False)
    except OSError as exc:
        print(f"lsh: {exc}", file=sys.stderr)
    return True


def execute(args: Sequence[str]) -> bool:
    """Run a builtin or an external program; return False to stop the shell."""
    if not args:
        return True
    builtin = find_builtin(args[0])
    if builtin is not None:
        return builtin(args)
    return launch(args)


def enable_raw_mode(fd: int) -> list:
    """Turn off line buffering and echo on terminal ``fd``.

    Returns the previous terminal attributes so that they can be restored.
    """
    import termios

    old = termios.tcgetattr(fd)
    new = list(old)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    return old


def _terminal_fd(stream: TextIO) -> int | None:
    try:
        if stream.isatty():
            return stream.fileno()
    except (AttributeError, OSError, ValueError):
        pass
    return None


def loop(stdin: TextIO, stdout: TextIO) -> None:
    """Prompt, read and execute commands until one asks to stop or input ends."""
    history = CommandHistory()
    for command in _SEED_HISTORY:
        history.push(command)

    fd = _terminal_fd(stdin)
    saved = enable_raw_mode(fd) if fd is not None else None
    try:
        status = True
        while status:
            stdout.write(PROMPT)
            stdout.flush()
            line = read_line(history, lambda: stdin.read(1), stdout)
            if line is None:
                break
            history.push(line)
            status = execute(parse(line))
    finally:
        if saved is not None:
            import termios

            termios.tcsetattr(fd, termios.TCSANOW, saved)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive shell."""
    if not sys.stdin.isatty():
        print(
            "Warning: the terminal is not interactive. "
            "Some commands could does not work correctly",
            file=sys.stderr,
        )
    loop(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())