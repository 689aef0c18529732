"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence

Builtin = Callable[[Sequence[str]], bool]


def cd(args: Sequence[str]) -> bool:
    """Change the working directory to ``args[1]``; keep the shell running."""
    if len(args) < 2:
        print('lsh : expected argument to "cd"', file=sys.stderr)
        return True
    try:
        os.chdir(args[1])
    except OSError as exc:
        print(f"lsh: {exc}", file=sys.stderr)
    return True


def help(args: Sequence[str]) -> bool:  # noqa: A001 - the shell command is named help
    """Print a short usage text listing the builtins; keep the shell running."""
    print("Yohann Marguier's LSH")
    print("Type program names and arguments, and hit enter.")
    print("The following are built in:")
    for name in BUILTINS:
        print(f"  {name}")
    print("Use the man builtins for information on other programs.")
    return True


def exit_shell(args: Sequence[str]) -> bool:
    """Flush pending output and ask the shell to stop."""
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            pass
    return False


BUILTINS: dict[str, Builtin] = {
    "cd": cd,
    "help": help,
    "exit": exit_shell,
}


def find_builtin(name: str) -> Builtin | None:
    """Return the builtin called ``name``, or None if there is none."""
    return BUILTINS.get(name)