# lshell

`lshell` is a small interactive shell for POSIX terminals. It reads a line,
splits it into words, and runs it. A word that names a built-in command runs
inside the shell. Any other word starts an external program.

## Features

- **Line editing.** Characters are inserted at the cursor. Backspace (DEL,
  `\x7f`) deletes the character before the cursor. The left and right arrow
  keys move the cursor.
- **Command history.** The up arrow steps back to older commands. The down
  arrow steps forward to newer ones, and past the newest it returns to an
  empty line. Empty lines are not recorded. Each session's history starts
  with two entries: `man man` and `gcc -v`.
- **Built-in commands:**
  - `cd <dir>` changes the working directory. With no argument it prints an
    error.
  - `help` lists the built-in commands.
  - `exit` leaves the shell.
- **External programs.** Any other command is looked up on `PATH` and run.
  The shell waits for it to finish. If the program cannot be started, an
  `lsh: ...` error goes to standard error.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
lshell
```

A `> ` prompt appears. Type a command and press Enter:

```
> ls -l
> cd /tmp
> help
> exit
```

The shell stops when you run `exit`. It also stops when input ends on an
empty line, for example on Ctrl-D.

When standard input is a terminal, the shell turns off line buffering and echo
while it runs, so each key is handled as soon as you press it. The previous
terminal settings are restored when the shell stops.

When standard input is not a terminal, the shell prints a warning and reads
input character by character.

## Using the pieces from Python

- `lshell.input_buffer.InputBuffer` is the editable line with a cursor. It
  has:
  - `add`, `remove`, `clear` and `load`
  - `shift_left` and `shift_right`
  - `is_empty`
  - `render`, which returns the text plus the escapes that move the terminal
    cursor into place
- `lshell.history.CommandHistory` holds past commands. It has:
  - `push`, `previous`, `next`, `reset_cursor`, `copy` and `is_empty`
  - indexing and `len()`

Example:

```python
from lshell.input_buffer import InputBuffer
from lshell.history import CommandHistory

buf = InputBuffer()
for ch in "helo":
    buf.add(ch)
buf.shift_left()
buf.add("l")
print(str(buf))            # hello

history = CommandHistory()
history.push("ls")
history.push("pwd")
print(history.previous())  # pwd
print(history.previous())  # ls
```

Other functions:

- `lshell.key_events.KeyEventHandler` applies the arrow keys and Backspace to
  a buffer and a history, and writes the terminal output.
- `lshell.shell.read_line` reads one edited line from any character source.
- `lshell.shell.parse` splits a line into words.
- `lshell.shell.execute` runs a parsed command. It returns `False` when the
  shell should stop.
- `lshell.shell.launch` runs an external program.
- `lshell.builtins.find_builtin` looks up a built-in command by name.

## What it does not do

Lines are split only on whitespace. The shell has no:

- quoting or escaping
- pipes or redirection
- variables or globbing
- job control
- scripts

History is kept only for the running session and is not saved to disk.

## Running the tests

```
pip install ".[test]"
pytest
```