import io

from lshell.history import CommandHistory
from lshell.input_buffer import InputBuffer
from lshell.key_events import (
    DELETE,
    ESC,
    MOVE_LEFT,
    MOVE_RIGHT,
    RESET_LINE,
    KeyEventHandler,
)


def _reader(text):
    chars = iter(text)
    return lambda: next(chars, "")


def _handler(text="", commands=(), typed=""):
    history = CommandHistory()
    for command in commands:
        history.push(command)
    buffer = InputBuffer()
    buffer.load(typed)
    out = io.StringIO()
    return KeyEventHandler(history, buffer, _reader(text), out), buffer, out


def test_up_arrow_loads_newest_command():
    handler, buffer, out = _handler("[A", ["ls", "pwd"])
    assert handler.handle(ESC) is True
    assert str(buffer) == "pwd"
    assert buffer.cursor == len("pwd")
    assert out.getvalue() == RESET_LINE + "> pwd"


def test_up_arrow_stops_at_oldest():
    handler, buffer, _ = _handler("[A[A[A", ["ls", "pwd"])
    for _ in range(3):
        assert handler.handle(ESC) is True
    assert str(buffer) == "ls"
    assert handler.history.cursor == 0


def test_down_arrow_returns_to_fresh_line():
    handler, buffer, _ = _handler("[A[A[B", ["ls", "pwd"])
    handler.handle(ESC)
    handler.handle(ESC)
    handler.handle(ESC)
    assert str(buffer) == "pwd"
    handler.down_arrow()
    assert str(buffer) == ""
    assert buffer.is_empty()


def test_down_arrow_on_fresh_line_keeps_buffer():
    handler, buffer, out = _handler("[B", ["ls"], typed="ec")
    assert handler.handle(ESC) is True
    assert str(buffer) == "ec"
    assert out.getvalue() == ""


def test_left_and_right_arrows_move_cursor():
    handler, buffer, out = _handler("[D[C", typed="ab")
    assert handler.handle(ESC) is True
    assert buffer.cursor == 1
    assert out.getvalue() == MOVE_LEFT
    assert handler.handle(ESC) is True
    assert buffer.cursor == 2
    assert out.getvalue() == MOVE_LEFT + MOVE_RIGHT


def test_right_arrow_at_end_does_not_move():
    handler, buffer, out = _handler("[C", typed="ab")
    assert handler.handle(ESC) is True
    assert buffer.cursor == 2
    assert out.getvalue() == ""


def test_delete_removes_character_and_redraws():
    handler, buffer, out = _handler(typed="abc")
    buffer.shift_left()
    assert handler.handle(DELETE) is True
    assert str(buffer) == "ac"
    assert buffer.cursor == 1
    assert out.getvalue() == RESET_LINE + "> ac" + MOVE_LEFT


def test_delete_on_empty_buffer_is_harmless():
    handler, buffer, out = _handler()
    assert handler.handle(DELETE) is True
    assert buffer.is_empty()
    assert out.getvalue() == RESET_LINE + "> "


def test_unknown_sequences_are_not_handled():
    handler, buffer, _ = _handler("[Zx", typed="ab")
    assert handler.handle(ESC) is False
    assert handler.handle(ESC) is False
    assert str(buffer) == "ab"


def test_plain_character_is_not_handled():
    handler, buffer, out = _handler()
    assert handler.handle("a") is False
    assert buffer.is_empty()
    assert out.getvalue() == ""