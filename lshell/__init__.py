"""An interactive line shell with line editing, session history and built-in commands."""

__version__ = "0.1.0"
__all__ = ["builtins", "history", "input_buffer", "key_events", "shell"]