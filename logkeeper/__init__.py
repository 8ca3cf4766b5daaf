"""Leveled logging with console and size-rotated file sinks, and a command that reads log files back as a table."""

__version__ = "0.1.0"
__all__ = ["levels", "message", "sinks", "argparser", "manager", "analyser", "demo"]