"""Severity levels for log messages."""

from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """Log severity, ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4


def level_name(level: Level) -> str:
    """Return the canonical upper-case name of a level."""
    try:
        return Level(level).name
    except ValueError:
        return "UNKNOWN"


def parse_level(name: str) -> Level:
    """Return the level whose canonical name is exactly ``name``."""
    try:
        return Level[name]
    except KeyError:
        raise ValueError("Unknown level") from None