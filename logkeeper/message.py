"""The log record and its one-line text form."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .levels import Level, level_name


def format_time(moment: datetime) -> str:
    """Render a moment in local time the way ``ctime`` does, without a newline."""
    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    return moment.ctime()


@dataclass
class LogMessage:
    """A single log record."""

    level: Level
    message: str
    time: datetime = field(default_factory=datetime.now)
    file_path: str = ""
    line_no: int = 0

    def format(self) -> str:
        """Return the record as ``[LEVEL] - time - path:line - message``."""
        return (
            f"[{level_name(self.level)}] - {format_time(self.time)} - "
            f"{self.file_path}:{self.line_no} - {self.message}"
        )