"""The central log manager and reading back of written log files."""

from __future__ import annotations

import inspect
import os
import re
from collections import Counter
from datetime import datetime
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator

from .levels import Level, level_name, parse_level
from .message import LogMessage, format_time
from .sinks import Sink

_LINE_PATTERN = re.compile(r"\[(\w+)\]\s*-\s*([^\-]+?)\s*-\s*(.*?):(\d+)\s*-\s*(.*)")
_TIME_FORMAT = "%a %b %d %H:%M:%S %Y"
_DATE_FORMAT = "%Y-%m-%d"
_HEADERS = ("Level", "Time", "Path", "Message")


def parse_line(line: str) -> LogMessage | None:
    """Read back one line written by a sink.

    Returns None if the line is not in the log format; raises ValueError if
    the line names an unknown level.
    """
    match = _LINE_PATTERN.fullmatch(line)
    if match is None:
        return None
    level_text, time_text, path, line_no, text = match.groups()
    level = parse_level(level_text)
    try:
        moment = datetime.strptime(time_text, _TIME_FORMAT)
    except ValueError:
        return None
    return LogMessage(level, text, moment, path, int(line_no))


def _parse_date(date: str) -> datetime:
    try:
        return datetime.strptime(date, _DATE_FORMAT)
    except ValueError:
        raise ValueError(f"Failed to convert date: {date}") from None


def _read_lines(files: Iterable[Path]) -> Iterator[str]:
    for path in files:
        with path.open(encoding="utf-8", errors="replace") as stream:
            for line in stream:
                yield line.rstrip("\n")


def format_logs(logs: list[LogMessage]) -> str:
    """Render records as a text table followed by a count per level."""
    if not logs:
        return "NO logs to print.\n"

    rows = [
        (
            level_name(log.level),
            format_time(log.time),
            f"{log.file_path}:{log.line_no}",
            log.message,
        )
        for log in logs
    ]
    widths = [max(len(cell) for cell in column) for column in zip(_HEADERS, *rows)]
    separator = "+" + "".join("-" * (width + 2) + "+" for width in widths)

    def render(cells: Iterable[str]) -> str:
        return "| " + " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)) + " |"

    lines = [separator, render(_HEADERS), separator]
    lines.extend(render(row) for row in rows)
    lines.extend([separator, "", "Total:"])
    counts = Counter(log.level for log in logs)
    lines.extend(f"{level_name(level)}:{count}" for level, count in sorted(counts.items()))
    return "\n".join(lines) + "\n"


class LogManager:
    """Dispatches records at or above the global level to every sink."""

    def __init__(self) -> None:
        self.sinks: list[Sink] = []
        self.global_level = Level.INFO

    def add_sink(self, sink: Sink) -> None:
        """Register a sink to receive records."""
        self.sinks.append(sink)

    def set_global_level(self, level: Level) -> None:
        """Set the least severe level that is still dispatched."""
        self.global_level = Level(level)

    def log(self, level: Level, message: LogMessage) -> None:
        """Hand ``message`` to every sink unless ``level`` is below the global level."""
        if level < self.global_level:
            return
        for sink in self.sinks:
            sink.log(message)

    def get_history(
        self,
        filter_level: Level = Level.DEBUG,
        limit: int = 10,
        reverse: bool = True,
        date: str = "",
        directory: str | os.PathLike[str] = "logs",
    ) -> list[LogMessage]:
        """Read records back from the ``.log`` files in ``directory``.

        Files are taken in name order, or reverse name order when ``reverse``
        is set. At most ``limit`` lines are read in all; of those, the records
        at or above ``filter_level`` and, if ``date`` (YYYY-MM-DD) is given,
        not earlier than that day are returned.
        """
        since = _parse_date(date) if date else None
        files = sorted(
            path for path in Path(directory).iterdir() if path.suffix == ".log" and path.is_file()
        )
        if reverse:
            files.reverse()

        history = []
        for line in islice(_read_lines(files), max(limit, 0)):
            entry = parse_line(line)
            if entry is None or entry.level < filter_level:
                continue
            if since is not None and entry.time < since:
                continue
            history.append(entry)
        return history

    def print_logs(self, logs: list[LogMessage]) -> None:
        """Print records as a table to standard output."""
        print(format_logs(logs), end="")


_instance = LogManager()


def get_manager() -> LogManager:
    """Return the process-wide log manager."""
    return _instance


def _emit(level: Level, message: str) -> None:
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
    path = caller.f_code.co_filename if caller is not None else ""
    line_no = caller.f_lineno if caller is not None else 0
    del frame, caller
    record = LogMessage(level, message, datetime.now(), path, line_no)
    get_manager().log(level, record)


def debug(message: str) -> None:
    """Log ``message`` at DEBUG level with the caller's file and line."""
    _emit(Level.DEBUG, message)


def info(message: str) -> None:
    """Log ``message`` at INFO level with the caller's file and line."""
    _emit(Level.INFO, message)


def warning(message: str) -> None:
    """Log ``message`` at WARNING level with the caller's file and line."""
    _emit(Level.WARNING, message)


def error(message: str) -> None:
    """Log ``message`` at ERROR level with the caller's file and line."""
    _emit(Level.ERROR, message)


def fatal(message: str) -> None:
    """Log ``message`` at FATAL level with the caller's file and line."""
    _emit(Level.FATAL, message)