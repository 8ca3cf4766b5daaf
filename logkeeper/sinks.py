"""Destinations that log records are written to."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

from .message import LogMessage

DEFAULT_MAX_SIZE = 1024 * 1024 * 10


class Sink(ABC):
    """A destination for log records."""

    @abstractmethod
    def log(self, message: LogMessage) -> None:
        """Write one record."""


class ConsoleSink(Sink):
    """Writes each record as one line to a text stream (standard output by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def log(self, message: LogMessage) -> None:
        print(message.format(), file=self.stream or sys.stdout)


class FileSink(Sink):
    """Appends records to ``<directory>/<filename>_<n>.log``, moving on to the
    next number once the current file has grown past ``max_size`` bytes."""

    def __init__(
        self,
        filename: str,
        directory: str | os.PathLike[str] = "logs",
        max_size: int = DEFAULT_MAX_SIZE,
    ) -> None:
        self.filename = filename
        self.directory = Path(directory)
        self.max_size = max_size
        self.suffix = 0
        self._stream = self._open()

    @property
    def path(self) -> Path:
        """Path of the file currently written to."""
        return self.directory / f"{self.filename}_{self.suffix}.log"

    def _open(self) -> TextIO:
        self.directory.mkdir(parents=True, exist_ok=True)
        return open(self.path, "a", encoding="utf-8")

    def log(self, message: LogMessage) -> None:
        if os.fstat(self._stream.fileno()).st_size > self.max_size:
            self.suffix += 1
            self._stream.close()
            self._stream = self._open()
        self._stream.write(message.format() + "\n")
        self._stream.flush()

    def close(self) -> None:
        """Close the current file."""
        self._stream.close()

    def __enter__(self) -> FileSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()