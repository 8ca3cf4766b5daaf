"""Small program that writes sample records to the console and to a file."""

from __future__ import annotations

import random
import sys
from typing import Sequence

from .levels import Level
from .manager import debug, error, fatal, get_manager, info, warning
from .sinks import ConsoleSink, FileSink


def main(argv: Sequence[str] | None = None) -> int:
    """Write sample records to standard output and ``logs/log_<n>.log``."""
    manager = get_manager()
    old_level = manager.global_level
    console = ConsoleSink()
    file_sink = FileSink("log", max_size=1024 * 1024)
    manager.set_global_level(Level.DEBUG)
    manager.add_sink(console)
    manager.add_sink(file_sink)
    try:
        a = 10
        info(str(a + 5))
        warning("This is a warning message")
        error("This is an error message")
        fatal("OMG, something went wrong!")
        info("just a log info")
        for i in range(1, 100):
            if random.randrange(2) == 0:
                debug(str(i))
            else:
                info(str(i))
    finally:
        manager.sinks.remove(console)
        manager.sinks.remove(file_sink)
        manager.set_global_level(old_level)
        file_sink.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())