# logkeeper

A small leveled logger. Records go to any number of sinks: the console, or
log files that roll over to a new numbered file once they grow past a size
limit. A companion command reads those files back, filters them by level and
date, and prints them as a table.

## Install

```
pip install .
```

## Logging from code

```python
from logkeeper.levels import Level
from logkeeper.manager import get_manager, info, warning
from logkeeper.sinks import ConsoleSink, FileSink

manager = get_manager()
manager.set_global_level(Level.DEBUG)
manager.add_sink(ConsoleSink())

file_sink = FileSink("app")          # writes logs/app_0.log, app_1.log, ...
manager.add_sink(file_sink)

info("service started")
warning("disk almost full")

file_sink.close()
```

`get_manager()` returns the one process-wide `LogManager`. The functions
`debug`, `info`, `warning`, `error` and `fatal` in `logkeeper.manager` build a
`LogMessage` holding the current local time and the caller's file name and
line number, and hand it to that manager. `LogManager.log(level, message)`
passes a record to every registered sink unless `level` is below the global
level (`INFO` by default).

Each record is written as one line:

```
[LEVEL] - <ctime-style local time> - <file>:<line> - <message>
```

`LogMessage.format()` returns that line, and `format_time()` in
`logkeeper.message` renders a `datetime` in the same ctime style.

### Levels

`logkeeper.levels.Level` is an ordered enum: `DEBUG`, `INFO`, `WARNING`,
`ERROR`, `FATAL`. `level_name(level)` gives the upper-case name (`"UNKNOWN"`
for a value outside the enum) and `parse_level(name)` turns an exact
upper-case name back into a `Level`, raising `ValueError` otherwise.

### Sinks

- `ConsoleSink(stream=None)` prints each line to `stream`, or to standard
  output when none is given.
- `FileSink(filename, directory="logs", max_size=10 MiB)` appends to
  `<directory>/<filename>_<n>.log`, creating the directory if needed. Before
  each write it checks the current file; once that file is larger than
  `max_size` bytes it moves on to the next number. Every line is flushed at
  once. The `path` property gives the file currently written to; call
  `close()` when done, or use the sink as a context manager.

Any other destination can be added by subclassing `Sink` and implementing
`log(message)`.

## Reading logs back

```
logkeeper-analyse --reverse true --level WARNING --number 50 --date 2025-06-12
```

Options:

- `-r`, `--reverse` — required; `true` takes the `.log` files in reverse name
  order, anything else in name order (default `false`)
- `-n`, `--number` — how many lines to read in total, across all files
  (default 30); lines that are filtered out or not in the log format still
  count
- `-l`, `--level` — lowest level to show (default `INFO`)
- `-d`, `--date` — only entries at or after the start of this day
  (`YYYY-MM-DD`)
- `-h`, `--help` — print the usage text and exit

Files are read from `logs` in the current directory. The output is a table of
level, time, path and message, followed by a count of entries per level, or
`NO logs to print.` when nothing matched. A bad option, a missing `--reverse`,
an unknown level or a non-numeric count prints `parse error: ...` and the
usage text and exits with status 1; an invalid date or a missing `logs`
directory prints the error and exits with status 1.

From Python, `LogManager.get_history(filter_level, limit, reverse, date,
directory)` returns the parsed `LogMessage` entries, `parse_line(line)` reads
a single line back (returning `None` for lines not in the log format), and
`format_logs(logs)` renders entries as the same table that
`LogManager.print_logs(logs)` prints.

## Command-line parsing

`logkeeper.argparser.ArgParser` is the small option parser the analyser is
built on. It takes short options (`-n 5`, grouped flags like `-ab`), long
options (`--number 5` or `--number=5`) and positional arguments declared with
`add_positional_argument`. `parse(argv)` raises `ValueError` for unknown
options, surplus positional arguments and missing required ones; values are
read with `get_option_value(name)`, `has_option(name)` and
`get_positional_argument(index)`, and `format_usage()` / `print_usage()`
produce the help text.

## Demo

```
logkeeper-demo
```

sets the global level to `DEBUG` and writes a handful of sample records, then
99 numbered ones at random `DEBUG` or `INFO` level, to standard output and to
`logs/log_<n>.log` (rolling over past 1 MiB).

## Limits

Records are only written to the console or to plain files; there is no
network sink, no background writer, and no hook into Python's standard
`logging` module. Reading back works only on files in the line format shown
above, and the date filter compares against naive local times.