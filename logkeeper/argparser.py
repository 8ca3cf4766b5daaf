"""A small command-line option parser with short, long and positional arguments."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence


@dataclass
class Option:
    """A named option such as ``-n`` / ``--number``."""

    short_name: str
    long_name: str
    description: str
    required: bool = False
    default_value: str = ""
    provided: bool = False
    value: str = ""

    @property
    def label(self) -> str:
        """The option as shown in usage text, e.g. ``-n, --number``."""
        text = ""
        if self.short_name:
            text += "-" + self.short_name
            if self.long_name:
                text += ", "
        if self.long_name:
            text += "--" + self.long_name
        return text


@dataclass
class PositionalArgument:
    """An argument identified by its position rather than a name."""

    name: str
    description: str
    required: bool = False
    value: str = ""


class ArgParser:
    """Parses command-line arguments against declared options.

    A ``-h`` / ``--help`` option is always present; giving it prints the usage
    text and exits with status 0.
    """

    def __init__(self, program_name: str, description: str = "") -> None:
        self.program_name = program_name
        self.description = description
        self.options: list[Option] = []
        self.positional_args: list[PositionalArgument] = []
        self._by_short: dict[str, Option] = {}
        self._by_long: dict[str, Option] = {}
        self.add_option("h", "help", "Show help.", False)

    def add_option(
        self,
        short_name: str,
        long_name: str,
        description: str,
        required: bool = False,
        default_value: str = "",
    ) -> None:
        """Declare an option; either name may be empty."""
        if short_name and short_name in self._by_short:
            raise ValueError(f"short option '{short_name}' already exists")
        if long_name and long_name in self._by_long:
            raise ValueError(f"long option '{long_name}' already exists")
        option = Option(
            short_name, long_name, description, required, default_value, False, default_value
        )
        self.options.append(option)
        if short_name:
            self._by_short[short_name] = option
        if long_name:
            self._by_long[long_name] = option

    def add_positional_argument(self, name: str, description: str, required: bool = False) -> None:
        """Declare the next positional argument."""
        self.positional_args.append(PositionalArgument(name, description, required))

    def _help(self) -> None:
        self.print_usage()
        raise SystemExit(0)

    def parse(self, argv: Sequence[str]) -> None:
        """Parse ``argv`` (the arguments without the program name).

        Raises ValueError for unknown options, surplus positional arguments and
        missing required options or arguments.
        """
        for option in self.options:
            option.provided = False

        args = iter(list(argv))
        pending: list[str] = []

        def next_value() -> str | None:
            # Peek at the next argument and consume it if it is not an option.
            if not pending:
                try:
                    pending.append(next(args))
                except StopIteration:
                    return None
            if pending[0].startswith("-"):
                return None
            return pending.pop()

        positions = iter(self.positional_args)
        while True:
            if pending:
                arg = pending.pop()
            else:
                try:
                    arg = next(args)
                except StopIteration:
                    break

            if len(arg) >= 2 and arg.startswith("--"):
                long_name, sep, value = arg[2:].partition("=")
                option = self._by_long.get(long_name)
                if option is None:
                    raise ValueError(f"unknown option: --{long_name}")
                option.provided = True
                if not value:
                    value = next_value() or ""
                if value:
                    option.value = value
                if long_name == "help":
                    self._help()
            elif len(arg) >= 2 and arg.startswith("-"):
                names = arg[1:]
                for position, name in enumerate(names):
                    option = self._by_short.get(name)
                    if option is None:
                        raise ValueError(f"unknown option: -{name}")
                    option.provided = True
                    if position < len(names) - 1:
                        continue
                    value = next_value()
                    if value is not None:
                        option.value = value
                    if name == "h":
                        self._help()
            else:
                positional = next(positions, None)
                if positional is None:
                    raise ValueError("Too many positional arguments")
                positional.value = arg

        for option in self.options:
            if option.required and not option.provided:
                raise ValueError(f"Missing required option: --{option.long_name}")
        for positional in self.positional_args:
            if positional.required and not positional.value:
                raise ValueError(f"Missing required args: {positional.name}")

    def _find(self, name: str) -> Option | None:
        return self._by_short.get(name) or self._by_long.get(name)

    def get_option_value(self, name: str) -> str:
        """Return the value of an option looked up by short, then long name."""
        option = self._find(name)
        if option is None:
            raise ValueError(f"unknown option: {name}")
        return option.value

    def has_option(self, name: str) -> bool:
        """Whether the option was given on the last parse; False if unknown."""
        option = self._find(name)
        return option is not None and option.provided

    def get_positional_argument(self, index: int) -> str:
        """Return the value of the positional argument at ``index``."""
        if not 0 <= index < len(self.positional_args):
            raise IndexError("Index out of range")
        return self.positional_args[index].value

    def positional_count(self) -> int:
        """Number of declared positional arguments."""
        return len(self.positional_args)

    def format_usage(self) -> str:
        """Return the usage and help text."""
        parts = [f"Usage: {self.program_name} [option]"]
        for arg in self.positional_args:
            if arg.required:
                parts.append(f" [{arg.name}")
            else:
                parts.append(f" [[{arg.name}]]")
        parts.append("\n\n")
        if self.description:
            parts.append(f"{self.description}\n\n")
        parts.append("Options:\n")

        width = max(len(option.label) for option in self.options)
        for option in self.options:
            line = "  "
            if option.short_name:
                line += "-" + option.short_name
                if option.long_name:
                    line += ", "
            else:
                line += "   "
            if option.long_name:
                line += "--" + option.long_name
            line += " " * (width - len(option.label) + 2)
            line += option.description
            if option.default_value:
                line += f" [Default: {option.default_value}]"
            if option.required:
                line += " [Required]"
            parts.append(line + "\n")
        parts.append("\n")

        if self.positional_args:
            parts.append("Positional arguments:\n")
            width = max(len(arg.name) for arg in self.positional_args)
            for arg in self.positional_args:
                line = "  " + arg.name.ljust(width + 2) + arg.description
                if arg.required:
                    line += " [Required]"
                parts.append(line + "\n")
            parts.append("\n")
        return "".join(parts)

    def print_usage(self) -> None:
        """Write the usage and help text to standard output and flush it."""
        text = self.format_usage()
        stream = sys.stdout
        stream.write(text)
        stream.flush()