"""Split a tokenized line into options and positional arguments."""

import re
from dataclasses import dataclass, field

from .scanner import OPTION_CHAR, split

END_OF_OPTIONS = "--"

# Optional sign and ASCII digits only, no spaces or underscores
INT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class ParsedArgs:
    """Options (leading dashes stripped) and positional arguments of a line."""

    options: dict[str, str] = field(default_factory=dict)
    arguments: list[str] = field(default_factory=list)

    def get_option(self, name: str, default: str = "") -> str:
        """Return the value of an option, or default if it is not set."""
        return self.options.get(name, default)

    def get_int_option(self, name: str, default: int = 0) -> int:
        """Return the value of an option as an int, or default if it is not set or not a number."""
        if name not in self.options:
            return default

        value = self.options[name]
        if not INT_PATTERN.fullmatch(value):
            return default
        return int(value)


def split_args(tokens: list[str]) -> ParsedArgs:
    """
    Partition tokens into options and positional arguments.

    Options are the leading tokens that start with "-". A "--" token ends the
    options and is dropped. "-name=value" and "--name=value" map name to
    value, "-name" maps name to "". Everything after the options is a
    positional argument, even if it looks like an option.

    Args:
        tokens: Tokens as returned by the scanner

    Returns:
        ParsedArgs with the options and the positional arguments
    """
    parsed = ParsedArgs()
    i = 0

    while i < len(tokens):
        arg = tokens[i]
        if not arg.startswith(OPTION_CHAR):
            break

        i += 1
        if arg == END_OF_OPTIONS:
            break

        key, _, value = arg.lstrip(OPTION_CHAR).partition("=")
        parsed.options[key] = value

    parsed.arguments = tokens[i:]
    return parsed


def parse_args(line: str) -> ParsedArgs:
    """Tokenize a line and split it into options and positional arguments."""
    return split_args(split(line))
