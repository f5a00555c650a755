"""Bind a command line string to a set of typed flags with argparse."""

import argparse
from typing import Any

import toml

from .scanner import OPTION_CHAR, split

POSITIONAL_DEST = "_positional"

FLAG_DEFAULTS: dict[str, Any] = {
    "bool": False,
    "int": 0,
    "string": "",
}


# Custom exceptions
class LineArgsException(Exception):
    """Base exception for lineargs errors."""

    pass


class FlagConfigError(LineArgsException):
    """Raised when a flag definition file is invalid."""

    pass


class Flags(argparse.ArgumentParser):
    """
    A set of named bool, int and string flags.

    Each flag "name" is accepted as -name and --name, with its value either
    in the same token (-name=value) or in the next one (-name value). Bool
    flags take no value. Flags may appear between positional arguments;
    after "--" every token is positional. Errors are raised as
    argparse.ArgumentError with argparse's own message instead of exiting
    the process.
    """

    def __init__(self, name: str):
        super().__init__(
            prog=name, add_help=False, allow_abbrev=False, exit_on_error=False
        )
        self.name = name
        self._defined: dict[str, tuple[str, Any, str]] = {}
        self._args: list[str] = []
        self.add_argument(POSITIONAL_DEST, nargs="*", metavar="args")

    def __contains__(self, name: str) -> bool:
        return name in self._defined

    def define_bool(self, name: str, default: bool = False, help: str = "") -> None:
        """Define a flag that is True when present."""
        self._define(name, "bool", default, help, action="store_true")

    def define_int(self, name: str, default: int = 0, help: str = "") -> None:
        """Define a flag with an integer value."""
        self._define(name, "int", default, help, type=int, metavar="int")

    def define_string(self, name: str, default: str = "", help: str = "") -> None:
        """Define a flag with a string value."""
        self._define(name, "string", default, help, type=str, metavar="string")

    def _define(self, name: str, kind: str, default: Any, help: str, **kwargs) -> None:
        self.add_argument(
            OPTION_CHAR + name,
            OPTION_CHAR * 2 + name,
            dest=name,
            default=default,
            help=help,
            **kwargs,
        )
        self._defined[name] = (kind, default, help)

    def parse(self, tokens: list[str]) -> argparse.Namespace:
        """
        Bind tokens to the defined flags.

        Args:
            tokens: Tokens to parse, usually from the scanner

        Returns:
            Namespace with one attribute per defined flag

        Raises:
            argparse.ArgumentError: On unknown flags or invalid values
        """
        namespace = self.parse_intermixed_args(tokens)
        self._args = getattr(namespace, POSITIONAL_DEST, None) or []
        if hasattr(namespace, POSITIONAL_DEST):
            delattr(namespace, POSITIONAL_DEST)
        return namespace

    def parse_line(self, line: str) -> argparse.Namespace:
        """Tokenize a line and bind it to the flags."""
        return self.parse(split(line))

    def args(self) -> list[str]:
        """Return the positional arguments left over by the last parse()."""
        return list(self._args)

    def error(self, message: str):
        raise argparse.ArgumentError(None, message)

    def format_help(self) -> str:
        lines = [f"Usage of {self.name}:"]
        for name, (kind, default, help) in self._defined.items():
            if kind == "bool":
                lines.append(f"  -{name}")
            else:
                lines.append(f"  -{name} {kind}")

            if kind == "string":
                lines.append(f"    \t{help} (default {default!r})")
            else:
                lines.append(f"    \t{help} (default {default})")
        return "\n".join(lines) + "\n"

    def usage(self) -> str:
        """Return the usage text of the flag set."""
        return self.format_help()


def parse_flags(flags: Flags, line: str) -> argparse.Namespace:
    """Tokenize a line and bind it to the flags."""
    return flags.parse_line(line)


def _check_default(name: str, kind: str, default: Any) -> None:
    """Validate that a configured default matches the flag type."""
    if kind == "bool":
        ok = isinstance(default, bool)
    elif kind == "int":
        ok = isinstance(default, int) and not isinstance(default, bool)
    else:
        ok = isinstance(default, str)

    if not ok:
        raise FlagConfigError(
            f"Flag '{name}' has a default of the wrong type for {kind}: {default!r}"
        )


def load_flags(path: str) -> Flags:
    """
    Create a flag set from a TOML file.

    The file has an optional top-level "name" and a "flag" array of tables,
    each with "name", "type" (bool, int or string), "default" and "help".

    Args:
        path: Path to the TOML file

    Returns:
        Flags with every flag from the file defined

    Raises:
        FlagConfigError: If the file is not valid TOML or a flag is invalid
        OSError: If the file cannot be read
    """
    try:
        config = toml.load(path)
    except toml.TomlDecodeError as e:
        raise FlagConfigError(f"Cannot parse '{path}': {e}")

    flags = Flags(str(config.get("name", "args")))
    definers = {
        "bool": flags.define_bool,
        "int": flags.define_int,
        "string": flags.define_string,
    }

    specs = config.get("flag", [])
    if not isinstance(specs, list):
        raise FlagConfigError(f"'flag' in '{path}' must be an array of tables")

    for i, spec in enumerate(specs, start=1):
        name = spec.get("name")
        if not isinstance(name, str) or not name:
            raise FlagConfigError(f"Flag #{i} in '{path}' has no name")
        if name in flags:
            raise FlagConfigError(f"Flag '{name}' is defined more than once")

        kind = spec.get("type", "string")
        if kind not in definers:
            raise FlagConfigError(f"Flag '{name}' has unknown type '{kind}'")

        default = spec.get("default", FLAG_DEFAULTS[kind])
        _check_default(name, kind, default)
        definers[kind](name, default, str(spec.get("help", "")))

    return flags
