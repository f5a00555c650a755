"""Split shell-like command lines into arguments, options and flags."""

__version__ = "1.0.0"

from .flags import FlagConfigError, Flags, LineArgsException, load_flags, parse_flags
from .options import ParsedArgs, parse_args, split_args
from .scanner import NO_DELIMITER, Scanner, Token, split, split_n, split_options
from .source import CharSource

__all__ = [
    "CharSource",
    "FlagConfigError",
    "Flags",
    "LineArgsException",
    "NO_DELIMITER",
    "ParsedArgs",
    "Scanner",
    "Token",
    "load_flags",
    "parse_args",
    "parse_flags",
    "split",
    "split_args",
    "split_n",
    "split_options",
]
