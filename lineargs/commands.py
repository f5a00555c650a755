"""Command-line interface handler for lineargs."""

import argparse
import json
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .flags import FlagConfigError, load_flags
from .options import split_args
from .scanner import NO_DELIMITER, Scanner

console = Console()
err_console = Console(stderr=True)


def print_usage() -> None:
    """Print usage information."""
    print("""Usage: lineargs [-h | --help] <command> [<args>]

When LINE is omitted the line is read from standard input.

Commands:
  split                    Split a line into tokens
      -n, --max NUM        Only split the first NUM tokens and print the rest of the line
      --json               Print the tokens as JSON
      [LINE]               The line to split

  scan                     Show every token with the character that ended it
      [LINE]               The line to scan

  options                  Split the leading options and print the rest of the line
      --json               Print the result as JSON
      [LINE]               The line to split

  parse                    Parse a line into options and arguments
      --json               Print the result as JSON
      [LINE]               The line to parse

  flags                    Bind a line to the flags defined in a TOML file
      -c, --config FILE    The TOML file with the flag definitions (required)
      --usage              Print the usage of the flags and exit
      [LINE]               The line to bind

  help                     Show this help message
  version                  Show program version
""")


def print_version() -> None:
    """Print version information."""
    print(__version__)


def _scanner(args: argparse.Namespace) -> Scanner:
    """Return a scanner over LINE, or over standard input if LINE is missing."""
    if args.line is None:
        return Scanner(sys.stdin.buffer)
    return Scanner(args.line)


def _print_plain(text: str) -> None:
    """Print user data without markup or highlighting."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)


def _format_delim(delim: int) -> str:
    if delim == NO_DELIMITER:
        return "EOF"
    return repr(chr(delim))


def cmd_split(args: argparse.Namespace) -> None:
    """Execute the split command."""
    tokens, rest = _scanner(args).first_n_tokens(args.max)

    if args.json:
        result = {"tokens": tokens}
        if args.max > 0:
            result["rest"] = rest
        print(json.dumps(result))
        return

    for i, token in enumerate(tokens):
        _print_plain(f"{i} {token}")

    if args.max > 0:
        _print_plain(f"rest: {rest}")


def cmd_scan(args: argparse.Namespace) -> None:
    """Execute the scan command."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Delim")
    table.add_column("Token", style="green")

    count = 0
    for token in _scanner(args):
        table.add_row(str(count), _format_delim(token.delim), Text(token.text))
        count += 1

    if count == 0:
        console.print("[yellow]No tokens[/yellow]")
        return

    console.print(table)


def cmd_options(args: argparse.Namespace) -> None:
    """Execute the options command."""
    options, rest = _scanner(args).option_tokens()

    if args.json:
        print(json.dumps({"options": options, "rest": rest}))
        return

    _print_plain(f"options: {options}")
    _print_plain(f"rest: {rest}")


def cmd_parse(args: argparse.Namespace) -> None:
    """Execute the parse command."""
    parsed = split_args(_scanner(args).all_tokens())

    if args.json:
        print(json.dumps({"options": parsed.options, "arguments": parsed.arguments}))
        return

    _print_plain(f"options: {parsed.options}")
    _print_plain(f"arguments: {parsed.arguments}")


def cmd_flags(args: argparse.Namespace) -> None:
    """Execute the flags command."""
    if not args.config:
        err_console.print(
            "[red]Please specify a flag definition file with --config[/red]\n",
            highlight=False,
        )
        print_usage()
        sys.exit(1)

    try:
        flags = load_flags(args.config)
    except (FlagConfigError, OSError) as e:
        _print_error(str(e))
        sys.exit(1)

    if args.usage:
        _print_plain(flags.usage().rstrip("\n"))
        return

    try:
        values = flags.parse(_scanner(args).all_tokens())
    except argparse.ArgumentError as e:
        _print_error(str(e))
        sys.exit(1)

    for name, value in vars(values).items():
        _print_plain(f"{name}: {value}")
    _print_plain(f"args: {flags.args()}")


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(description="Shell-like line splitter", add_help=False)

    # Add global help
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser("split", add_help=False)
    split_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for split"
    )
    split_parser.add_argument(
        "-n",
        "--max",
        type=int,
        default=0,
        help="Only split the first NUM tokens (default: all)",
    )
    split_parser.add_argument("--json", action="store_true", help="Print JSON")
    split_parser.add_argument("line", nargs="?", help="The line to split")

    # Scan command
    scan_parser = subparsers.add_parser("scan", add_help=False)
    scan_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for scan"
    )
    scan_parser.add_argument("line", nargs="?", help="The line to scan")

    # Options command
    options_parser = subparsers.add_parser("options", add_help=False)
    options_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for options"
    )
    options_parser.add_argument("--json", action="store_true", help="Print JSON")
    options_parser.add_argument("line", nargs="?", help="The line to split")

    # Parse command
    parse_parser = subparsers.add_parser("parse", add_help=False)
    parse_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for parse"
    )
    parse_parser.add_argument("--json", action="store_true", help="Print JSON")
    parse_parser.add_argument("line", nargs="?", help="The line to parse")

    # Flags command
    flags_parser = subparsers.add_parser("flags", add_help=False)
    flags_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for flags"
    )
    flags_parser.add_argument(
        "-c", "--config", type=str, help="TOML file with the flag definitions"
    )
    flags_parser.add_argument(
        "--usage", action="store_true", help="Print the usage of the flags"
    )
    flags_parser.add_argument("line", nargs="?", help="The line to bind")

    # Help command
    subparsers.add_parser("help", add_help=False)

    # Version command
    subparsers.add_parser("version", add_help=False)

    if not argv:
        print_usage()
        return

    args = parser.parse_args(argv)

    # Handle global help
    if args.help or args.command == "help":
        print_usage()
        return

    # Handle version
    if args.command == "version":
        print_version()
        return

    # Handle command-specific help
    if hasattr(args, "help") and args.help:
        print_usage()
        return

    # Execute commands
    if args.command == "split":
        cmd_split(args)
    elif args.command == "scan":
        cmd_scan(args)
    elif args.command == "options":
        cmd_options(args)
    elif args.command == "parse":
        cmd_parse(args)
    elif args.command == "flags":
        cmd_flags(args)
    else:
        print_usage()
