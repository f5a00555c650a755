#!/usr/bin/env python3
"""Main entry point for the lineargs tool."""

import sys

from lineargs.commands import _print_error, main


def run() -> None:
    """Run the CLI, turning uncaught errors into exit codes."""
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        _print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    run()
