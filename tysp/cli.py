"""Command line: print a sheet file as an aligned table."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from tysp.sheet import load_sheet

__all__ = ["usage", "main"]

_USAGE = (
    "\n  Usage: tysp <filename>\n"
    "    filename: The name of the file to process.\n\n"
)


def usage() -> None:
    """Print how to call the program."""
    sys.stdout.write(_USAGE)


def main(argv: Sequence[str] | None = None) -> int:
    """Render the sheet named by the first argument; print usage when there is none."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        usage()
        return 0

    filename = args[0]
    try:
        sheet = load_sheet(filename)
    except OSError:
        sys.stderr.write(f"\n  Error: Could not open file '{filename}'.\n\n")
        return 1

    sys.stdout.write(sheet.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())