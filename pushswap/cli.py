"""Command-line entry point printing the operations that sort the input."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_args
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; on bad input print Error to stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for op in solve(values):
        sys.stdout.write(op + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())