"""Command-line entry point with a few small demonstrations."""

from __future__ import annotations

import argparse
import struct
from collections.abc import Sequence

_TYPE_FORMATS = {"int": "i", "float": "f", "double": "d", "char": "c"}


def type_sizes() -> dict[str, int]:
    """Sizes in bytes of the native int, float, double and char types."""
    return {name: struct.calcsize(fmt) for name, fmt in _TYPE_FORMATS.items()}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numbasics", description="Small number demonstrations.")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("hello", help="print a greeting")
    echo = commands.add_parser("echo", help="print back an integer")
    echo.add_argument("number", type=int)
    commands.add_parser("sizes", help="print the sizes of native types")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv``; greet when no command is given."""
    args = _build_parser().parse_args(argv)
    if args.command == "echo":
        print(f"You entered: {args.number}")
    elif args.command == "sizes":
        for name, size in type_sizes().items():
            unit = "byte" if name == "char" else "bytes"
            print(f"Size of {name}: {size} {unit}")
    else:
        print("Hello, World!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())