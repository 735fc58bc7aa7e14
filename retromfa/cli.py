"""Command-line entry point: report embedded images and extract them."""

from __future__ import annotations

import sys
from typing import Sequence

from .args import ArgumentError, help_text, parse_args, usage_text
from .bmp import write_bmp
from .reader import FileKind, ReaderError, scan

OUTPUT_NAME = "tkt.bmp"

_ITALIC = "\033[3m"
_RESET = "\033[0m"


def _summary(filename: str, png: int, jpeg: int, bmp: int, count: int) -> str:
    return (
        f"Files found inside {_ITALIC}{filename}{_RESET}: {count}\n"
        f"  PNG: {png}\n"
        f"  JPEG: {jpeg}\n"
        f"  BMP: {bmp}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
    except ArgumentError:
        sys.stdout.write(usage_text())
        return 1
    if args.help:
        sys.stdout.write(help_text())
        return 0

    filename = args.filename or ""
    try:
        result = scan(filename)
    except ReaderError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(
        _summary(filename, result.png, result.jpeg, result.bmp, result.count)
    )
    for image in result.images:
        print(f"file.type: {int(FileKind.BMP)}")
        try:
            write_bmp(image, OUTPUT_NAME)
        except OSError as exc:
            print(f"Error opening file for writing: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())