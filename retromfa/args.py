"""Command-line argument parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

_BLUE = "\033[34m"
_RESET = "\033[0m"

PROGRAM = "retromfa"


class ArgumentError(ValueError):
    """Raised when the command line cannot be understood."""


@dataclass(frozen=True)
class Args:
    """The outcome of parsing the command line."""

    filename: str | None = None
    help: bool = False


def usage_text() -> str:
    """Return the one-line usage message."""
    return f"{_BLUE}Usage{_RESET}: {PROGRAM} {{-h | --help | filename}}\n"


def help_text() -> str:
    """Return the full help message, starting with the usage line."""
    return (
        usage_text()
        + f"{_BLUE}Arguments:\n{_RESET}"
        + "  -h, --help\t\tShow this help message\n"
        + "  filename\t\tSpecify the file to process\n"
        + f"{_BLUE}Examples:\n{_RESET}"
        + f"  {PROGRAM} -h\n"
        + f"  {PROGRAM} --help\n"
        + f"  {PROGRAM} blue.mfa\n"
    )


def _parse_option(option: str) -> Args:
    if option.startswith("--"):
        if option == "--help":
            return Args(help=True)
    elif option == "-h":
        return Args(help=True)
    raise ArgumentError(f"unknown option: {option}")


def parse_args(argv: Sequence[str]) -> Args:
    """Parse the arguments that follow the program name.

    Exactly one argument is accepted: ``-h``, ``--help`` or a file name.
    """
    arguments = list(argv)
    if len(arguments) != 1:
        raise ArgumentError("expected exactly one argument")
    (argument,) = arguments
    if argument.startswith("-"):
        return _parse_option(argument)
    return Args(filename=argument)