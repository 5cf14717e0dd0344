"""Print a greeting."""

from __future__ import annotations

import argparse

_WORDS = ("hola", "mundo")


def greeting(capitalized: bool = False) -> str:
    """Return the greeting, with a capital first letter if asked."""
    text = "".join(_WORDS)
    return text.capitalize() if capitalized else text


def main(argv: list[str] | None = None) -> int:
    """Write the greeting to standard output, without a trailing newline."""
    parser = argparse.ArgumentParser(description="Imprime un saludo.")
    parser.add_argument(
        "-c", "--capitalized", action="store_true", help="empezar con mayuscula"
    )
    args = parser.parse_args(argv)
    print(greeting(args.capitalized), end="")
    return 0