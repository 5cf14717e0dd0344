"""Recordings and the artists who made them."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class Artist:
    """A person with a first and last name."""

    first_name: str
    last_name: str

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass
class Recording:
    """A recording with its title, author, year and an optional comment."""

    title: str
    author: Artist
    date: int
    comment: str = ""

    def __str__(self) -> str:
        return (
            f"La grabacion es:\n{self.title}\n"
            f"creada por {self.author}\n"
            f"Fecha: {self.date}\n"
        )


def main(argv: list[str] | None = None) -> int:
    """Print a sample recording."""
    argparse.ArgumentParser(description="Muestra una grabacion.").parse_args(argv)
    author = Artist("Paul", "McCartney")
    record = Recording("Band on the run", author, 1974)
    print(record, end="")
    return 0