"""Films and their directors."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field


@dataclass
class Director:
    """The person who directed a film."""

    name: str = ""


@dataclass
class Movie:
    """A film with its year, plot and director."""

    title: str
    year: int
    plot: str
    director: Director = field(default_factory=Director)

    def describe(self) -> str:
        """Return a multi-line description of the film."""
        return (
            f"Pelicula:\nNombre: {self.title}\n"
            f"Año de filmacion: {self.year}\n"
            f"Director: {self.director.name}\n"
            f"Trama: {self.plot}\n"
        )


def main(argv: list[str] | None = None) -> int:
    """Print a sample director and film."""
    argparse.ArgumentParser(description="Muestra una pelicula.").parse_args(argv)
    director = Director("Christopher Nolan")
    print(director.name)
    movie = Movie(
        "Interestelar",
        2014,
        "Un astronauta entra a un agujero negro y mueve libros en la "
        "biblioteca de su hija",
    )
    movie.director = director
    print(movie.describe(), end="")
    return 0