"""Interactive console session for running an auction."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from typing import TextIO, TypeVar

from subasta.auction import Auction, DuplicateLotError, LotNotFoundError

_T = TypeVar("_T")

MENU = (
    "1-Ingresar un lote\n"
    "2-Ofertar por un lote\n"
    "3-Mostrar estado de la subasta\n"
    "0-Concluir la subasta\n"
)
SEPARATOR = "_____________________________________________________________"


class _EndOfInput(Exception):
    """The input ran out or held something that could not be read."""


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read(tokens: Iterator[str], convert: Callable[[str], _T]) -> _T:
    try:
        token = next(tokens)
    except StopIteration:
        raise _EndOfInput from None
    try:
        return convert(token)
    except ValueError:
        raise _EndOfInput from None


def _add_lot(auction: Auction, tokens: Iterator[str], stdout: TextIO) -> None:
    stdout.write("Ingrese numero del lote: ")
    lot_id = _read(tokens, int)
    stdout.write("Ingrese nombre del lote: ")
    name = _read(tokens, str)
    try:
        auction.add_lot(lot_id, name)
    except DuplicateLotError as exc:
        stdout.write(f"{exc}\n")
    stdout.write("\n")


def _bid(auction: Auction, tokens: Iterator[str], stdout: TextIO) -> None:
    stdout.write("Ingrese numero del lote: ")
    lot_id = _read(tokens, int)
    stdout.write("Ingrese nombre del ofertante: ")
    bidder = _read(tokens, str)
    stdout.write("Ingrese monto de la oferta: ")
    amount = _read(tokens, float)
    try:
        auction.bid(lot_id, bidder, amount)
    except LotNotFoundError as exc:
        stdout.write(f"\n{exc}\n")
    stdout.write("\n")


def run(stdin: TextIO, stdout: TextIO) -> Auction:
    """Run the menu-driven session until the user quits or input ends.

    Returns the auction in its final state.
    """
    auction = Auction(stdout)
    tokens = _tokens(stdin)
    while True:
        stdout.write(MENU)
        try:
            option = _read(tokens, int)
        except _EndOfInput:
            break
        try:
            if option == 1:
                _add_lot(auction, tokens, stdout)
            elif option == 2:
                _bid(auction, tokens, stdout)
            elif option == 3:
                stdout.write(f"Subasta: \n{auction}")
            elif option != 0:
                stdout.write("Opcion incorrecta.\n\n")
        except _EndOfInput:
            break
        if option <= 0:
            break
    stdout.write(f"{SEPARATOR}\nSe da por terminada la subasta: \n{auction}")
    return auction


def main(argv: list[str] | None = None) -> int:
    """Start an interactive auction on standard input and output."""
    parser = argparse.ArgumentParser(description="Subasta interactiva.")
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0