"""Lots, offers and the auction that keeps the best offer for each lot."""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO


class AuctionError(Exception):
    """Base class for errors raised by an auction."""


class DuplicateLotError(AuctionError):
    """A lot with the same number is already in the auction."""

    def __init__(self, lot_id: int) -> None:
        super().__init__(f"Numero de lote {lot_id} ya existe.")
        self.lot_id = lot_id


class LotNotFoundError(AuctionError):
    """No lot with the requested number exists."""

    def __init__(self, lot_id: int) -> None:
        super().__init__("ID de lote no encontrado.")
        self.lot_id = lot_id


def _single_precision(value: float) -> float:
    """Round a number to the nearest single-precision float."""
    return struct.unpack("f", struct.pack("f", value))[0]


def format_amount(amount: float) -> str:
    """Render an amount: whole units from 100000 up, six significant digits below."""
    if amount >= 100000:
        return str(int(amount))
    return "%g" % amount


@dataclass(frozen=True)
class Person:
    """Someone taking part in the auction."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Offer:
    """An amount offered by a person; amounts are kept in single precision."""

    amount: float
    bidder: Person

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _single_precision(float(self.amount)))

    def __str__(self) -> str:
        return f"${format_amount(self.amount)} de {self.bidder}"


@dataclass
class Lot:
    """An item on sale, holding the highest offer received so far."""

    id: int
    name: str
    best_offer: Offer | None = field(default=None)

    def place_offer(self, offer: Offer) -> bool:
        """Record the offer if it is the first or beats the current one.

        Returns True when the offer was recorded.
        """
        if self.best_offer is None or offer.amount > self.best_offer.amount:
            self.best_offer = offer
            return True
        return False

    def __str__(self) -> str:
        offer = self.best_offer if self.best_offer is not None else "sin oferta aun"
        return f"ID: {self.id}, Nombre: {self.name}, Oferta: {offer}"


class Auction:
    """A set of lots, numbered uniquely, reporting each action to a text stream."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._lots: dict[int, Lot] = {}
        self._write(f"Se crea la subasta: {self}\n")

    def _write(self, text: str) -> None:
        self._out.write(text)

    def __len__(self) -> int:
        return len(self._lots)

    def __iter__(self) -> Iterator[Lot]:
        return iter(list(self._lots.values()))

    def find_lot(self, lot_id: int) -> Lot:
        """Return the lot with this number, or raise LotNotFoundError."""
        try:
            return self._lots[lot_id]
        except KeyError:
            raise LotNotFoundError(lot_id) from None

    def add_lot(self, lot_id: int, name: str) -> Lot:
        """Add a new lot; raise DuplicateLotError if the number is taken."""
        if lot_id in self._lots:
            raise DuplicateLotError(lot_id)
        lot = Lot(lot_id, name)
        self._lots[lot_id] = lot
        self._write(f"  -Lote ingresado: {lot}.\n")
        return lot

    def bid(self, lot_id: int, bidder: str, amount: float) -> bool:
        """Offer an amount for a lot; returns True when the offer was recorded."""
        amount = _single_precision(float(amount))
        self._write(
            f"\nOferta en lote {lot_id}: {bidder} oferta ${format_amount(amount)}.\n"
        )
        lot = self.find_lot(lot_id)
        self._write(f"Lote encontrado: {lot}.\n")

        first = lot.best_offer is None
        accepted = lot.place_offer(Offer(amount, Person(bidder)))
        if first:
            self._write(f'Es la primera oferta para "{lot.name}".\n')
        elif accepted:
            self._write("La oferta reemplaza a la anterior.\n")
        else:
            self._write("La oferta es menor a la actual, no se registra.\n")
        self._write(f'Oferta actual para "{lot.name}": {lot.best_offer}.\n')
        return accepted

    def __str__(self) -> str:
        if not self._lots:
            return "sin lotes.\n"
        listing = "".join(f"  -{lot}.\n" for lot in self._lots.values())
        return f"Cantidad de lotes: {len(self._lots)}\nLotes: \n{listing}\n"