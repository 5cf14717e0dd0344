# subasta

A small console auction manager. You register lots by number and name,
people bid on them, and each lot keeps only its highest offer. All
messages are printed in Spanish.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Interactive auction

```
subasta
```

The menu offers these options:

```
1-Ingresar un lote
2-Ofertar por un lote
3-Mostrar estado de la subasta
0-Concluir la subasta
```

- **1** asks for a lot number and a one-word lot name. A number that is
  already in use is reported and the lot is not added.
- **2** asks for a lot number, a one-word bidder name and an amount. An
  unknown lot number is reported. The first offer on a lot is always
  recorded; after that, an offer is only recorded when it is strictly
  higher than the current one.
- **3** prints every lot with its current best offer.
- **0** closes the auction and prints its final state.

Any other number prints `Opcion incorrecta.` and shows the menu again.
Input is read as whitespace-separated words. The session also ends, and
prints the final state, when input runs out or when a number or amount
cannot be read.

Amounts are kept in single precision. An amount of 100000 or more is
shown as a whole number, for example `$2000000 de Alberto`; smaller
amounts are shown with up to six significant digits.

## Using it from Python

```python
from subasta.auction import Auction, LotNotFoundError

auction = Auction()
auction.add_lot(1, "Auto secuestrado")
auction.bid(1, "Alberto", 2000000)
auction.bid(1, "Juan", 1500000)   # lower than the current offer, returns False
print(auction)

try:
    auction.bid(7, "Ana", 1000)
except LotNotFoundError:
    print("no such lot")
```

- `Auction(out=None)` writes its progress messages to `out`, or to
  standard output when none is given.
- `len(auction)` gives the number of lots; iterating over it yields the
  `Lot` objects in the order they were added.
- `add_lot(lot_id, name)` returns the new `Lot` and raises
  `DuplicateLotError` for a number already in use.
- `find_lot(lot_id)` returns the `Lot` or raises `LotNotFoundError`.
- `bid(lot_id, bidder, amount)` returns `True` when the offer was
  recorded and raises `LotNotFoundError` for an unknown lot.
- `Lot.place_offer(offer)` records an `Offer` if it is the first or
  beats `best_offer`.
- `format_amount(amount)` renders an amount as described above.

Both errors derive from `AuctionError`. The interactive session is
available as `subasta.cli.run(stdin, stdout)`, which returns the final
`Auction`.

## Extra examples

Three small console programs are included as well:

```
subasta-peliculas    # prints a movie record with its director
subasta-grabacion    # prints a recording with its artist and year
subasta-hola         # prints a greeting; -c / --capitalized starts it with a capital
```

They are backed by `subasta.movies` (`Director`, `Movie.describe()`),
`subasta.recording` (`Artist`, `Recording`) and `subasta.hello`
(`greeting(capitalized=False)`).

## What it does not do

The auction lives only in memory: nothing is saved, and its state is
lost when the session ends. There is no way to remove or rename a lot,
or to withdraw an offer.