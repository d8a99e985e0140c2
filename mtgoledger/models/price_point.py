from typing import NamedTuple

# Quantities are stored as unsigned 16-bit values in the history archive
MAX_QUANTITY = 65_535


class PricePoint(NamedTuple):
    """
    Quantity and prices of one card at one snapshot.

    Any field may be absent (None), which is distinct from zero.

    Attributes:
        quantity: Copies owned, only recorded when it changed
        goatbots_price: GoatBots price in tix
        scryfall_price: Scryfall price in tix
    """

    quantity: int | None = None
    goatbots_price: float | None = None
    scryfall_price: float | None = None
