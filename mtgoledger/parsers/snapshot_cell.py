"""
Codec for snapshot cells of the price history table.

Cell notation:
    [quantity]goatbots_price;scryfall_price

Examples:
    [4]0.72;0.1     quantity 4, both prices
    0.002;12.1      no quantity update
    [9]0.72;-       Scryfall price missing
    -;-             nothing known at this snapshot

The quantity prefix is only written when the quantity changed since the
previous snapshot. A price of "-" means absent, which is not the same
as zero.

Cells are produced by our own writer, so malformed numbers are contract
violations and raise CellFormatError. The one tolerated irregularity is
extra content after the Scryfall price ("0.72;0.1;0.2"): only the
leading number is read, the rest is dropped.
"""

import re
from collections.abc import Iterable, Sequence

from mtgoledger.errors import CellFormatError
from mtgoledger.models.price_point import MAX_QUANTITY, PricePoint

ABSENT = "-"
PRICE_DELIMITER = ";"

_QUANTITY_PATTERN = re.compile(r"[0-9]+")

# Decimal literal: "0.72", "1", "3.", ".5", "1e-05"
_NUMBER = r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
_NUMBER_PATTERN = re.compile(_NUMBER)
_NUMBER_PREFIX_PATTERN = re.compile(r"\s*(" + _NUMBER + ")")


def _parse_quantity(cell: str, digits: str) -> int:
    if not _QUANTITY_PATTERN.fullmatch(digits):
        raise CellFormatError(cell, f"quantity {digits!r} is not an unsigned integer")
    quantity = int(digits)
    if quantity > MAX_QUANTITY:
        raise CellFormatError(cell, f"quantity {quantity} exceeds {MAX_QUANTITY}")
    return quantity


def _parse_goatbots_price(cell: str, field: str) -> float | None:
    if field == ABSENT:
        return None
    if not _NUMBER_PATTERN.fullmatch(field):
        raise CellFormatError(cell, f"GoatBots price {field!r} is not a number")
    return float(field)


def _parse_scryfall_price(cell: str, field: str) -> float | None:
    if field == ABSENT:
        return None
    # Only the leading number counts, e.g. "0.1;0.2" -> 0.1
    match = _NUMBER_PREFIX_PATTERN.match(field)
    if not match:
        raise CellFormatError(cell, f"Scryfall price {field!r} is not a number")
    return float(match.group(1))


def parse_cell(cell: str) -> PricePoint:
    """
    Parse one snapshot cell.

    Args:
        cell: Cell text, e.g. "[4]0.72;0.1"

    Returns:
        PricePoint with absent fields set to None

    Raises:
        CellFormatError: If the quantity or a price is malformed, or the
            cell has no ";" separating the prices
    """
    quantity: int | None = None
    start = 0

    if cell.startswith("["):
        end = cell.find("]")
        if end == -1:
            raise CellFormatError(cell, "quantity has no closing ']'")
        quantity = _parse_quantity(cell, cell[1:end])
        start = end + 1

    delimiter_pos = cell.find(PRICE_DELIMITER, start)
    if delimiter_pos == -1:
        raise CellFormatError(cell, "missing ';' between prices")

    goatbots_price = _parse_goatbots_price(cell, cell[start:delimiter_pos])
    scryfall_price = _parse_scryfall_price(cell, cell[delimiter_pos + 1 :])

    return PricePoint(quantity, goatbots_price, scryfall_price)


def format_price(price: float | None) -> str:
    """
    Render a price as its shortest round-tripping decimal text.

    Integral values drop the fractional part ("2" not "2.0"), which is
    how the archive writer has always emitted them.
    """
    if price is None:
        return ABSENT
    text = repr(float(price))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def render_cell(point: PricePoint) -> str:
    """
    Render a PricePoint back into cell notation.

    Inverse of parse_cell: parse_cell(render_cell(p)) == p.
    """
    quantity, goatbots_price, scryfall_price = point
    prefix = f"[{quantity}]" if quantity is not None else ""
    return f"{prefix}{format_price(goatbots_price)}{PRICE_DELIMITER}{format_price(scryfall_price)}"


def parse_cells(cells: Sequence[str]) -> list[PricePoint]:
    """Parse snapshot cells in column order (oldest first)."""
    return [parse_cell(cell) for cell in cells]


def render_cells(points: Iterable[PricePoint]) -> list[str]:
    """Render PricePoints in order."""
    return [render_cell(point) for point in points]
