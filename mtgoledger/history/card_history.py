"""
Price and quantity history of a single card.

CSV row format:
    <id>,<quantity>,<name>,<set>,<rarity>,<foil>,<cell 1>,...,<cell N>

Cells follow the snapshot cell notation, oldest snapshot first. Names
containing a comma are written quoted, e.g.
    94060,40,"Arlinn, the Pack's Hope",MID,Mythic,false,[1004]2.1;-
"""

from dataclasses import dataclass, field

from mtgoledger.errors import TableFormatError
from mtgoledger.models.card import Card
from mtgoledger.models.collection import parse_quantity
from mtgoledger.models.price_point import PricePoint
from mtgoledger.models.rarity import Rarity
from mtgoledger.parsers.delimited import COLUMN_DELIMITER, split_columns
from mtgoledger.parsers.snapshot_cell import parse_cells, render_cells

FIXED_COLUMNS = ("id", "quantity", "name", "set", "rarity", "foil")

_QUOTE = '"'


def _quote_name(name: str) -> str:
    if COLUMN_DELIMITER in name:
        return f"{_QUOTE}{name}{_QUOTE}"
    return name


def _take_name(columns: list[str], row: str) -> tuple[str, int]:
    """
    Read the name column starting at index 2.

    Returns the name and the index of the first column after it. A
    quoted name spanning several comma-split columns is joined back.
    """
    first = columns[2]
    if not first.startswith(_QUOTE):
        return first, 3
    if len(first) > 1 and first.endswith(_QUOTE):
        return first[1:-1], 3

    parts = [first[1:]]
    for index in range(3, len(columns)):
        part = columns[index]
        if part.endswith(_QUOTE):
            parts.append(part[:-1])
            return COLUMN_DELIMITER.join(parts), index + 1
        parts.append(part)
    raise TableFormatError(f"Unterminated quoted card name in row: {row!r}")


def _parse_id(text: str, row: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise TableFormatError(f"Card ID {text!r} is not an unsigned integer in row: {row!r}")
    return int(text)


def _parse_foil(text: str, row: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise TableFormatError(f"Foil flag {text!r} is not 'true' or 'false' in row: {row!r}")


@dataclass
class CardHistory:
    """
    A card and its price/quantity at every snapshot.

    Attributes:
        id: MTGO card ID
        quantity: Quantity at the time the history was created (text)
        name: Card name
        set: Set code
        rarity: Card rarity
        foil: Whether this is the foil printing
        price_history: One PricePoint per snapshot column, oldest first
    """

    id: int
    quantity: str
    name: str
    set: str
    rarity: Rarity
    foil: bool
    price_history: list[PricePoint] = field(default_factory=list)

    @classmethod
    def from_card(cls, card: Card) -> "CardHistory":
        """
        Start a single-snapshot history from an enriched card.

        A Scryfall price of 0 means Scryfall had no price and is
        recorded as absent.

        Raises:
            QuantityError: If the card quantity is invalid
            TableFormatError: If the card ID is not numeric
        """
        point = PricePoint(
            quantity=parse_quantity(card),
            goatbots_price=card.goatbots_price,
            scryfall_price=card.scryfall_price or None,
        )
        return cls(
            id=_parse_id(card.id, card.id),
            quantity=card.quantity,
            name=card.name,
            set=card.set,
            rarity=Rarity.parse(card.rarity),
            foil=card.foil,
            price_history=[point],
        )

    @classmethod
    def from_csv_row(cls, row: str) -> "CardHistory":
        """
        Parse a CSV row of the history table.

        Raises:
            TableFormatError: If the fixed columns are malformed
            CellFormatError: If a snapshot cell is malformed
        """
        columns = split_columns(row)
        if len(columns) < len(FIXED_COLUMNS):
            raise TableFormatError(
                f"Expected at least {len(FIXED_COLUMNS)} columns, got {len(columns)}: {row!r}"
            )

        name, next_index = _take_name(columns, row)
        if len(columns) < next_index + 3:
            raise TableFormatError(f"Row ends before the foil column: {row!r}")
        set_code, rarity, foil = columns[next_index : next_index + 3]

        return cls(
            id=_parse_id(columns[0], row),
            quantity=columns[1],
            name=name,
            set=set_code,
            rarity=Rarity.parse(rarity),
            foil=_parse_foil(foil, row),
            price_history=parse_cells(columns[next_index + 3 :]),
        )

    def to_csv_row(self) -> str:
        """Render this history as a CSV row (inverse of from_csv_row)."""
        columns = [
            str(self.id),
            self.quantity,
            _quote_name(self.name),
            self.set,
            str(self.rarity),
            "true" if self.foil else "false",
            *render_cells(self.price_history),
        ]
        return COLUMN_DELIMITER.join(columns)

    def newest_quantity(self) -> int:
        """Most recently recorded quantity, 0 if none was ever recorded."""
        for point in reversed(self.price_history):
            if point.quantity is not None:
                return point.quantity
        return 0
