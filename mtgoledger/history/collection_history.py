"""
Price/quantity history of a whole collection.

The history is archived as a CSV-like table:

    id,quantity,name,set,rarity,foil,2023-11-06T083944Z,2023-11-08T084732Z
    120020,1,In the Darkness Bind Them,LTC,Rare,false,[4]0.72;0.1,0.78;-

Timestamps are opaque column labels, oldest first. Every row has one
snapshot cell per timestamp. Reading then writing a well-formed table
reproduces it byte for byte.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from mtgoledger.errors import TableFormatError
from mtgoledger.history.card_history import FIXED_COLUMNS, CardHistory
from mtgoledger.models.card import Card
from mtgoledger.models.price_point import PricePoint
from mtgoledger.parsers.delimited import COLUMN_DELIMITER, ROW_DELIMITER, split_columns, split_rows

logger = logging.getLogger(__name__)

# Recorded for a card that is no longer in the collection
_SOLD_OUT = PricePoint(quantity=0)


@dataclass
class CollectionHistory:
    """
    Card histories aligned on a shared list of snapshot timestamps.

    INVARIANT: every card history has exactly len(timestamps) points.
    """

    timestamps: list[str] = field(default_factory=list)
    card_histories: list[CardHistory] = field(default_factory=list)

    @classmethod
    def from_csv_text(cls, text: str) -> "CollectionHistory":
        """
        Parse a history table.

        A single trailing newline is tolerated.

        Raises:
            TableFormatError: If the header is wrong or a row has a
                different number of snapshots than the header
            CellFormatError: If a snapshot cell is malformed
        """
        rows = split_rows(text)
        if rows[-1] == "" and len(rows) > 1:
            rows.pop()

        header = split_columns(rows[0])
        if tuple(header[: len(FIXED_COLUMNS)]) != FIXED_COLUMNS:
            raise TableFormatError(
                f"Expected header to start with {','.join(FIXED_COLUMNS)}, got {rows[0]!r}"
            )
        timestamps = header[len(FIXED_COLUMNS) :]

        card_histories: list[CardHistory] = []
        for row in rows[1:]:
            history = CardHistory.from_csv_row(row)
            if len(history.price_history) != len(timestamps):
                raise TableFormatError(
                    f"Card ID={history.id} has {len(history.price_history)} snapshots, "
                    f"expected {len(timestamps)}"
                )
            card_histories.append(history)

        return cls(timestamps=timestamps, card_histories=card_histories)

    def to_csv_text(self) -> str:
        """Render the history table (inverse of from_csv_text)."""
        header = COLUMN_DELIMITER.join([*FIXED_COLUMNS, *self.timestamps])
        rows = [header, *(history.to_csv_row() for history in self.card_histories)]
        return ROW_DELIMITER.join(rows)

    def size(self) -> int:
        """Number of cards tracked."""
        return len(self.card_histories)

    def newest_quantity(self, card_id: int) -> int | None:
        """Most recently recorded quantity of a card, None if not tracked."""
        for history in self.card_histories:
            if history.id == card_id:
                return history.newest_quantity()
        return None

    def add_snapshot(self, timestamp: str, cards: Iterable[Card]) -> None:
        """
        Append a snapshot of an enriched collection.

        - Tracked cards get one new point. Its quantity is only recorded
          when it differs from the newest recorded quantity.
        - Tracked cards missing from the snapshot get quantity 0 and no
          prices (quantity left out if it already was 0).
        - New cards are added with absent points for every earlier
          timestamp.

        Histories are kept sorted by card ID.
        """
        incoming = {history.id: history for history in map(CardHistory.from_card, cards)}
        previous_snapshots = len(self.timestamps)

        for history in self.card_histories:
            new = incoming.pop(history.id, None)
            newest_quantity = history.newest_quantity()
            if new is None:
                point = _SOLD_OUT if newest_quantity != 0 else PricePoint()
                history.price_history.append(point)
                continue

            point = new.price_history[-1]
            if point.quantity == newest_quantity:
                point = point._replace(quantity=None)
            history.quantity = new.quantity
            history.price_history.append(point)

        for new in incoming.values():
            new.price_history = [PricePoint()] * previous_snapshots + new.price_history
            self.card_histories.append(new)

        if incoming:
            logger.info(
                "history_snapshot_added",
                extra={"timestamp": timestamp, "new_card_count": len(incoming)},
            )

        self.card_histories.sort(key=lambda history: history.id)
        self.timestamps.append(timestamp)
