"""
An MTGO collection and its enrichment from reference data.

Enrichment is a left outer join on card ID, done per field: a card can
pick up its set/rarity/foil from the GoatBots definitions while missing
from the price history, or the other way around. Misses are expected
and reported as Diagnostic records, never raised.

Quantity aggregates are computed lazily on first use and cached.
INVARIANT: the cache is dropped by every Collection method that changes
the card list. Mutating a Card in place after total_cards() has been
called leaves the cache stale until invalidate() is called.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from pydantic import TypeAdapter, ValidationError

from mtgoledger.errors import ContractViolationError, QuantityError
from mtgoledger.models.card import Card
from mtgoledger.models.diagnostic import Diagnostic, DiagnosticKind, DiagnosticSink
from mtgoledger.models.goatbots_card import GoatbotsCard
from mtgoledger.models.price_point import MAX_QUANTITY

logger = logging.getLogger(__name__)

_cards_adapter = TypeAdapter(list[Card])

# Event tickets are worth 1 tix by definition and are never looked up
EVENT_TICKET_ID = "1"
EVENT_TICKET_PRICE = 1.0

# Totals are stored as unsigned 32-bit values
MAX_TOTAL_QUANTITY = 2**32 - 1


def parse_quantity(card: Card) -> int:
    """
    Parse a card's quantity text as an unsigned 16-bit integer.

    Raises:
        QuantityError: If the text is not a non-negative integer literal
            or exceeds 65535
    """
    text = card.quantity
    if not (text.isascii() and text.isdigit()):
        raise QuantityError(card.id, text)
    quantity = int(text)
    if quantity > MAX_QUANTITY:
        raise QuantityError(card.id, text)
    return quantity


def _emit(
    diagnostics: list[Diagnostic], sink: DiagnosticSink | None, diagnostic: Diagnostic
) -> None:
    diagnostics.append(diagnostic)
    if sink is not None:
        sink(diagnostic)


@dataclass
class Collection:
    """
    An ordered list of cards owned on MTGO.

    Order is insertion order and carries no meaning.
    """

    cards: list[Card] = field(default_factory=list)

    _total_quantity: int | None = field(default=None, init=False, repr=False, compare=False)
    _card_quantities: list[int] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def from_json_str(cls, json_str: str | bytes) -> "Collection":
        """
        Build a collection from a JSON array of cards.

        Raises:
            pydantic.ValidationError: If the JSON is malformed. Use
                from_json() on an existing collection for the logging,
                non-raising variant.
        """
        return cls(cards=_cards_adapter.validate_json(json_str))

    def size(self) -> int:
        """Number of card entries (unique printings) in the collection."""
        return len(self.cards)

    def add_card(self, card: Card) -> None:
        """Append a card and drop the cached quantities."""
        self.cards.append(card)
        self.invalidate()

    def take_cards(self) -> list[Card]:
        """Remove and return all cards, leaving the collection empty."""
        cards, self.cards = self.cards, []
        self.invalidate()
        return cards

    # -------------------------------------------------------------------------
    # Enrichment
    # -------------------------------------------------------------------------

    def extract_goatbots_info(
        self,
        card_definitions: Mapping[str, GoatbotsCard],
        price_history: Mapping[str, float],
        sink: DiagnosticSink | None = None,
    ) -> list[Diagnostic]:
        """
        Fill in set, rarity, foil and GoatBots price from GoatBots data.

        Every card is visited; a missing key leaves the affected fields
        unchanged. Event tickets get a price of 1 tix and no lookup.
        Applying the same maps twice gives the same result.

        Args:
            card_definitions: Card ID -> GoatBots card definition
            price_history: Card ID -> GoatBots price in tix
            sink: Optional callable receiving each Diagnostic as it occurs

        Returns:
            Diagnostics for every lookup miss, in card order.
        """
        diagnostics: list[Diagnostic] = []

        for card in self.cards:
            if card.id == EVENT_TICKET_ID:
                card.goatbots_price = EVENT_TICKET_PRICE
                continue

            definition = card_definitions.get(card.id)
            if definition is not None:
                card.set = definition.cardset
                card.rarity = definition.rarity
                card.foil = definition.foil == 1
            else:
                logger.warning("Card definition key not found: ID=%s", card.id)
                _emit(
                    diagnostics,
                    sink,
                    Diagnostic(
                        kind=DiagnosticKind.MISSING_CARD_DEFINITION,
                        message=f"Card definition key not found: ID={card.id}",
                        card_id=card.id,
                    ),
                )

            price = price_history.get(card.id)
            if price is not None:
                card.goatbots_price = price
            else:
                logger.warning("Price history key not found: ID=%s", card.id)
                _emit(
                    diagnostics,
                    sink,
                    Diagnostic(
                        kind=DiagnosticKind.MISSING_PRICE,
                        message=f"Price history key not found: ID={card.id}",
                        card_id=card.id,
                    ),
                )

        return diagnostics

    def extract_scryfall_info(
        self,
        tix_prices: Mapping[str, float],
        sink: DiagnosticSink | None = None,
    ) -> list[Diagnostic]:
        """
        Fill in the Scryfall price from an mtgo_id -> tix price map.

        Foil cards are skipped, Scryfall has no tix prices for them.
        Event tickets get a price of 1 tix.

        Returns:
            Diagnostics for every non-foil card without a Scryfall price.
        """
        diagnostics: list[Diagnostic] = []

        for card in self.cards:
            if card.foil:
                continue
            if card.id == EVENT_TICKET_ID:
                card.scryfall_price = EVENT_TICKET_PRICE
                continue
            price = tix_prices.get(card.id)
            if price is not None:
                card.scryfall_price = price
            else:
                logger.debug("Scryfall price not found: ID=%s", card.id)
                _emit(
                    diagnostics,
                    sink,
                    Diagnostic(
                        kind=DiagnosticKind.MISSING_SCRYFALL_PRICE,
                        message=f"Scryfall price not found: ID={card.id}",
                        card_id=card.id,
                    ),
                )

        return diagnostics

    # -------------------------------------------------------------------------
    # Quantities (memoized)
    # -------------------------------------------------------------------------

    def total_cards(self) -> int:
        """
        Total number of card copies in the collection.

        Computed on first call, then served from cache.

        Raises:
            QuantityError: If any card quantity is invalid
            ContractViolationError: If the total does not fit 32 bits
        """
        if self._total_quantity is None:
            self._memoize_card_quantities()
        assert self._total_quantity is not None
        return self._total_quantity

    def card_quantities(self) -> list[int]:
        """Per-card quantities in card order (cached like total_cards)."""
        if self._card_quantities is None:
            self._memoize_card_quantities()
        assert self._card_quantities is not None
        return list(self._card_quantities)

    def invalidate(self) -> None:
        """Drop cached quantities. Call after mutating cards in place."""
        self._total_quantity = None
        self._card_quantities = None

    def _memoize_card_quantities(self) -> None:
        quantities = [parse_quantity(card) for card in self.cards]
        total = sum(quantities)
        if total > MAX_TOTAL_QUANTITY:
            raise ContractViolationError(
                f"Total quantity {total} exceeds {MAX_TOTAL_QUANTITY}"
            )
        self._card_quantities = quantities
        self._total_quantity = total

    # -------------------------------------------------------------------------
    # JSON
    # -------------------------------------------------------------------------

    def to_json(self) -> str:
        """Serialize cards as a compact JSON array."""
        return _cards_adapter.dump_json(self.cards).decode()

    def to_json_pretty(self) -> str:
        """Serialize cards as an indented JSON array."""
        return _cards_adapter.dump_json(self.cards, indent=2).decode()

    def from_json(self, json_str: str | bytes) -> list[Diagnostic]:
        """
        Replace the cards with those decoded from a JSON array.

        All-or-nothing: on malformed input the error is logged, a
        MALFORMED_JSON diagnostic is returned and the current cards are
        kept untouched.
        """
        try:
            cards = _cards_adapter.validate_json(json_str)
        except ValidationError as e:
            logger.error("Failed to decode collection JSON: %s", e)
            return [
                Diagnostic(
                    kind=DiagnosticKind.MALFORMED_JSON,
                    message=f"Failed to decode collection JSON ({e.error_count()} errors)",
                )
            ]

        self.cards = cards
        self.invalidate()
        return []

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------

    def report(self) -> str:
        """One line per card with all fields."""
        return "\n".join(
            f"{c.id} {c.name}: Goatbots price={c.goatbots_price}, "
            f"Scryfall price={c.scryfall_price}, quantity={c.quantity}, "
            f"set={c.set}, foil={str(c.foil).lower()}, rarity={c.rarity}"
            for c in self.cards
        )

    def pretty_report(self) -> str:
        """Fixed-width table of the collection with a header row."""
        row = "{:<25}{:<23}{:<23}{:<11}{:<8}{:<10}{:<6}"
        lines = [
            row.format(
                "Name",
                "Goatbots price [tix]",
                "Scryfall price [tix]",
                "Quantity",
                "Foil",
                "Rarity",
                "Set",
            ),
            "",
        ]
        for c in self.cards:
            lines.append(
                row.format(
                    c.name,
                    c.goatbots_price,
                    c.scryfall_price,
                    c.quantity,
                    str(c.foil).lower(),
                    c.rarity,
                    c.set,
                )
            )
        return "\n".join(lines)
