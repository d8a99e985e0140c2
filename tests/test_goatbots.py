from pathlib import Path

import pytest
from pydantic import ValidationError

from mtgoledger.models.goatbots_card import GoatbotsCard
from mtgoledger.parsers.goatbots import (
    load_card_definitions,
    load_price_history,
    parse_card_definitions,
    parse_price_history,
)

FIXTURES = Path(__file__).parent / "fixtures"


class TestCardDefinitions:
    def test_load_small_file(self) -> None:
        cards = load_card_definitions(FIXTURES / "card-defs-small-5cards.json")

        assert len(cards) == 5
        assert cards["47483"] == GoatbotsCard(
            name="Gruul Charm", cardset="GTC", rarity="Uncommon", foil=0
        )
        assert cards["348"] == GoatbotsCard(name="Black Lotus", cardset="1E", rarity="Rare", foil=1)

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_card_definitions('{"1": {"name": "Event Ticket"}}')


class TestPriceHistory:
    def test_load_small_file(self) -> None:
        prices = load_price_history(FIXTURES / "price-hist-small-5cards.json")

        assert len(prices) == 5
        assert prices["112348"] == 0.003
        assert prices["40516"] == 1.03
        assert prices["348"] == 419.99

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ValidationError):
            parse_price_history("[1, 2, 3]")
