"""
GoatBots reference data parsers.

GoatBots publishes two JSON documents keyed by MTGO card ID:
- card definitions: {"47483": {"name": ..., "cardset": ..., "rarity": ..., "foil": 0}}
- price history:    {"47483": 0.03, ...}

Download: https://www.goatbots.com/download/
"""

from pathlib import Path

from pydantic import TypeAdapter

from mtgoledger.models.goatbots_card import GoatbotsCard

CardDefinitions = dict[str, GoatbotsCard]
PriceHistory = dict[str, float]

_card_definitions_adapter = TypeAdapter(CardDefinitions)
_price_history_adapter = TypeAdapter(PriceHistory)


def parse_card_definitions(json_text: str | bytes) -> CardDefinitions:
    """
    Parse a GoatBots card-definitions document.

    Raises:
        pydantic.ValidationError: If the document is not valid JSON or
            an entry is missing required fields
    """
    return _card_definitions_adapter.validate_json(json_text)


def parse_price_history(json_text: str | bytes) -> PriceHistory:
    """
    Parse a GoatBots price-history document.

    Raises:
        pydantic.ValidationError: If the document is not a mapping of
            card IDs to numbers
    """
    return _price_history_adapter.validate_json(json_text)


def load_card_definitions(path: Path) -> CardDefinitions:
    """Load card definitions from a JSON file."""
    return parse_card_definitions(path.read_bytes())


def load_price_history(path: Path) -> PriceHistory:
    """Load a price history from a JSON file."""
    return parse_price_history(path.read_bytes())
