"""
Scryfall bulk data loader.

Builds an mtgo_id -> tix price lookup from Scryfall's default-cards
bulk data, for the Scryfall side of collection enrichment.

Bulk data: https://scryfall.com/docs/api/bulk-data
"""

import json
from pathlib import Path
from typing import Any


def _tix_price(card: dict[str, Any]) -> float | None:
    prices = card.get("prices") or {}
    tix = prices.get("tix")
    if tix is None:
        return None
    return float(tix)


def parse_tix_prices(json_text: str | bytes) -> dict[str, float]:
    """
    Build mtgo_id -> tix price mapping from bulk data text.

    Args:
        json_text: Scryfall bulk JSON (array of card objects)

    Returns:
        Dict mapping MTGO card IDs (as text, to match collection IDs)
        to tix prices. Cards without an mtgo_id or tix price are skipped.
    """
    mapping: dict[str, float] = {}

    for card in json.loads(json_text):
        mtgo_id = card.get("mtgo_id")
        if mtgo_id is None:
            continue
        price = _tix_price(card)
        if price is not None:
            mapping[str(mtgo_id)] = price

    return mapping


def load_tix_prices(bulk_data_path: Path) -> dict[str, float]:
    """
    Build mtgo_id -> tix price mapping from a bulk data file.

    Args:
        bulk_data_path: Path to downloaded Scryfall bulk JSON
    """
    with open(bulk_data_path, encoding="utf-8") as f:
        return parse_tix_prices(f.read())
