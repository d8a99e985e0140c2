"""
Enrich a collection and append it to the price history archive.

Reads a collection JSON export, joins it with GoatBots (and optionally
Scryfall) reference data, saves the enriched collection as a timestamped
gzipped JSON file and adds a snapshot column to the history table.

Usage:
    python -m mtgoledger.jobs.update_history --collection cards.json \
        --card-definitions card-definitions.json --price-history price-history.json
"""

import argparse
import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from pathlib import Path

from mtgoledger.config import COLLECTION_SNAPSHOT_PREFIX, HISTORY_FILENAME, settings
from mtgoledger.history.collection_history import CollectionHistory
from mtgoledger.models.collection import Collection
from mtgoledger.models.goatbots_card import GoatbotsCard
from mtgoledger.parsers.goatbots import (
    load_card_definitions,
    load_price_history,
    parse_card_definitions,
    parse_price_history,
)
from mtgoledger.parsers.scryfall import load_tix_prices
from mtgoledger.services.archive import (
    compress,
    decompress,
    format_timestamp,
    timestamped_filename,
)
from mtgoledger.services.goatbots_client import download_card_definitions, download_price_history

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read a text file, transparently decompressing ".gz" files."""
    data = path.read_bytes()
    if path.suffix == ".gz":
        data = decompress(data)
    return data.decode("utf-8")


def load_history(path: Path) -> CollectionHistory:
    """Load the history table, or start an empty one if none exists."""
    if not path.exists():
        logger.info("No history at %s, starting a new one", path)
        return CollectionHistory()
    return CollectionHistory.from_csv_text(read_text(path))


def update_history(
    collection: Collection,
    card_definitions: Mapping[str, GoatbotsCard],
    price_history: Mapping[str, float],
    data_dir: Path,
    *,
    tix_prices: Mapping[str, float] | None = None,
    when: datetime | None = None,
) -> CollectionHistory:
    """
    Enrich a collection, archive it and extend the history table.

    Args:
        collection: Collection to enrich in place
        card_definitions: GoatBots card definitions keyed by card ID
        price_history: GoatBots prices keyed by card ID
        data_dir: Directory holding snapshots and the history table
        tix_prices: Optional Scryfall tix prices keyed by card ID
        when: Snapshot timestamp, defaults to now (UTC)

    Returns:
        The updated history (already written to disk).

    Raises:
        ContractViolationError: If a quantity, card ID or the stored history
            is malformed. Neither file is written in that case.
    """
    if when is None:
        when = datetime.now(UTC)
    data_dir.mkdir(parents=True, exist_ok=True)

    diagnostics = collection.extract_goatbots_info(card_definitions, price_history)
    if tix_prices is not None:
        diagnostics += collection.extract_scryfall_info(tix_prices)

    # Nothing is written until every step that can raise has run
    total_cards = collection.total_cards()
    history_path = data_dir / HISTORY_FILENAME
    history = load_history(history_path)
    history.add_snapshot(format_timestamp(when), collection.cards)
    snapshot_data = compress(collection.to_json().encode("utf-8"))
    history_data = compress(history.to_csv_text().encode("utf-8"))

    snapshot_path = data_dir / f"{timestamped_filename(COLLECTION_SNAPSHOT_PREFIX, when)}.json.gz"
    snapshot_path.write_bytes(snapshot_data)
    history_path.write_bytes(history_data)

    logger.info(
        "collection_history_updated",
        extra={
            "snapshot": snapshot_path.name,
            "unique_cards": collection.size(),
            "total_cards": total_cards,
            "diagnostic_count": len(diagnostics),
            "snapshot_count": len(history.timestamps),
        },
    )
    return history


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Update the MTGO collection price history")
    parser.add_argument(
        "--collection",
        type=Path,
        required=True,
        help="Collection JSON (array of cards, optionally .gz)",
    )
    parser.add_argument(
        "--card-definitions",
        type=Path,
        help="GoatBots card definitions JSON (downloaded if omitted)",
    )
    parser.add_argument(
        "--price-history",
        type=Path,
        help="GoatBots price history JSON (downloaded if omitted)",
    )
    parser.add_argument(
        "--scryfall",
        type=Path,
        help="Scryfall default-cards bulk JSON (optional)",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.data_dir,
        help=f"Archive directory (default: {settings.data_dir})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    collection = Collection.from_json_str(read_text(args.collection))

    if args.card_definitions:
        card_definitions = load_card_definitions(args.card_definitions)
    else:
        card_definitions = parse_card_definitions(download_card_definitions())

    if args.price_history:
        price_history = load_price_history(args.price_history)
    else:
        price_history = parse_price_history(download_price_history())

    tix_prices = load_tix_prices(args.scryfall) if args.scryfall else None

    history = update_history(
        collection,
        card_definitions,
        price_history,
        args.data_dir,
        tix_prices=tix_prices,
    )
    print(f"History holds {history.size()} cards over {len(history.timestamps)} snapshots")
    print(collection.pretty_report())


if __name__ == "__main__":
    main()
