from mtgoledger.parsers.delimited import split_columns, split_fields, split_rows
from mtgoledger.parsers.goatbots import (
    load_card_definitions,
    load_price_history,
    parse_card_definitions,
    parse_price_history,
)
from mtgoledger.parsers.scryfall import load_tix_prices, parse_tix_prices
from mtgoledger.parsers.snapshot_cell import (
    format_price,
    parse_cell,
    parse_cells,
    render_cell,
    render_cells,
)

__all__ = [
    "format_price",
    "load_card_definitions",
    "load_price_history",
    "load_tix_prices",
    "parse_card_definitions",
    "parse_cell",
    "parse_cells",
    "parse_price_history",
    "parse_tix_prices",
    "render_cell",
    "render_cells",
    "split_columns",
    "split_fields",
    "split_rows",
]
