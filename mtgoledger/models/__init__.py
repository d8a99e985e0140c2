from mtgoledger.models.card import Card
from mtgoledger.models.collection import Collection, parse_quantity
from mtgoledger.models.diagnostic import Diagnostic, DiagnosticKind, DiagnosticSink
from mtgoledger.models.goatbots_card import GoatbotsCard
from mtgoledger.models.price_point import MAX_QUANTITY, PricePoint
from mtgoledger.models.rarity import Rarity

__all__ = [
    "Card",
    "Collection",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "GoatbotsCard",
    "MAX_QUANTITY",
    "PricePoint",
    "Rarity",
    "parse_quantity",
]
