"""
Diagnostics for expected, recoverable conditions.

A reference source lacking a card, or a malformed collection JSON blob,
does not stop a batch operation. Each such event becomes a Diagnostic
record that is returned to the caller and optionally pushed to an
injected sink.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(str, Enum):
    """Classification of recoverable conditions."""

    MISSING_CARD_DEFINITION = "missing_card_definition"
    MISSING_PRICE = "missing_price"
    MISSING_SCRYFALL_PRICE = "missing_scryfall_price"
    MALFORMED_JSON = "malformed_json"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single recoverable condition."""

    kind: DiagnosticKind
    message: str
    card_id: str | None = None


DiagnosticSink = Callable[[Diagnostic], None]
