"""
Contract violation errors.

These are raised when a trusted producer broke the archive format:
a malformed number inside a snapshot cell, a quantity that does not fit
the unsigned 16-bit range, or a history table with a broken header.

They are NOT used for missing reference data. Lookup misses during
enrichment are expected and reported as Diagnostic records instead
(see mtgoledger.models.diagnostic).
"""


class ContractViolationError(ValueError):
    """Base class for format violations that abort the current call."""


class CellFormatError(ContractViolationError):
    """Raised when a snapshot cell does not follow the cell notation."""

    def __init__(self, cell: str, reason: str):
        self.cell = cell
        self.reason = reason
        super().__init__(f"Malformed snapshot cell {cell!r}: {reason}")


class QuantityError(ContractViolationError):
    """Raised when a card quantity is not an unsigned integer <= 65535."""

    def __init__(self, card_id: str, quantity: str):
        self.card_id = card_id
        self.quantity = quantity
        super().__init__(f"Invalid quantity {quantity!r} for card ID={card_id}")


class TableFormatError(ContractViolationError):
    """Raised when a snapshot table header or row has the wrong shape."""
