from mtgoledger.history.card_history import CardHistory
from mtgoledger.history.collection_history import CollectionHistory

__all__ = ["CardHistory", "CollectionHistory"]
