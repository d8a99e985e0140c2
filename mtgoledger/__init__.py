"""mtgoledger: MTGO collection enrichment and price history archive."""
