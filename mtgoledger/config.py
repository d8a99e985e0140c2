from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MTGOLEDGER_")

    app_name: str = "mtgoledger"
    log_level: str = "INFO"

    # Managed directory for collection snapshots and the history table
    data_dir: Path = Path("mtgoledger-data")

    goatbots_price_history_url: str = "https://www.goatbots.com/download/price-history.zip"
    goatbots_card_definitions_url: str = (
        "https://www.goatbots.com/download/card-definitions.zip"
    )
    http_timeout_seconds: float = 60.0


settings = Settings()


# =============================================================================
# ARCHIVE LAYOUT
# =============================================================================

# Collection snapshots are saved as <prefix>_<timestamp>.json.gz
COLLECTION_SNAPSHOT_PREFIX = "mtgo-cards"

# Timestamp format used in snapshot filenames and history column labels
TIMESTAMP_FORMAT = "%Y-%m-%dT%H%M%SZ"

HISTORY_FILENAME = "collection-history.csv.gz"
