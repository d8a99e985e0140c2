"""
mtgoledger services.

Caller-side collaborators: reference data download and archive I/O.
"""

from mtgoledger.services.archive import (
    compress,
    decompress,
    files_with_timestamp,
    format_timestamp,
    timestamped_filename,
)
from mtgoledger.services.goatbots_client import (
    GoatbotsDownloadError,
    download_card_definitions,
    download_json,
    download_price_history,
    unzip_first_member,
)

__all__ = [
    "GoatbotsDownloadError",
    "compress",
    "decompress",
    "download_card_definitions",
    "download_json",
    "download_price_history",
    "files_with_timestamp",
    "format_timestamp",
    "timestamped_filename",
    "unzip_first_member",
]
