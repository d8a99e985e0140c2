"""
Archive helpers: gzip byte streams and timestamped filenames.

The collection and history code never touches the filesystem; callers
use these helpers to persist the text they produce.
"""

import gzip
import logging
from datetime import UTC, datetime
from pathlib import Path

from mtgoledger.config import TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)

# Length of a rendered timestamp, e.g. "2023-11-06T083944Z"
_TIMESTAMP_LEN = 18


def compress(data: bytes) -> bytes:
    """Gzip-compress bytes at the highest compression level."""
    return gzip.compress(data, compresslevel=9)


def decompress(data: bytes) -> bytes:
    """
    Decompress gzip bytes.

    Raises:
        gzip.BadGzipFile: If data is not gzip
        EOFError: If the stream is truncated
    """
    return gzip.decompress(data)


def format_timestamp(when: datetime) -> str:
    """Render a timestamp as used in filenames and history columns."""
    return when.astimezone(UTC).strftime(TIMESTAMP_FORMAT)


def timestamped_filename(prefix: str, when: datetime | None = None) -> str:
    """
    Build "<prefix>_<YYYY-MM-DDThhmmssZ>".

    Args:
        prefix: Filename prefix, e.g. "mtgo-cards"
        when: Timestamp, defaults to now (UTC)
    """
    if when is None:
        when = datetime.now(UTC)
    return f"{prefix}_{format_timestamp(when)}"


def files_with_timestamp(directory: Path) -> list[tuple[Path, datetime]]:
    """
    List files whose name ends with a timestamp, oldest first.

    Files ending in ".json.gz" after the timestamp are included.
    Names that end in "Z" but do not hold a valid timestamp are skipped.
    """
    files: list[tuple[Path, datetime]] = []

    for path in directory.iterdir():
        if not path.is_file():
            continue
        stem = path.name.removesuffix(".gz").removesuffix(".json")
        if not stem.endswith("Z") or len(stem) < _TIMESTAMP_LEN:
            continue
        try:
            timestamp = datetime.strptime(stem[-_TIMESTAMP_LEN:], TIMESTAMP_FORMAT)
        except ValueError:
            logger.debug("Skipping file without timestamp: %s", path.name)
            continue
        files.append((path, timestamp.replace(tzinfo=UTC)))

    files.sort(key=lambda item: item[1])
    return files
