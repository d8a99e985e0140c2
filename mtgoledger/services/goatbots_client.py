"""
Download GoatBots reference data.

GoatBots publishes its price history and card definitions as zip
archives holding a single JSON document each.

Usage:
    text = download_price_history()
    prices = parse_price_history(text)
"""

import io
import logging
import zipfile

import httpx

from mtgoledger.config import settings

logger = logging.getLogger(__name__)


class GoatbotsDownloadError(Exception):
    """Raised when a GoatBots download or archive extraction fails."""

    pass


def unzip_first_member(data: bytes) -> str:
    """
    Read the first member of a zip archive as UTF-8 text.

    Raises:
        GoatbotsDownloadError: If data is not a zip archive or it is empty
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            names = archive.namelist()
            if not names:
                raise GoatbotsDownloadError("Zip archive is empty")
            return archive.read(names[0]).decode("utf-8")
    except zipfile.BadZipFile as e:
        raise GoatbotsDownloadError(f"Not a zip archive: {e}") from e


def download_json(url: str, *, timeout: float | None = None) -> str:
    """
    Download a GoatBots zip archive and return the JSON text inside.

    Args:
        url: Archive URL
        timeout: Request timeout in seconds, defaults to settings

    Raises:
        GoatbotsDownloadError: If the request or extraction fails
    """
    if timeout is None:
        timeout = settings.http_timeout_seconds

    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise GoatbotsDownloadError(
            f"Failed to download {url}: HTTP {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        raise GoatbotsDownloadError(f"Failed to download {url}: {e}") from e

    logger.info("Downloaded %d bytes from %s", len(response.content), url)
    return unzip_first_member(response.content)


def download_price_history() -> str:
    """Download the GoatBots price history JSON."""
    return download_json(settings.goatbots_price_history_url)


def download_card_definitions() -> str:
    """Download the GoatBots card definitions JSON."""
    return download_json(settings.goatbots_card_definitions_url)
