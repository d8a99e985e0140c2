"""Tests for the GoatBots downloader (mocked HTTP)."""

import io
import zipfile

import httpx
import pytest
import respx

from mtgoledger.config import settings
from mtgoledger.services.goatbots_client import (
    GoatbotsDownloadError,
    download_json,
    download_price_history,
    unzip_first_member,
)

URL = "https://example.com/download/price-history.zip"


def make_zip(name: str, content: str) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr(name, content)
    return buffer.getvalue()


class TestUnzip:
    def test_reads_first_member(self) -> None:
        assert unzip_first_member(make_zip("price-history.txt", '{"348": 419.99}')) == (
            '{"348": 419.99}'
        )

    def test_not_a_zip(self) -> None:
        with pytest.raises(GoatbotsDownloadError, match="Not a zip archive"):
            unzip_first_member(b"plain bytes")

    def test_empty_zip(self) -> None:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w"):
            pass

        with pytest.raises(GoatbotsDownloadError, match="empty"):
            unzip_first_member(buffer.getvalue())


class TestDownload:
    @respx.mock
    def test_downloads_and_extracts(self) -> None:
        respx.get(URL).mock(
            return_value=httpx.Response(200, content=make_zip("p.json", '{"1": 1.0}'))
        )

        assert download_json(URL) == '{"1": 1.0}'

    @respx.mock
    def test_http_error_is_wrapped(self) -> None:
        respx.get(URL).mock(return_value=httpx.Response(404))

        with pytest.raises(GoatbotsDownloadError, match="HTTP 404"):
            download_json(URL)

    @respx.mock
    def test_network_error_is_wrapped(self) -> None:
        respx.get(URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(GoatbotsDownloadError, match="connection refused"):
            download_json(URL)

    @respx.mock
    def test_price_history_uses_configured_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "goatbots_price_history_url", URL)
        route = respx.get(URL).mock(
            return_value=httpx.Response(200, content=make_zip("p.json", "{}"))
        )

        assert download_price_history() == "{}"
        assert route.called
