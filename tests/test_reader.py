"""Tests for mapping sources."""

import http.client
import io
import urllib.error
import urllib.request
from pathlib import Path

import pytest

import ucm_charmap as ucm
from ucm_charmap.io.reader import fetch_mapping, load_mapping, resolve_path


class FakeResponse(io.BytesIO):
    """Minimal stand-in for an HTTP response."""

    def __init__(self, data: bytes, status: int = 200):
        super().__init__(data)
        self.status = status


class TestFileSources:
    """Tests for local files and file: locators."""

    def test_plain_path(self, euro_ucm_file: Path, euro_ucm: str) -> None:
        assert fetch_mapping(str(euro_ucm_file)) == euro_ucm.encode("ascii")

    def test_relative_file_locator(self, euro_ucm_file: Path) -> None:
        data = fetch_mapping("file:ascii-euro.ucm", base_dir=euro_ucm_file.parent)
        assert b"<U20AC>" in data

    def test_absolute_file_url(self, euro_ucm_file: Path) -> None:
        data = fetch_mapping(euro_ucm_file.as_uri())
        assert b"<U20AC>" in data

    def test_base_dir_from_environment(
        self, euro_ucm_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("UCM_CHARMAP_BASE_DIR", str(euro_ucm_file.parent))
        assert resolve_path("file:ascii-euro.ucm") == euro_ucm_file

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ucm.FetchError) as excinfo:
            fetch_mapping("file:missing.ucm", base_dir=tmp_path)
        assert excinfo.value.locator == "file:missing.ucm"
        assert "missing.ucm" in str(excinfo.value)

    def test_unsupported_scheme(self) -> None:
        with pytest.raises(ucm.FetchError):
            fetch_mapping("ftp://example.com/page.ucm")

    def test_load_mapping(self, euro_ucm_file: Path) -> None:
        mapping = load_mapping(str(euro_ucm_file))
        assert mapping[0x80] == '€'

    def test_load_mapping_reports_locator(self, tmp_path: Path) -> None:
        path = tmp_path / "short.ucm"
        path.write_text("<U0041> \\x41 |0\n")
        with pytest.raises(ucm.SourceFormatError) as excinfo:
            load_mapping(str(path))
        assert excinfo.value.locator == str(path)


class TestUrlSources:
    """Tests for HTTP(S) sources with urlopen patched out."""

    def test_download(self, monkeypatch: pytest.MonkeyPatch, euro_ucm: str) -> None:
        calls = []

        def fake_urlopen(url, timeout=None):
            calls.append((url, timeout))
            return FakeResponse(euro_ucm.encode("ascii"))

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
        mapping = load_mapping("https://example.com/ascii-euro.ucm")
        assert mapping[0x80] == '€'
        assert calls == [("https://example.com/ascii-euro.ucm", 30.0)]

    def test_timeout_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen = []

        def fake_urlopen(url, timeout=None):
            seen.append(timeout)
            return FakeResponse(b"")

        monkeypatch.setenv("UCM_CHARMAP_TIMEOUT", "2.5")
        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
        fetch_mapping("http://example.com/x.ucm")
        assert seen == [2.5]

    def test_http_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_urlopen(url, timeout=None):
            raise urllib.error.HTTPError(url, 404, "Not Found", {}, None)

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
        with pytest.raises(ucm.FetchError) as excinfo:
            fetch_mapping("https://example.com/missing.ucm")
        assert "404" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, urllib.error.HTTPError)

    def test_network_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_urlopen(url, timeout=None):
            raise urllib.error.URLError("no route to host")

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
        with pytest.raises(ucm.FetchError) as excinfo:
            fetch_mapping("https://example.com/page.ucm")
        assert excinfo.value.reason == "no route to host"

    def test_bad_status(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            urllib.request, "urlopen",
            lambda url, timeout=None: FakeResponse(b"", status=204),
        )
        with pytest.raises(ucm.FetchError):
            fetch_mapping("https://example.com/empty.ucm")


class TestMalformedUrls:
    """Malformed URLs and broken responses surface as FetchError."""

    @pytest.mark.parametrize("locator", [
        "http://host:abc/x.ucm",
        "http://[::1/x.ucm",
    ])
    def test_malformed_url(self, locator: str) -> None:
        with pytest.raises(ucm.FetchError) as excinfo:
            fetch_mapping(locator)
        assert excinfo.value.locator == locator

    def test_incomplete_read(self, monkeypatch: pytest.MonkeyPatch) -> None:
        class TruncatedResponse(FakeResponse):
            def read(self, *args):
                raise http.client.IncompleteRead(b"<U00", 100)

        monkeypatch.setattr(
            urllib.request, "urlopen",
            lambda url, timeout=None: TruncatedResponse(b""),
        )
        with pytest.raises(ucm.FetchError) as excinfo:
            fetch_mapping("https://example.com/truncated.ucm")
        assert isinstance(excinfo.value.__cause__, http.client.HTTPException)
