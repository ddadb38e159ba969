import pytest
import requests

from vttthumbs import downloader
from vttthumbs.downloader import CueFetchError, CueFileDownloader, fetch_cue_file


class _Response:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def test_fetch_over_http(monkeypatch):
    calls = []

    def fake_get(url, timeout, verify):
        calls.append((url, timeout, verify))
        return _Response("WEBVTT\n")

    monkeypatch.setattr(downloader.requests, "get", fake_get)

    assert fetch_cue_file("https://example.com/t.vtt", timeout=5) == "WEBVTT\n"
    assert calls == [("https://example.com/t.vtt", 5, True)]


def test_protocol_relative_url_uses_https(monkeypatch):
    urls = []
    monkeypatch.setattr(
        downloader.requests, "get",
        lambda url, timeout, verify: urls.append(url) or _Response("")
    )

    fetch_cue_file("//cdn.example.com/t.vtt")
    assert urls == ["https://cdn.example.com/t.vtt"]


def test_http_error_raises_fetch_error(monkeypatch):
    monkeypatch.setattr(
        downloader.requests, "get",
        lambda url, timeout, verify: _Response("", status_code=404)
    )

    with pytest.raises(CueFetchError):
        fetch_cue_file("https://example.com/missing.vtt")


def test_timeout_raises_fetch_error(monkeypatch):
    def fake_get(url, timeout, verify):
        raise requests.Timeout("timed out")

    monkeypatch.setattr(downloader.requests, "get", fake_get)

    with pytest.raises(CueFetchError):
        CueFileDownloader(timeout=1)("https://example.com/slow.vtt")


def test_local_file(tmp_path):
    path = tmp_path / "thumbs.vtt"
    path.write_text("WEBVTT\n", encoding="utf-8")
    assert CueFileDownloader().fetch(str(path)) == "WEBVTT\n"
