"""Tests for archive checksum derivation."""

import hashlib
import io
import urllib.error

import pytest

from rulegen.lib.checksum import fetch_sha256
from rulegen.lib.errors import ChecksumError


def test_fetch_sha256_hashes_body(monkeypatch):
    body = b"archive" * 20000
    requests = []

    def fake_urlopen(request, timeout):
        requests.append(request)
        return io.BytesIO(body)

    monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)

    assert fetch_sha256("https://example.test/a.tar.gz") == hashlib.sha256(body).hexdigest()
    assert requests[0].full_url == "https://example.test/a.tar.gz"
    assert requests[0].get_header("User-agent") == "rulegen"


def test_fetch_sha256_network_error(monkeypatch):
    def fake_urlopen(request, timeout):
        raise urllib.error.URLError("no route to host")

    monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)

    with pytest.raises(ChecksumError) as exc_info:
        fetch_sha256("https://example.test/a.tar.gz")
    assert "https://example.test/a.tar.gz" in exc_info.value.message
    assert exc_info.value.exit_code == 1
