"""SHA-256 derivation for the release archive."""

from __future__ import annotations

import hashlib
import logging
import urllib.error
import urllib.request

from .errors import ChecksumError

log = logging.getLogger(__name__)

CHUNK_SIZE = 1 << 16


def fetch_sha256(url: str, timeout: float = 60) -> str:
    """Download ``url`` and return the hex SHA-256 of its body.

    Raises:
        ChecksumError: On any network, HTTP or read failure.
    """
    log.info(f"Deriving sha256 from {url}")
    request = urllib.request.Request(url, headers={"User-Agent": "rulegen"})
    digest = hashlib.sha256()
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            while chunk := response.read(CHUNK_SIZE):
                digest.update(chunk)
    except (urllib.error.URLError, OSError) as e:
        raise ChecksumError(url, e) from e

    sha256 = digest.hexdigest()
    log.info(f"sha256 is {sha256}")
    return sha256
