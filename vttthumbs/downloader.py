"""
Cue file downloader for vttthumbs.

Fetches thumbnail cue files over HTTP(S), or reads them from disk when
the source is a local path.
"""

import logging
import os

import requests

logger = logging.getLogger(__name__)


class CueFetchError(Exception):
    """Raised when a cue file cannot be fetched."""


def fetch_cue_file(url: str, timeout: int = 30, verify_ssl: bool = True) -> str:
    """
    Fetch the content of a thumbnail cue file.

    Args:
        url: URL of the cue file, or a local path
        timeout: Request timeout in seconds (default: 30)
        verify_ssl: Whether to verify SSL certificates (default: True)

    Returns:
        Cue file content as string

    Raises:
        CueFetchError: If the request or the file read fails
    """
    if '//' not in url and os.path.exists(url):
        logger.info(f"Reading thumbnail cues from: {url}")
        try:
            with open(url, 'r', encoding='utf-8') as f:
                return f.read()
        except IOError as e:
            logger.error(f"Failed to read cue file {url}: {str(e)}")
            raise CueFetchError(f"Cue file read failed: {str(e)}") from e

    if url.startswith('//'):
        url = f"https:{url}"

    try:
        logger.info(f"Downloading thumbnail cues from: {url[:100]}")
        response = requests.get(url, timeout=timeout, verify=verify_ssl)
        response.raise_for_status()
        return response.text
    except requests.RequestException as e:
        logger.error(f"Failed to download cue file from {url[:100]}: {str(e)}")
        raise CueFetchError(f"Cue file download failed: {str(e)}") from e


class CueFileDownloader:
    """Callable fetcher bound to a timeout and TLS setting."""

    def __init__(self, timeout: int = 30, verify_ssl: bool = True):
        self.timeout = timeout
        self.verify_ssl = verify_ssl

    def fetch(self, url: str) -> str:
        return fetch_cue_file(url, timeout=self.timeout, verify_ssl=self.verify_ssl)

    __call__ = fetch
