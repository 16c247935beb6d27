"""
Fetch the raw CC-CEDICT text.

This module handles both online fetching (over HTTP) and local file reading
of the dictionary source. Either way the caller gets the complete text or a
LexiconLoadError; nothing is retried.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from ..errors import LexiconLoadError

logger = logging.getLogger("cedict-reader")

DEFAULT_TIMEOUT = 30.0


def is_remote_source(source: str) -> bool:
    """Whether the source string names an HTTP(S) resource."""
    return source.startswith(("http://", "https://"))


async def fetch_url(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """
    Download the dictionary text from a URL.

    Args:
        url: HTTP(S) URL of the dictionary file (e.g., an unpacked cedict_ts.u8)
        timeout: Request timeout in seconds

    Returns:
        The decoded response body

    Raises:
        LexiconLoadError: If the URL is invalid, the server is unreachable,
            times out or answers with a non-success status, or the body is
            not UTF-8
    """
    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(url, timeout=timeout, follow_redirects=True)

            if response.status_code == 404:
                raise LexiconLoadError(
                    f"Dictionary not found at {url}. Check CEDICT_SOURCE."
                )

            response.raise_for_status()
            text = response.content.decode("utf-8")

    except httpx.TimeoutException:
        raise LexiconLoadError(
            f"Timed out after {timeout}s fetching dictionary data from {url}"
        ) from None
    except httpx.HTTPStatusError as e:
        raise LexiconLoadError(
            f"Failed to fetch dictionary data from {url}: "
            f"HTTP {e.response.status_code} {e.response.reason_phrase}"
        ) from None
    except httpx.RequestError as e:
        raise LexiconLoadError(
            f"Failed to connect to {url}: {e}"
        ) from None
    except httpx.InvalidURL as e:
        raise LexiconLoadError(
            f"Invalid dictionary URL {url!r}: {e}. Check CEDICT_SOURCE."
        ) from None
    except UnicodeDecodeError as e:
        raise LexiconLoadError(
            f"Dictionary data from {url} is not valid UTF-8: {e}"
        ) from None

    logger.debug(f"Fetched {len(text)} characters of dictionary data from {url}")
    return text


def read_source_file(file_path: str | Path) -> str:
    """
    Read the dictionary text from a local UTF-8 file.

    Raises:
        LexiconLoadError: If the file is missing, unreadable or not UTF-8
    """
    path = Path(file_path)

    try:
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        raise LexiconLoadError(
            f"Dictionary file not found: {file_path}"
        ) from None
    except UnicodeDecodeError as e:
        raise LexiconLoadError(
            f"Dictionary file is not valid UTF-8: {e}"
        ) from None
    except OSError as e:
        raise LexiconLoadError(
            f"Failed to read dictionary file: {e}"
        ) from None

    logger.debug(f"Read {len(text)} characters of dictionary data from {path}")
    return text


async def fetch_source(source: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """
    Obtain the complete dictionary text from a URL or a file path.

    Raises:
        LexiconLoadError: If the source cannot be obtained
    """
    if is_remote_source(source):
        return await fetch_url(source, timeout)
    return read_source_file(source)
