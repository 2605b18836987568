"""
Feed fetcher.

Downloads the status feed with a single aiohttp GET. There is no retry:
any failure surfaces as a FeedFetchError for the caller to report.
"""

from __future__ import annotations

import asyncio
from typing import Dict

import aiohttp

from ghstatus.errors import FeedFetchError

_HEADERS: Dict[str, str] = {
    "Accept": "application/atom+xml, application/xml, text/xml",
}


async def fetch_feed(
    session: aiohttp.ClientSession,
    url: str,
    timeout: float = 15,
) -> str:
    """
    GET ``url`` and return the response body as text.

    Raises:
        FeedFetchError: on connection errors, timeouts, non-2xx status or a body
            that cannot be decoded.
    """
    try:
        async with session.get(
            url,
            headers=_HEADERS,
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as resp:
            resp.raise_for_status()
            return await resp.text()
    except aiohttp.ClientResponseError as exc:
        raise FeedFetchError(url, f"HTTP {exc.status} {exc.message}") from exc
    except asyncio.TimeoutError as exc:
        raise FeedFetchError(url, f"timed out after {timeout}s") from exc
    except aiohttp.ClientError as exc:
        raise FeedFetchError(url, str(exc) or exc.__class__.__name__) from exc
    except UnicodeDecodeError as exc:
        raise FeedFetchError(url, f"undecodable body: {exc.reason}") from exc
