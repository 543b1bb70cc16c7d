from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional

import aiohttp
import feedparser

from .exceptions import FeedFetchError
from .images import USER_AGENT
from .models import FeedSource, FetchResult

logger = logging.getLogger(__name__)

_ACCEPT = "application/rss+xml, application/atom+xml, application/xml;q=0.9, */*;q=0.8"


class FeedClient:
    """Fetches one RSS/Atom document over HTTP and parses it with feedparser."""

    def __init__(self, *, timeout_sec: float = 15.0, user_agent: str = USER_AGENT) -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout_sec)
        self._headers = {"User-Agent": user_agent, "Accept": _ACCEPT}

    async def _download(self, session: aiohttp.ClientSession, url: str) -> bytes:
        async with session.get(url, headers=self._headers, timeout=self._timeout,
                               allow_redirects=True) as resp:
            resp.raise_for_status()
            return await resp.read()

    async def fetch(self, url: str, session: Optional[aiohttp.ClientSession] = None) -> List[Dict[str, Any]]:
        """
        Fetch a single feed URL and return its entries.

        `session` is reused when given (one per aggregation pass); otherwise a
        session is opened just for this request.

        Raises FeedFetchError on network/timeout/HTTP issues or when the feed is
        malformed and yielded nothing usable.
        """
        try:
            if session is None:
                async with aiohttp.ClientSession() as own:
                    body = await self._download(own, url)
            else:
                body = await self._download(session, url)
        except asyncio.TimeoutError as e:
            raise FeedFetchError(f"Timed out fetching feed: {url}") from e
        except aiohttp.ClientError as e:
            raise FeedFetchError(f"Failed to fetch feed: {url} ({e})") from e

        feed = feedparser.parse(body)
        entries = getattr(feed, "entries", None)
        if not isinstance(entries, list):
            raise FeedFetchError(f"Feed has no entries: {url}")

        # Many real feeds are slightly off (bozo) but still parse; only give up when nothing came out
        if getattr(feed, "bozo", 0) and not entries:
            exc = getattr(feed, "bozo_exception", None)
            msg = f"Invalid RSS/Atom feed: {url}"
            if exc:
                msg += f" ({exc})"
            raise FeedFetchError(msg)
        return entries


async def fetch_source(
    client: FeedClient,
    source: FeedSource,
    limit: int,
    session: Optional[aiohttp.ClientSession] = None,
) -> FetchResult:
    """Fetch one source; failures are returned as an error result, never raised."""
    try:
        entries = await client.fetch(source.url, session=session)
    except Exception as e:
        logger.warning("Feed failed: %s (%s)", source.name, e)
        return FetchResult(source=source, error=str(e) or e.__class__.__name__)
    return FetchResult(source=source, entries=list(entries)[:limit])


async def fetch_many(
    client: FeedClient,
    sources: Iterable[FeedSource],
    limit: int,
    session: Optional[aiohttp.ClientSession] = None,
) -> List[FetchResult]:
    """
    Fetch all sources concurrently. One result per source, in source order.

    Failures on individual sources are isolated and never abort the batch.
    """
    return list(await asyncio.gather(*(fetch_source(client, s, limit, session) for s in sources)))
