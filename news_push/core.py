from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

import aiohttp
from dateutil import parser as dtparse

from .exceptions import AggregationError
from .fetcher import FeedClient, fetch_many
from .images import ImageResolver
from .models import Article, FeedSource, FetchMode, FetchResult
from .normalizer import embedded_image, to_article
from .parser import parse_entry
from .sources import FEEDS

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def sort_key(pub_date: str) -> datetime:
    """
    Publish date used for ordering, in UTC. Naive dates are taken as UTC; anything
    unparsable or out of range (such as a "+2500" offset) maps to the epoch so it
    sinks to the end of a newest-first list.
    """
    if not pub_date:
        return EPOCH
    try:
        dt = dtparse.parse(pub_date)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError, TypeError):
        return EPOCH


def sort_articles(articles: Sequence[Article]) -> List[Article]:
    # sorted() is stable, so equal (and invalid) dates keep their input order
    return sorted(articles, key=lambda a: sort_key(a.pub_date), reverse=True)


class Aggregator:
    """
    High-level API: fetch all configured feeds and return one list of Article.

    Pipeline: fetch (concurrent, per-source isolation) → parse → normalize
    (+ image lookup in FULL mode) → concatenate → sort (newest first)

    Each pass opens one aiohttp session shared by every feed and page request of
    that pass, and closes it when the pass ends.
    """

    def __init__(
        self,
        sources: Sequence[FeedSource] = FEEDS,
        *,
        feed_client: Optional[FeedClient] = None,
        image_resolver: Optional[ImageResolver] = None,
    ) -> None:
        self.sources = tuple(sources)
        self.feed_client = feed_client or FeedClient()
        self.image_resolver = image_resolver or ImageResolver()

    async def _normalize_one(self, raw, source: FeedSource, resolve_images: bool,
                             session: aiohttp.ClientSession) -> Article:
        entry = parse_entry(raw)
        image = ""
        if resolve_images and not embedded_image(entry) and entry["link"]:
            image = await self.image_resolver.resolve(entry["link"], session=session)
        return to_article(entry, source, image=image)

    async def _normalize(self, result: FetchResult, resolve_images: bool,
                         session: aiohttp.ClientSession) -> List[Article]:
        articles = await asyncio.gather(
            *(self._normalize_one(e, result.source, resolve_images, session) for e in result.entries),
            return_exceptions=True,
        )
        out: List[Article] = []
        for a in articles:
            if isinstance(a, BaseException):
                # parse_entry/to_article degrade per field; this only guards the unexpected
                logger.warning("Skipping malformed item from %s: %s", result.source.name, a)
                continue
            out.append(a)
        return out

    async def fetch(self, mode: FetchMode = FetchMode.FULL) -> List[Article]:
        async with aiohttp.ClientSession() as session:
            results = await fetch_many(self.feed_client, self.sources, mode.limit, session=session)

            failed = [r for r in results if not r.ok]
            if self.sources and len(failed) == len(results):
                raise AggregationError(f"All {len(failed)} feeds failed")

            per_source = await asyncio.gather(
                *(self._normalize(r, mode.resolve_images, session) for r in results if r.ok)
            )
        articles = [a for batch in per_source for a in batch]

        logger.info(
            "Aggregated %d articles from %d/%d feeds (%s)",
            len(articles), len(results) - len(failed), len(results), mode.name.lower(),
        )
        return sort_articles(articles)
