"""
news_push

Aggregates Nepali news RSS feeds into one JSON article list and pushes the most
important unseen story to subscribers.

Core ideas:
- Input: RSS/Atom feed URLs (see `news_push.sources.FEEDS`)
- Process: fetch (concurrent) → parse → normalize → sort (newest first)
- Output: List[Article], served by `GET /news` behind a 30 minute cache
- Notifications: score → skip already-notified → cooldown → send the top story

Example
-------
import asyncio
from news_push import Aggregator, FetchMode

articles = asyncio.run(Aggregator().fetch(FetchMode.LIGHT))

for a in articles:
    print(a.pub_date, a.source, a.title)
"""
from .models import Article, FeedSource, FetchMode, SendResult
from .core import Aggregator
from .cache import ResponseCache
from .dedup import IdentityStore, article_identity
from .dispatcher import NotificationDispatcher
from .scheduler import Scheduler

__all__ = [
    "Article",
    "FeedSource",
    "FetchMode",
    "SendResult",
    "Aggregator",
    "ResponseCache",
    "IdentityStore",
    "article_identity",
    "NotificationDispatcher",
    "Scheduler",
]
