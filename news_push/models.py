from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class FeedSource:
    """A configured RSS/Atom feed. `profile` is the source logo used as fallback image."""
    name: str
    url: str
    profile: str = ""


@dataclass(frozen=True)
class Article:
    """
    Stable public model representing a normalized article.

    WARNING: Do not change fields lightly. `to_dict()` is what the news clients consume.
    """
    source: str
    title: str
    description: str
    link: str
    image: str
    pub_date: str
    category: str = "general"
    profile: str = ""
    score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "image": self.image,
            "pubDate": self.pub_date,
            "category": self.category,
            "profile": self.profile,
        }


class FetchMode(Enum):
    # value: items taken per source
    FULL = 10
    LIGHT = 5

    @property
    def limit(self) -> int:
        return self.value

    @property
    def resolve_images(self) -> bool:
        return self is FetchMode.FULL


@dataclass
class FetchResult:
    """Outcome of fetching one source: raw entries on success, an error message otherwise."""
    source: FeedSource
    entries: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class CacheEntry:
    articles: Tuple[Article, ...]
    fetched_at: float


@dataclass(frozen=True)
class SendResult:
    ok: bool
    notification_id: Optional[str] = None
    error: Optional[str] = None
