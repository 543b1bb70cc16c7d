from typing import Any, Dict, List

import pytest

from news_push.exceptions import FeedFetchError
from news_push.models import Article, SendResult


class FakeFeedClient:
    """Serves canned entries per URL; a URL mapped to an exception raises it."""

    def __init__(self, feeds: Dict[str, Any]) -> None:
        self.feeds = feeds
        self.calls: List[str] = []
        self.sessions: List[Any] = []

    async def fetch(self, url: str, session: Any = None) -> List[Dict[str, Any]]:
        self.calls.append(url)
        self.sessions.append(session)
        value = self.feeds.get(url)
        if value is None:
            raise FeedFetchError(f"Failed to fetch feed: {url}")
        if isinstance(value, Exception):
            raise value
        return list(value)


class FakeImageResolver:
    def __init__(self, images: Dict[str, str] = None) -> None:
        self.images = images or {}
        self.calls: List[str] = []
        self.sessions: List[Any] = []

    async def resolve(self, url: str, session: Any = None) -> str:
        self.calls.append(url)
        self.sessions.append(session)
        return self.images.get(url, "")


class FakeSender:
    def __init__(self, ok: bool = True, raises: Exception = None) -> None:
        self.ok = ok
        self.raises = raises
        self.sent: List[Dict[str, Any]] = []

    async def send(self, payload: Dict[str, Any]) -> SendResult:
        self.sent.append(payload)
        if self.raises is not None:
            raise self.raises
        if not self.ok:
            return SendResult(ok=False, error="provider down")
        return SendResult(ok=True, notification_id=f"n-{len(self.sent)}")


class FakeClock:
    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_article(title: str = "title", description: str = "", pub_date: str = "2024-01-01T00:00:00Z",
                 link: str = "https://x/1", **kwargs) -> Article:
    return Article(
        source=kwargs.pop("source", "Test"),
        title=title,
        description=description,
        link=link,
        image=kwargs.pop("image", ""),
        pub_date=pub_date,
        **kwargs,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sender() -> FakeSender:
    return FakeSender()
