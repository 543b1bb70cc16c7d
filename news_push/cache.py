from __future__ import annotations

import time
from typing import Callable, Iterable, Optional

from .models import Article, CacheEntry

DEFAULT_WINDOW_SEC = 30 * 60


class ResponseCache:
    """
    Last aggregated article list with its fetch time.

    The entry is replaced wholesale on every `put`; readers holding the previous
    entry keep a consistent snapshot.
    """

    def __init__(self, window_sec: float = DEFAULT_WINDOW_SEC, *, clock: Callable[[], float] = time.time) -> None:
        self.window_sec = window_sec
        self._clock = clock
        self._entry: Optional[CacheEntry] = None

    def get(self) -> Optional[CacheEntry]:
        """Current entry if still fresh, None when empty or stale."""
        entry = self._entry
        if entry is None:
            return None
        if self._clock() - entry.fetched_at < self.window_sec:
            return entry
        return None

    def put(self, articles: Iterable[Article]) -> CacheEntry:
        entry = CacheEntry(articles=tuple(articles), fetched_at=self._clock())
        self._entry = entry
        return entry

    def clear(self) -> None:
        self._entry = None
