from __future__ import annotations

import asyncio
import dataclasses
import logging
import time
from typing import Callable, List, Optional, Sequence, Tuple

from .dedup import IdentityStore, article_identity
from .models import Article
from .notifier import DEFAULT_BODY, NotificationSender, build_payload
from .scoring import is_emergency, is_important, score

logger = logging.getLogger(__name__)

DEFAULT_COOLDOWN_SEC = 10 * 60


class NotificationDispatcher:
    """
    Sends at most one push per call: the highest-scoring important article not yet notified.

    Guarantees, for a single process:
    - an identity is notified at most once (the store survives restarts);
    - two sends are at least `cooldown_sec` apart, unless `emergency_override` is on
      and a candidate title carries an emergency keyword;
    - only the dispatched article is recorded, and only after the provider confirmed it,
      so runners-up and failed sends stay eligible for later runs.

    Filtering, sending and recording happen under one lock, so concurrent triggers
    cannot both pick the same article.
    """

    def __init__(
        self,
        store: IdentityStore,
        sender: NotificationSender,
        *,
        cooldown_sec: float = DEFAULT_COOLDOWN_SEC,
        emergency_override: bool = False,
        default_body: str = DEFAULT_BODY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.sender = sender
        self.cooldown_sec = cooldown_sec
        self.emergency_override = emergency_override
        self.default_body = default_body
        self._clock = clock
        self._lock = asyncio.Lock()
        self.last_sent_at: float = 0.0

    def candidates(self, articles: Sequence[Article]) -> List[Tuple[str, Article]]:
        """Scored (identity, article) pairs that are important and not yet notified, in input order."""
        out: List[Tuple[str, Article]] = []
        for a in articles:
            identity = article_identity(a)
            if identity in self.store:
                continue
            scored = dataclasses.replace(a, score=score(a))
            if is_important(scored.score):
                out.append((identity, scored))
        return out

    def _cooldown_active(self, now: float, candidates: Sequence[Tuple[str, Article]]) -> bool:
        if now - self.last_sent_at >= self.cooldown_sec:
            return False
        if self.emergency_override and any(is_emergency(a) for _, a in candidates):
            logger.info("Emergency news found; bypassing cooldown")
            return False
        return True

    async def dispatch(self, articles: Sequence[Article]) -> Optional[Article]:
        """Returns the article that was sent, or None when nothing was sent."""
        async with self._lock:
            candidates = self.candidates(articles)
            logger.info("Important news found: %d", len(candidates))
            if not candidates:
                return None

            now = self._clock()
            if self._cooldown_active(now, candidates):
                logger.info("Cooldown active, skipping push")
                return None

            # stable: ties keep input order
            identity, top = sorted(candidates, key=lambda c: c[1].score, reverse=True)[0]

            try:
                result = await self.sender.send(build_payload(top, self.default_body))
            except Exception as e:
                logger.error("Push failed for %r: %s", top.title, e)
                return None
            if not result.ok:
                logger.error("Push not delivered for %r: %s", top.title, result.error)
                return None

            self.store.add(identity)
            try:
                self.store.persist()
            except OSError as e:
                # still recorded in memory for this process
                logger.error("Could not persist identity store %s: %s", self.store.path, e)
            self.last_sent_at = now
            return top
