"""Background job that checks the feeds for breaking news on a fixed interval."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Optional

from .core import Aggregator
from .dispatcher import NotificationDispatcher
from .models import Article, FetchMode

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SEC = 5 * 60


class Scheduler:
    def __init__(
        self,
        aggregator: Aggregator,
        dispatcher: NotificationDispatcher,
        *,
        interval_sec: float = DEFAULT_INTERVAL_SEC,
    ) -> None:
        self.aggregator = aggregator
        self.dispatcher = dispatcher
        self.interval_sec = interval_sec
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> Optional[Article]:
        """
        Light fetch (text only, fewer items) followed by a dispatch attempt.
        Errors are logged and swallowed so the loop keeps going.
        """
        try:
            articles = await self.aggregator.fetch(FetchMode.LIGHT)
            return await self.dispatcher.dispatch(articles)
        except Exception:
            logger.exception("Scheduled news check failed")
            return None

    async def _loop(self) -> None:
        while True:
            await self.run_once()
            await asyncio.sleep(self.interval_sec)

    def start(self) -> None:
        if self.running:
            return
        logger.info("Starting news scheduler (every %ss)", self.interval_sec)
        self._task = asyncio.get_running_loop().create_task(self._loop())

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
