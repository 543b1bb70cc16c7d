"""FastAPI application serving the aggregated news list."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Optional, Sequence

from fastapi import BackgroundTasks, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .cache import ResponseCache
from .config import Settings, configure_logging, load_settings
from .core import Aggregator
from .dedup import IdentityStore
from .dispatcher import NotificationDispatcher
from .fetcher import FeedClient
from .images import ImageResolver
from .models import Article, FetchMode
from .notifier import build_sender
from .scheduler import Scheduler

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Process-wide state shared by the request path and the scheduler."""
    settings: Settings
    cache: ResponseCache
    aggregator: Aggregator
    dispatcher: NotificationDispatcher
    scheduler: Scheduler


def build_state(
    settings: Settings,
    *,
    aggregator: Optional[Aggregator] = None,
    dispatcher: Optional[NotificationDispatcher] = None,
    cache: Optional[ResponseCache] = None,
) -> AppState:
    missing = settings.missing_credentials()
    if missing:
        logger.warning("Push credentials missing (%s); notifications will fail", ", ".join(missing))
    else:
        logger.info("OneSignal App ID: OK")

    if aggregator is None:
        aggregator = Aggregator(
            feed_client=FeedClient(timeout_sec=settings.feed_timeout_sec),
            image_resolver=ImageResolver(timeout_sec=settings.image_timeout_sec),
        )
    if dispatcher is None:
        dispatcher = NotificationDispatcher(
            IdentityStore(settings.identity_store_path).load(),
            build_sender(settings),
            cooldown_sec=settings.notify_cooldown_sec,
            emergency_override=settings.emergency_override,
        )
    if cache is None:
        cache = ResponseCache(settings.cache_window_sec)

    return AppState(
        settings=settings,
        cache=cache,
        aggregator=aggregator,
        dispatcher=dispatcher,
        scheduler=Scheduler(aggregator, dispatcher, interval_sec=settings.scheduler_interval_sec),
    )


def _payload(articles: Sequence[Article], cached: bool) -> dict:
    return {
        "status": "success",
        "cached": cached,
        "total": len(articles),
        "articles": [a.to_dict() for a in articles],
    }


async def _notify(dispatcher: NotificationDispatcher, articles: Sequence[Article]) -> None:
    try:
        await dispatcher.dispatch(articles)
    except Exception:
        logger.exception("Notification dispatch failed")


def create_app(
    settings: Optional[Settings] = None,
    *,
    aggregator: Optional[Aggregator] = None,
    dispatcher: Optional[NotificationDispatcher] = None,
    cache: Optional[ResponseCache] = None,
) -> FastAPI:
    settings = settings or load_settings()
    state = build_state(settings, aggregator=aggregator, dispatcher=dispatcher, cache=cache)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if state.settings.run_scheduler:
            state.scheduler.start()
        else:
            logger.info("Scheduler disabled on this instance")
        try:
            yield
        finally:
            await state.scheduler.stop()
            close = getattr(state.dispatcher.sender, "close", None)
            if close is not None:
                await close()

    app = FastAPI(title="News Push API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.news = state

    @app.get("/news")
    async def get_news(request: Request, background_tasks: BackgroundTasks):
        st: AppState = request.app.state.news
        try:
            entry = st.cache.get()
            if entry is not None:
                logger.info("Serving from cache")
                return _payload(entry.articles, cached=True)

            articles = await st.aggregator.fetch(FetchMode.FULL)
            entry = st.cache.put(articles)
            background_tasks.add_task(_notify, st.dispatcher, entry.articles)
            return _payload(entry.articles, cached=False)
        except Exception:
            logger.exception("Failed to fetch news")
            return JSONResponse(
                status_code=500,
                content={"status": "error", "message": "Failed to fetch news"},
            )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


def main() -> None:
    """Run the API server."""
    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
