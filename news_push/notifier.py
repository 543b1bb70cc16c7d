from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

import aiohttp

from .config import Settings
from .exceptions import NotificationError
from .models import Article, SendResult

logger = logging.getLogger(__name__)

ONESIGNAL_API_URL = "https://onesignal.com/api/v1/notifications"
DEFAULT_BODY = "ताजा महत्वपूर्ण समाचार"


class NotificationSender(Protocol):
    async def send(self, payload: Dict[str, Any]) -> SendResult:  # pragma: no cover - interface
        ...


def build_payload(article: Article, default_body: str = DEFAULT_BODY) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "title": article.title,
        "body": article.description or default_body,
        "url": article.link,
    }
    if article.image:
        payload["image"] = article.image
    return payload


class NullSender:
    """Used when push credentials are missing: every send is reported as failed."""

    async def send(self, payload: Dict[str, Any]) -> SendResult:
        logger.error("Push provider not configured; dropping notification: %s", payload.get("title"))
        return SendResult(ok=False, error="push provider not configured")

    async def close(self) -> None:
        return None


class OneSignalSender:
    """
    Sends a push to all subscribers of a OneSignal app through its REST API.

    The sender owns one aiohttp session, opened on first use and released by
    `close()`. A caller-provided `session` is used as-is and never closed here.
    """

    def __init__(
        self,
        *,
        app_id: Optional[str],
        rest_key: Optional[str],
        timeout_sec: float = 10.0,
        api_url: str = ONESIGNAL_API_URL,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self._app_id = app_id
        self._rest_key = rest_key
        self._timeout = aiohttp.ClientTimeout(total=timeout_sec)
        self._api_url = api_url
        self._session = session
        self._owns_session = session is None

    def _request_body(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "app_id": self._app_id,
            "headings": {"en": payload["title"]},
            "contents": {"en": payload.get("body") or DEFAULT_BODY},
            "included_segments": ["All"],
            "url": payload.get("url"),
        }
        image = payload.get("image")
        if image:
            body["big_picture"] = image
            body["chrome_web_image"] = image
            body["ios_attachments"] = {"image": image}
        return body

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def _post(self, body: Dict[str, Any]) -> Dict[str, Any]:
        headers = {
            "Authorization": f"Basic {self._rest_key}",
            "Content-Type": "application/json; charset=utf-8",
        }
        session = self._get_session()
        async with session.post(self._api_url, json=body, headers=headers, timeout=self._timeout) as resp:
            if resp.status >= 400:
                text = await resp.text(errors="replace")
                raise NotificationError(f"OneSignal HTTP {resp.status}: {text[:200]}")
            data = await resp.json(content_type=None)
        if not isinstance(data, dict):
            raise NotificationError(f"Unexpected OneSignal response: {data!r}")
        if data.get("errors"):
            raise NotificationError(f"OneSignal rejected notification: {data['errors']}")
        return data

    async def send(self, payload: Dict[str, Any]) -> SendResult:
        if not self._app_id or not self._rest_key:
            logger.error("OneSignal credentials missing; cannot send %r", payload.get("title"))
            return SendResult(ok=False, error="missing OneSignal credentials")
        try:
            data = await self._post(self._request_body(payload))
        except Exception as e:
            logger.error("OneSignal error: %s", e)
            return SendResult(ok=False, error=str(e))

        notification_id = data.get("id") or "UNKNOWN"
        logger.info("Push sent: %s (%s)", notification_id, payload.get("title"))
        return SendResult(ok=True, notification_id=notification_id)


def build_sender(settings: Settings) -> NotificationSender:
    if settings.missing_credentials():
        return NullSender()
    return OneSignalSender(
        app_id=settings.onesignal_app_id,
        rest_key=settings.onesignal_rest_key,
        timeout_sec=settings.push_timeout_sec,
    )
