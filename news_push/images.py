from __future__ import annotations

import logging
from typing import Optional

import aiohttp
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0"


def extract_preview_image(html: str) -> str:
    """Return the og:image (or twitter:image) content of an HTML page, or ""."""
    soup = BeautifulSoup(html, "html.parser")
    for attrs in ({"property": "og:image"}, {"name": "twitter:image"}):
        tag = soup.find("meta", attrs=attrs)
        if tag is not None:
            content = (tag.get("content") or "").strip()
            if content:
                return content
    return ""


class ImageResolver:
    """
    Best-effort preview image lookup for articles whose feed item carries no image.

    One GET per article, bounded by `timeout_sec`; any failure yields "".
    Pass the caller's `session` to reuse its connection pool; without one a
    short-lived session is opened for the lookup.
    """

    def __init__(self, *, timeout_sec: float = 6.0, user_agent: str = USER_AGENT) -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout_sec)
        self._headers = {"User-Agent": user_agent}

    async def _get(self, session: aiohttp.ClientSession, url: str) -> Optional[str]:
        async with session.get(url, headers=self._headers, timeout=self._timeout,
                               allow_redirects=True) as resp:
            resp.raise_for_status()
            return await resp.text(errors="replace")

    async def resolve(self, url: str, session: Optional[aiohttp.ClientSession] = None) -> str:
        if not url:
            return ""
        try:
            if session is None:
                async with aiohttp.ClientSession() as own:
                    html = await self._get(own, url)
            else:
                html = await self._get(session, url)
            return extract_preview_image(html or "")
        except Exception as e:
            logger.debug("Image lookup failed for %s: %s", url, e)
            return ""
