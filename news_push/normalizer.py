from __future__ import annotations

import re
from typing import Any, Dict

from bs4 import BeautifulSoup

from .classifier import categorize
from .models import Article, FeedSource


_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")


def clean_text(text: str = "") -> str:
    """
    Strip markup from feed text and collapse whitespace.

    BeautifulSoup drops the tags and decodes entities; the regex pass then removes
    markup that was entity-escaped in the source and only became tags after decoding.
    """
    if not text:
        return ""
    if "<" in text or "&" in text:
        text = BeautifulSoup(text, "html.parser").get_text(" ")
    text = _TAG_RE.sub("", text)
    text = text.replace("\xa0", " ").replace("&nbsp;", " ")
    return _WS_RE.sub(" ", text).strip()


def clean_pub_date(pub_date: str = "") -> str:
    if not pub_date:
        return ""
    return re.sub(r"[\n\r\t]", " ", pub_date).strip()


def embedded_image(entry: Dict[str, Any]) -> str:
    """Image carried by the feed itself: enclosure first, then media content."""
    return entry.get("enclosure_url") or entry.get("media_url") or ""


def to_article(entry: Dict[str, Any], source: FeedSource, image: str = "") -> Article:
    """
    Convert a parsed entry dict into an Article.

    Image priority: enclosure -> media content -> `image` (scraped by the caller)
    -> source profile -> "".
    """
    title = clean_text(entry.get("title") or "")
    description = clean_text(entry.get("description") or "")

    return Article(
        source=source.name,
        title=title,
        description=description,
        link=entry.get("link") or "",
        image=embedded_image(entry) or image or source.profile or "",
        pub_date=clean_pub_date(entry.get("pub_date") or ""),
        category=categorize(f"{title} {description}"),
        profile=source.profile or "",
    )
