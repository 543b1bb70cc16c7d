from __future__ import annotations

from typing import Any, Dict, Optional


def _first_str(*values: Any) -> str:
    for v in values:
        if isinstance(v, str) and v.strip():
            return v
    return ""


def _get_description(entry: Dict[str, Any]) -> str:
    text = _first_str(entry.get("summary"), entry.get("description"))
    if text:
        return text
    content = entry.get("content")
    if isinstance(content, list) and content:
        c0 = content[0]
        if isinstance(c0, dict):
            return _first_str(c0.get("value"))
    return ""


def _get_enclosure_url(entry: Dict[str, Any]) -> str:
    """
    Enclosure URL, from feedparser's `enclosures` list or a rel="enclosure" link.
    """
    enclosures = entry.get("enclosures")
    if isinstance(enclosures, list):
        for enc in enclosures:
            if isinstance(enc, dict):
                url = _first_str(enc.get("href"), enc.get("url"))
                if url:
                    return url.strip()
    links = entry.get("links")
    if isinstance(links, list):
        for link in links:
            if isinstance(link, dict) and link.get("rel") == "enclosure":
                url = _first_str(link.get("href"))
                if url:
                    return url.strip()
    return ""


def _get_media_url(entry: Dict[str, Any]) -> str:
    media = entry.get("media_content")
    if isinstance(media, list):
        for m in media:
            if isinstance(m, dict):
                url = _first_str(m.get("url"))
                if url:
                    return url.strip()
    return ""


def _get_pub_date(entry: Dict[str, Any]) -> str:
    # Raw strings only; parsing happens at sort time.
    return _first_str(entry.get("published"), entry.get("pubDate"), entry.get("updated"), entry.get("created"))


def parse_entry(entry: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Map a raw feed entry (from feedparser) to a dict with common fields.
    Fields: title, description, link, pub_date, enclosure_url, media_url

    Every field is a string; missing or malformed values become "".
    """
    if not isinstance(entry, dict):
        entry = {}

    return {
        "title": _first_str(entry.get("title")),
        "description": _get_description(entry),
        "link": _first_str(entry.get("link"), entry.get("feedburner_origlink")).strip(),
        "pub_date": _get_pub_date(entry),
        "enclosure_url": _get_enclosure_url(entry),
        "media_url": _get_media_url(entry),
    }
