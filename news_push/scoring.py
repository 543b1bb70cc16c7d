from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .models import Article

logger = logging.getLogger(__name__)

KEYWORD_WEIGHT = 5
IMPORTANT_THRESHOLD = 5

# Matched case-sensitively as exact substrings. The trailing spaces on two entries
# are part of the match and restrict them to whole-word occurrences before a space.
HIGH_KEYWORDS: Sequence[str] = (
    "भूकम्प",
    "बाढी",
    "पहिरो",
    "हिमपात",
    "आगलागी",
    "दुर्घटना",
    "मृत्यु",
    "आपतकालीन",
    "विस्फोट",
    "प्रधानमन्त्री",
    "पक्राउ",
    "गणतन्त्र ",
    "नरसंहार ",
    "आदेश",
    "बेपत्ता",
    "राशिफल",
)

# Titles containing one of these may bypass the notification cooldown when the
# emergency override is enabled.
EMERGENCY_KEYWORDS: Sequence[str] = (
    "भूकम्प",
    "बाढी",
    "पहिरो",
    "हिमपात",
    "आगलागी",
    "दुर्घटना",
    "मृत्यु",
    "आपतकालीन",
    "विस्फोट",
)


def score(article: Article, keywords: Iterable[str] = HIGH_KEYWORDS) -> int:
    """5 points per distinct keyword found in title + description."""
    text = f"{article.title} {article.description}"
    total = 0
    for k in dict.fromkeys(keywords):
        if k in text:
            logger.debug("Keyword match %r -> %s", k, article.title)
            total += KEYWORD_WEIGHT
    return total


def is_important(value: int) -> bool:
    return value >= IMPORTANT_THRESHOLD


def is_emergency(article: Article, keywords: Iterable[str] = EMERGENCY_KEYWORDS) -> bool:
    return any(k in article.title for k in keywords)
