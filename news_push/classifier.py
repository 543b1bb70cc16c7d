from __future__ import annotations

from typing import Iterable, Mapping, Sequence


DEFAULT_CATEGORY = "general"

# Order matters: the first category with a keyword hit wins.
CATEGORY_KEYWORDS: Mapping[str, Sequence[str]] = {
    "politics": (
        "प्रधानमन्त्री", "राष्ट्रपति", "संसद", "सरकार", "मन्त्री", "निर्वाचन",
        "चुनाव", "कांग्रेस", "एमाले", "माओवादी", "पार्टी",
    ),
    "economy": (
        "अर्थ", "बजेट", "बैंक", "सेयर", "नेप्से", "व्यापार", "लगानी", "राजस्व",
        "मुद्रास्फीति", "आईपीओ",
    ),
    "sports": (
        "खेलकुद", "क्रिकेट", "फुटबल", "खेलाडी", "प्रतियोगिता", "विश्वकप",
    ),
    "technology": (
        "प्रविधि", "इन्टरनेट", "मोबाइल", "स्मार्टफोन", "सफ्टवेयर", "एआई",
        "technology",
    ),
    "health": (
        "स्वास्थ्य", "अस्पताल", "रोग", "उपचार", "चिकित्सक", "डेंगु", "खोप",
    ),
    "entertainment": (
        "मनोरञ्जन", "चलचित्र", "फिल्म", "गायक", "गीत", "अभिनेता", "अभिनेत्री",
    ),
    "world": (
        "अमेरिका", "भारत", "चीन", "युक्रेन", "रुस", "अन्तर्राष्ट्रिय",
    ),
}


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = text.lower()
    return any(k.lower() in t for k in keywords)


def categorize(text: str, categories: Mapping[str, Sequence[str]] = CATEGORY_KEYWORDS) -> str:
    """
    Return the first category whose keyword list has a case-insensitive substring hit
    in `text`, or "general" when nothing matches.
    """
    if not text:
        return DEFAULT_CATEGORY
    for category, keywords in categories.items():
        if _contains_any(text, keywords):
            return category
    return DEFAULT_CATEGORY
