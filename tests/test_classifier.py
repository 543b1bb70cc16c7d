from news_push.classifier import CATEGORY_KEYWORDS, DEFAULT_CATEGORY, categorize


def test_unmatched_is_general():
    assert categorize("नमस्ते संसार") == DEFAULT_CATEGORY
    assert categorize("") == DEFAULT_CATEGORY


def test_first_category_in_order_wins():
    # both politics and economy keywords present; politics comes first
    assert categorize("सरकारको बजेट सार्वजनिक") == "politics"
    assert categorize("बजेट र क्रिकेट") == "economy"


def test_case_insensitive():
    assert categorize("New TECHNOLOGY launched") == "technology"


def test_custom_order():
    cats = {"b": ["foo"], "a": ["foo"]}
    assert categorize("a foo b", cats) == "b"


def test_category_order_is_fixed():
    assert list(CATEGORY_KEYWORDS) == [
        "politics", "economy", "sports", "technology", "health", "entertainment", "world",
    ]
