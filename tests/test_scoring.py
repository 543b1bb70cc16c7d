from news_push.scoring import HIGH_KEYWORDS, is_emergency, is_important, score
from conftest import make_article


def test_no_keywords():
    a = make_article("सामान्य समाचार", "केही भएन")
    assert score(a) == 0
    assert not is_important(score(a))


def test_two_distinct_keywords_score_ten():
    a = make_article("भूकम्प पछि पहिरो", "")
    assert score(a) == 10


def test_repeated_keyword_counts_once():
    a = make_article("भूकम्प भूकम्प", "फेरि भूकम्प")
    assert score(a) == 5


def test_description_counts():
    assert score(make_article("शीर्षक", "बाढीले क्षति")) == 5


def test_keyword_split_across_title_and_description_does_not_match():
    # title and description are joined with a space
    assert score(make_article("भूक", "म्प")) == 0


def test_case_sensitive_exact_substring():
    assert score(make_article("X", ""), keywords=["x"]) == 0
    assert score(make_article("x", ""), keywords=["x"]) == 5


def test_trailing_space_keywords():
    assert "गणतन्त्र " in HIGH_KEYWORDS
    assert score(make_article("गणतन्त्र", "")) == 0
    assert score(make_article("गणतन्त्र दिवस", "")) == 5


def test_threshold():
    assert is_important(5)
    assert not is_important(4)


def test_keyword_list():
    assert len(HIGH_KEYWORDS) == 16
    assert len(set(HIGH_KEYWORDS)) == 16


def test_is_emergency_matches_title_only():
    assert is_emergency(make_article("आगलागी भयो", ""))
    assert not is_emergency(make_article("समाचार", "आगलागी भयो"))
    assert not is_emergency(make_article("राशिफल", ""))
