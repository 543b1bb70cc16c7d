import re

from news_push.models import FeedSource
from news_push.normalizer import clean_pub_date, clean_text, to_article

SOURCE = FeedSource("OnlineKhabar", "https://www.onlinekhabar.com/feed", "https://logo/ok.jpg")
BARE = FeedSource("Ratopati", "https://www.ratopati.com/feed")


def _entry(**kw):
    base = {"title": "", "description": "", "link": "", "pub_date": "", "enclosure_url": "", "media_url": ""}
    base.update(kw)
    return base


class TestCleanText:
    def test_strips_tags_and_collapses_whitespace(self):
        assert clean_text("<p>Hello   <b>world</b></p>\n\t<br/>again") == "Hello world again"

    def test_nbsp_becomes_space(self):
        assert clean_text("a&nbsp;&nbsp;b") == "a b"
        assert clean_text("a\xa0b") == "a b"

    def test_escaped_markup_does_not_survive(self):
        out = clean_text("before &lt;script&gt;x&lt;/script&gt; after")
        assert "<" not in out and ">" not in out
        assert out == "before x after"

    def test_empty(self):
        assert clean_text("") == ""
        assert clean_text(None) == ""

    def test_output_has_no_markup_or_whitespace_runs(self):
        samples = [
            "<div>\n\n  काठमाडौं   <em>समाचार</em>\r\n</div>",
            "plain\ttext\nwith\r\nbreaks",
            "<img src='x.jpg'/>caption  ",
            "<![CDATA[ भूकम्प ]]>",
        ]
        for s in samples:
            out = clean_text(s)
            assert not re.search(r"<[^>]*>", out)
            assert not re.search(r"\s{2,}", out)
            assert out == out.strip()
            assert "\n" not in out and "\t" not in out


def test_clean_pub_date():
    assert clean_pub_date("\n  Mon, 01 Jan 2024 10:00:00 +0545\t") == "Mon, 01 Jan 2024 10:00:00 +0545"
    assert clean_pub_date("") == ""


class TestToArticle:
    def test_enclosure_wins(self):
        a = to_article(_entry(enclosure_url="https://img/enc.jpg", media_url="https://img/media.jpg"),
                       SOURCE, image="https://img/og.jpg")
        assert a.image == "https://img/enc.jpg"

    def test_media_before_scraped(self):
        a = to_article(_entry(media_url="https://img/media.jpg"), SOURCE, image="https://img/og.jpg")
        assert a.image == "https://img/media.jpg"

    def test_scraped_before_profile(self):
        a = to_article(_entry(), SOURCE, image="https://img/og.jpg")
        assert a.image == "https://img/og.jpg"

    def test_profile_fallback(self):
        assert to_article(_entry(), SOURCE).image == "https://logo/ok.jpg"

    def test_unresolved_image_is_empty_string(self):
        a = to_article(_entry(), BARE)
        assert a.image == ""
        assert a.profile == ""

    def test_fields(self):
        a = to_article(_entry(title="<b>सरकार</b>  निर्णय", description="<p>विवरण</p>",
                              link="https://x/1", pub_date="\n2024-01-01\n"), SOURCE)
        assert a.source == "OnlineKhabar"
        assert a.title == "सरकार निर्णय"
        assert a.description == "विवरण"
        assert a.link == "https://x/1"
        assert a.pub_date == "2024-01-01"
        assert a.category == "politics"
        assert a.profile == "https://logo/ok.jpg"

    def test_missing_fields_degrade_to_empty(self):
        a = to_article({}, BARE)
        assert (a.title, a.description, a.link, a.pub_date, a.image) == ("", "", "", "", "")
        assert a.category == "general"
