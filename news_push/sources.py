from __future__ import annotations

from typing import Tuple

from .models import FeedSource


FEEDS: Tuple[FeedSource, ...] = (
    FeedSource("Baahrakhari", "https://baahrakhari.com/feed"),
    FeedSource("OnlineKhabar", "https://www.onlinekhabar.com/feed",
               "https://www.ashesh.org/app/news/logo/onlinekhabar.jpg"),
    FeedSource("Ratopati", "https://www.ratopati.com/feed"),
    FeedSource("Setopati", "https://www.setopati.com/feed",
               "https://www.ashesh.org/app/news/logo/setopati.jpg"),
    FeedSource("ThahaKhabar", "https://www.thahakhabar.com/feed"),
    FeedSource("NepalSamaya", "https://nepalsamaya.com/feed"),
    FeedSource("Rajdhani", "https://rajdhanidaily.com/feed"),
    FeedSource("NewsOfNepal", "https://newsofnepal.com/feed"),
    FeedSource("BizMandu", "https://bizmandu.com/feed",
               "https://www.ashesh.org/app/news/logo/bizmandu.jpg"),
    FeedSource("Techpana", "https://techpana.com/feed",
               "https://www.ashesh.org/app/news/logo/techpana.jpg"),
    FeedSource("Artha Dabali", "https://www.arthadabali.com/feed",
               "https://www.arthadabali.com/wp-content/uploads/2020/01/logo.png"),
    FeedSource("Makalu Khabar", "https://www.makalukhabar.com/feed",
               "https://www.makalukhabar.com/wp-content/uploads/2021/03/logo.png"),
    FeedSource("SwasthyaKhabar", "https://swasthyakhabar.com/feed"),
    FeedSource("Nagarik News", "https://nagariknews.nagariknetwork.com/feed",
               "https://staticcdn.nagariknetwork.com/images/default-image.png"),
    FeedSource("BBC Nepali", "https://www.bbc.com/nepali/index.xml",
               "https://news.bbcimg.co.uk/nol/shared/img/bbc_news_120x60.gif"),
)
