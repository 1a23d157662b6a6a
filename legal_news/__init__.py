"""
legal_news

Polls a handful of legal/tax RSS feeds and writes a bounded JSON snapshot of the
matching news for the site to display.

Core ideas:
- Input: (id, url) feed sources and a keyword list
- Process: fetch → parse → filter (keywords) → normalize → deduplicate → sort (newest first) → truncate
- Output: data/news.json ({generatedAt, count, items})

Example
-------
from legal_news import NewsPipeline, FeedSource

pipeline = NewsPipeline(
    feeds=[FeedSource("TJUE", "https://curia.europa.eu/jcms/rss/press-releases/en.xml")],
    keywords=["VAT", "direct taxation"],
    output_path="data/news.json",
)
snapshot = pipeline.run()

for item in snapshot.items:
    print(item.date, item.source, item.title)
"""
from .models import FeedSource, RawFeedItem, NewsRecord, Snapshot
from .exceptions import FetchError, FeedParseError
from .core import NewsPipeline

__all__ = [
    "FeedSource",
    "RawFeedItem",
    "NewsRecord",
    "Snapshot",
    "FetchError",
    "FeedParseError",
    "NewsPipeline",
]
