from __future__ import annotations

from typing import Any, Dict, List

import feedparser

from .exceptions import FeedParseError
from .models import RawFeedItem

# The body has already been decoded to str; tell feedparser how we re-encoded it
# so it does not trust a stale encoding in the XML declaration.
_RESPONSE_HEADERS = {"content-type": "application/xml; charset=utf-8"}


def _text(entry: Dict[str, Any], *keys: str) -> str:
    for key in keys:
        val = entry.get(key)
        if isinstance(val, str) and val.strip():
            return val.strip()
    return ""


def _link(entry: Dict[str, Any]) -> str:
    # feedparser copies a permalink <guid> into "link" when the item has no <link>;
    # only a real <link> element counts.
    if entry.get("guidislink") and not any(l.get("href") for l in entry.get("links") or []):
        return ""
    return _text(entry, "link")


def parse_entry(entry: Dict[str, Any]) -> RawFeedItem:
    """
    Map a raw feedparser entry to a RawFeedItem.
    Missing fields become empty strings; CDATA has already been unwrapped by feedparser.
    """
    return RawFeedItem(
        title=_text(entry, "title"),
        link=_link(entry),
        pub_date=_text(entry, "published", "updated"),
        description=_text(entry, "summary", "description"),
    )


def parse_feed(text: str) -> List[RawFeedItem]:
    """
    Parse RSS feed text into RawFeedItems, in document order.

    Items without a title or link are dropped. Raises FeedParseError only when the body
    is not a feed at all (no version detected and nothing recovered).
    """
    feed = feedparser.parse(text or "", response_headers=_RESPONSE_HEADERS)

    entries = getattr(feed, "entries", None) or []
    if getattr(feed, "bozo", 0) and not entries and not getattr(feed, "version", ""):
        exc = getattr(feed, "bozo_exception", None)
        msg = "Invalid RSS feed"
        if exc:
            msg += f" ({exc})"
        raise FeedParseError(msg)

    items: List[RawFeedItem] = []
    for e in entries:
        item = parse_entry(e)
        if item.title and item.link:
            items.append(item)
    return items
