from __future__ import annotations

import calendar
import re
from datetime import datetime, timezone
from typing import Optional

from feedparser.datetimes import _parse_date

from .models import NewsRecord, RawFeedItem

ELLIPSIS = "…"
DEFAULT_EXCERPT_LENGTH = 180

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")


def strip_html(html: Optional[str]) -> str:
    """Best-effort plain text: tags become spaces, whitespace collapses. Entities are left as-is."""
    text = _TAG_RE.sub(" ", html or "")
    return _WS_RE.sub(" ", text).strip()


def make_excerpt(text: str, limit: int = DEFAULT_EXCERPT_LENGTH) -> str:
    # Truncation is by code point.
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def parse_pub_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a feed date (RFC 822, ISO 8601, and the other formats feedparser knows)
    into an aware UTC datetime. Returns None instead of raising.
    """
    if not value or not value.strip():
        return None
    try:
        parsed = _parse_date(value.strip())
    except (ValueError, OverflowError, TypeError):
        return None
    if parsed is None:
        return None
    try:
        # feedparser normalizes to UTC, so timegm and not mktime
        return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None


def to_record(source: str, item: RawFeedItem, excerpt_length: int = DEFAULT_EXCERPT_LENGTH) -> NewsRecord:
    """Convert a parsed feed item into the NewsRecord written to the snapshot."""
    plain = strip_html(item.description)
    return NewsRecord(
        source=source,
        title=item.title,
        url=item.link,
        date=parse_pub_date(item.pub_date),
        excerpt=make_excerpt(plain, excerpt_length),
    )
