from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def to_iso(dt: datetime) -> str:
    """Render an instant as UTC ISO-8601 with millisecond precision and a Z suffix."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class FeedSource:
    id: str
    url: str


@dataclass(frozen=True)
class RawFeedItem:
    """One <item> as it came out of the feed: raw date string, HTML-bearing description."""
    title: str
    link: str
    pub_date: str = ""
    description: str = ""


@dataclass(frozen=True)
class NewsRecord:
    """
    Normalized news item persisted in the snapshot.

    WARNING: Do not change fields lightly. The JSON produced by `to_dict` is read by the site.
    """
    source: str
    title: str
    url: str
    date: Optional[datetime]
    excerpt: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "title": self.title,
            "url": self.url,
            "date": to_iso(self.date) if self.date else None,
            "excerpt": self.excerpt,
        }


@dataclass
class Snapshot:
    generated_at: datetime
    count: int
    items: List[NewsRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generatedAt": to_iso(self.generated_at),
            "count": self.count,
            "items": [it.to_dict() for it in self.items],
        }
