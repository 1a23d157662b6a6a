from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import requests
import structlog

from .classifier import matches_keywords
from .config import Settings, get_settings
from .dedup import deduplicate, sort_by_recency
from .exceptions import FeedParseError, FetchError
from .fetcher import fetch_text
from .models import FeedSource, NewsRecord, Snapshot
from .normalizer import strip_html, to_record
from .parser import parse_feed
from .writer import build_snapshot, write_snapshot

logger = structlog.get_logger()


class NewsPipeline:
    """
    High-level API: poll the configured feeds and write the news snapshot.

    Pipeline: fetch → parse → filter (keywords) → normalize → deduplicate → sort (newest first)
    → truncate → write
    """

    def __init__(
        self,
        *,
        feeds: Optional[Sequence[FeedSource]] = None,
        keywords: Optional[Sequence[str]] = None,
        output_path: Optional[Union[str, Path]] = None,
        max_items: Optional[int] = None,
        excerpt_length: Optional[int] = None,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or get_settings()
        self.settings = settings
        self.feeds: List[FeedSource] = list(feeds) if feeds is not None else settings.resolve_feeds()
        self.keywords: List[str] = list(keywords) if keywords is not None else settings.resolve_keywords()
        self.output_path = Path(output_path) if output_path is not None else Path(settings.output_path)
        self.max_items = max_items if max_items is not None else settings.max_items
        self.excerpt_length = excerpt_length if excerpt_length is not None else settings.excerpt_length
        self.session = session

    def fetch_feed(self, feed: FeedSource, session: requests.Session) -> List[NewsRecord]:
        """Fetch one feed and return its keyword-matching records. Raises FetchError/FeedParseError."""
        text = fetch_text(
            feed.url,
            session=session,
            user_agent=self.settings.user_agent,
            timeout=self.settings.fetch_timeout_seconds,
        )
        items = parse_feed(text)

        records = []
        for it in items:
            blob = f"{it.title} {strip_html(it.description)}"
            if matches_keywords(blob, self.keywords):
                records.append(to_record(feed.id, it, self.excerpt_length))

        logger.info("feed_fetched", feed=feed.id, items=len(items), matched=len(records))
        return records

    def collect(self) -> Tuple[List[NewsRecord], List[str]]:
        """
        Run every feed in isolation. Returns (records in feed-then-document order, failed feed ids).
        A failing feed is logged and contributes nothing.
        """
        session = self.session or requests.Session()
        all_records: List[NewsRecord] = []
        failed: List[str] = []
        try:
            for feed in self.feeds:
                try:
                    records = self.fetch_feed(feed, session)
                except (FetchError, FeedParseError) as e:
                    logger.error("feed_failed", feed=feed.id, error=str(e))
                    failed.append(feed.id)
                    continue
                all_records.extend(records)
        finally:
            if self.session is None:
                session.close()
        return all_records, failed

    def run(self) -> Snapshot:
        records, _ = self.collect()

        ranked = sort_by_recency(deduplicate(records))
        snapshot = build_snapshot(ranked, max_items=self.max_items)

        path = write_snapshot(snapshot, self.output_path)
        logger.info("snapshot_written", path=str(path), count=snapshot.count, items=len(snapshot.items))
        return snapshot
