from __future__ import annotations

from typing import Iterable, List, Set

from .models import NewsRecord


def deduplicate(items: Iterable[NewsRecord]) -> List[NewsRecord]:
    """
    Remove records whose url was already seen.
    Keeps the first occurrence and preserves original order.
    """
    seen: Set[str] = set()
    out: List[NewsRecord] = []
    for it in items:
        if it.url in seen:
            continue
        seen.add(it.url)
        out.append(it)
    return out


def sort_by_recency(items: Iterable[NewsRecord]) -> List[NewsRecord]:
    """Newest first, undated last. Both sorts are stable, so ties keep first-seen order."""
    items = list(items)
    dated = [it for it in items if it.date is not None]
    undated = [it for it in items if it.date is None]
    dated.sort(key=lambda x: x.date, reverse=True)
    return dated + undated
