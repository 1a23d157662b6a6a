from __future__ import annotations

from typing import Iterable, Optional


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = text.lower()
    return any(k.lower() in t for k in keywords if k)


def matches_keywords(text: Optional[str], keywords: Iterable[str]) -> bool:
    """
    True when any keyword appears in `text` as a case-insensitive substring.

    The driver passes "<title> <stripped description>"; a missing description is just "".
    """
    return _contains_any(text or "", keywords)
