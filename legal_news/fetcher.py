from __future__ import annotations

from typing import Optional

import requests

from .exceptions import FetchError

DEFAULT_USER_AGENT = "news-bot/1.0"
DEFAULT_TIMEOUT = 20.0


def fetch_text(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    Fetch a single feed URL and return the body as text.

    Raises FetchError on network issues or when the server answers with a non-2xx status.
    """
    getter = session.get if session is not None else requests.get
    try:
        resp = getter(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(url, cause=e) from e

    if not 200 <= resp.status_code < 300:
        raise FetchError(url, status=resp.status_code)
    return resp.text
