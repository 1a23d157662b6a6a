from typing import Optional


class FetchError(Exception):
    """Raised when a feed cannot be retrieved (network failure or non-2xx status)."""

    def __init__(self, url: str, *, status: Optional[int] = None, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.status = status
        self.cause = cause
        if status is not None:
            msg = f"Fetch failed {status} for {url}"
        else:
            msg = f"Fetch failed for {url}: {cause}"
        super().__init__(msg)


class FeedParseError(Exception):
    """Raised when a feed body is not recognizable as a feed at all."""
