"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest
import requests
import structlog

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


TS_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Tribunal Supremo - En Portada</title>
    <link>https://www.poderjudicial.es/</link>
    <description>Noticias</description>
    <item>
      <title><![CDATA[El Supremo fija doctrina sobre el IRPF de los impatriados]]></title>
      <link>https://www.poderjudicial.es/noticia-1</link>
      <pubDate>Mon, 01 Jan 2024 10:00:00 GMT</pubDate>
      <description><![CDATA[<p>La Sala <b>Tercera</b> resuelve el recurso.</p>]]></description>
    </item>
    <item>
      <title>Open day at the court</title>
      <link>https://www.poderjudicial.es/noticia-2</link>
      <pubDate>Tue, 02 Jan 2024 10:00:00 GMT</pubDate>
      <description>Guided tour for the public</description>
    </item>
    <item>
      <title>New library hours</title>
      <link>https://www.poderjudicial.es/noticia-3</link>
      <description>Hours change on Monday</description>
    </item>
  </channel>
</rss>
"""


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code


class FakeSession:
    """Stands in for requests.Session; maps url -> body text, status code or exception."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []
        self.closed = False

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        route = self.routes.get(url)
        if route is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(route, Exception):
            raise route
        if isinstance(route, int):
            return FakeResponse(status_code=route)
        return FakeResponse(text=route)

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def ts_feed():
    return TS_FEED


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def settings(tmp_path):
    from legal_news.config import Settings
    return Settings(
        _env_file=None,
        output_path=tmp_path / "data" / "news.json",
        fetch_timeout_seconds=5,
    )


@pytest.fixture
def make_record():
    """Factory for NewsRecord with sensible defaults."""
    from legal_news.models import NewsRecord

    def _make(url, date=None, title="Title", source="TS", excerpt=""):
        return NewsRecord(source=source, title=title, url=url, date=date, excerpt=excerpt)

    return _make
