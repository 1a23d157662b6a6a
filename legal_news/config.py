"""Feed list, keyword list and runtime settings."""

import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import FeedSource

DEFAULT_KEYWORDS: List[str] = [
    "TEAC", "TEAR", "TS", "Tribunal Supremo", "Audiencia Nacional", "TJUE", "CJEU",
    "IRPF", "LIRPF", "7p", "Beckham", "impatriados", "IRNR", "LIRNR", "LIS", "IS", "IVA", "LIVA",
    "inspección", "comprobación", "sanción", "LGT", "Modelo 210", "Modelo 720", "VAT", "direct taxation",
]

DEFAULT_FEEDS: List[FeedSource] = [
    # Tribunal Supremo - En Portada
    FeedSource("TS", "https://www.poderjudicial.es/cgpj/es/Poder-Judicial/Tribunal-Supremo/ch.En-Portada.formato1/"),
    # Audiencia Nacional - En Portada
    FeedSource("AN", "https://www.poderjudicial.es/cgpj/es/Poder-Judicial/Audiencia-Nacional/ch.En-Portada.formato1/"),
    # CURIA press releases; more feeds at https://curia.europa.eu/jcms/jcms/Jo2_7032/en/
    FeedSource("TJUE", "https://curia.europa.eu/jcms/rss/press-releases/en.xml"),
]


class Settings(BaseSettings):
    """Runtime settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LEGAL_NEWS_",  # LEGAL_NEWS_OUTPUT_PATH, LEGAL_NEWS_KEYWORDS, etc.
        extra="ignore",
    )

    # Output
    output_path: Path = Path("data") / "news.json"
    max_items: int = 30
    excerpt_length: int = 180

    # Fetching
    user_agent: str = "news-bot/1.0"
    fetch_timeout_seconds: float = 20.0

    # Filtering; keywords may be given as a JSON list in the environment
    keywords: List[str] = list(DEFAULT_KEYWORDS)
    keywords_path: Optional[Path] = None
    feeds_path: Optional[Path] = None

    # WARNING keeps stderr to one line per failed feed
    log_level: str = "WARNING"

    def resolve_feeds(self) -> List[FeedSource]:
        if self.feeds_path is not None:
            return load_feeds(self.feeds_path)
        return list(DEFAULT_FEEDS)

    def resolve_keywords(self) -> List[str]:
        if self.keywords_path is not None:
            return load_keywords(self.keywords_path)
        return list(self.keywords)


def get_settings() -> Settings:
    return Settings()


def load_feeds(config_path: Union[str, Path]) -> List[FeedSource]:
    """Load feed sources from a JSON file: {"feeds": [{"id": ..., "url": ...}]}."""
    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    return [FeedSource(id=fd["id"], url=fd["url"]) for fd in data.get("feeds", [])]


def load_keywords(config_path: Union[str, Path]) -> List[str]:
    """Load keywords from a JSON file, either a bare list or {"keywords": [...]}."""
    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("keywords", [])
    return [str(k) for k in data if str(k).strip()]
