from __future__ import annotations

from typing import Optional

from .config import Settings, get_settings
from .core import NewsPipeline
from .log import configure_logging


def main(settings: Optional[Settings] = None) -> int:
    """Run the pipeline once and print a one-line summary."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    pipeline = NewsPipeline(settings=settings)
    snapshot = pipeline.run()

    print(f"OK {pipeline.output_path.name} -> {len(snapshot.items)} items")
    return 0
