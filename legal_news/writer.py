from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence, Union

from .models import NewsRecord, Snapshot

DEFAULT_MAX_ITEMS = 30


def build_snapshot(
    records: Sequence[NewsRecord],
    *,
    max_items: int = DEFAULT_MAX_ITEMS,
    now: Optional[datetime] = None,
) -> Snapshot:
    """`count` is the full deduplicated total; only `items` is truncated."""
    return Snapshot(
        generated_at=now or datetime.now(timezone.utc),
        count=len(records),
        items=list(records[:max_items]),
    )


def write_snapshot(snapshot: Snapshot, path: Union[str, Path]) -> Path:
    """
    Serialize the snapshot as pretty-printed JSON, replacing any previous file.
    Filesystem errors propagate to the caller.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(snapshot.to_dict(), f, ensure_ascii=False, indent=2)
    return out
