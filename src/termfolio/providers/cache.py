"""
File-backed cache for provider data.

Each key is stored as ~/.termfolio/cache/<key>.json holding the save time
and the JSON payload. The directory is created on first write.
"""

from __future__ import annotations

import json
import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path.home() / ".termfolio" / "cache"


@dataclass
class CacheRecord:
    saved_at: float  # Unix timestamp
    data: Any

    def age(self, now: Optional[float] = None) -> float:
        """Seconds since the record was saved."""
        return (now if now is not None else time.time()) - self.saved_at


class FileCache:
    """JSON file cache keyed by name."""

    def __init__(self, cache_dir: Optional[Path] = None):
        self.cache_dir = Path(cache_dir) if cache_dir else DEFAULT_CACHE_DIR

    def _path(self, key: str) -> Path:
        safe = re.sub(r"[^a-zA-Z0-9_-]", "_", key)
        return self.cache_dir / f"{safe}.json"

    def read(self, key: str) -> Optional[CacheRecord]:
        """Read a cached record, or None if missing or unreadable."""
        path = self._path(key)
        if not path.exists():
            return None
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            return CacheRecord(saved_at=float(raw["saved_at"]), data=raw["data"])
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring unreadable cache entry {path.name}: {e}")
            return None

    def write(self, key: str, data: Any, now: Optional[float] = None) -> CacheRecord:
        """Store data under key and return the new record."""
        record = CacheRecord(saved_at=now if now is not None else time.time(), data=data)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        payload = {"saved_at": record.saved_at, "data": record.data}
        self._path(key).write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return record

    def invalidate(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()

    def clear(self) -> int:
        """Remove all cached entries. Returns the number removed."""
        if not self.cache_dir.exists():
            return 0
        removed = 0
        for path in self.cache_dir.glob("*.json"):
            path.unlink()
            removed += 1
        return removed

    @staticmethod
    def is_fresh(record: CacheRecord, ttl_seconds: float, now: Optional[float] = None) -> bool:
        return record.age(now) < ttl_seconds
