from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional


def now_ms() -> float:
    return time.time() * 1000


@dataclass(slots=True)
class CacheEntry:
    content: str
    timestamp_ms: float


@dataclass(frozen=True, slots=True)
class CacheInfo:
    key: str
    size_bytes: int
    age_ms: float


class AssetCache:
    """
    In-memory asset cache with a time-based freshness check.

    Stale entries are kept until overwritten or cleared. There is no size bound and no
    locking; it is meant to be shared by coroutines on a single event loop.
    """

    def __init__(self, clock: Callable[[], float] = now_ms) -> None:
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get_fresh(self, key: str, ttl_ms: float) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.timestamp_ms >= ttl_ms:
            return None
        return entry.content

    def put(self, key: str, content: str) -> None:
        self._entries[key] = CacheEntry(content=content, timestamp_ms=self._clock())

    def clear(self) -> None:
        self._entries.clear()

    def snapshot(self) -> List[CacheInfo]:
        now = self._clock()
        return [
            CacheInfo(key=key, size_bytes=len(entry.content.encode("utf-8")), age_ms=now - entry.timestamp_ms)
            for key, entry in self._entries.items()
        ]
