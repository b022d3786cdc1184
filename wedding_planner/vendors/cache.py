from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from .config import DEFAULT_SEARCH_CONFIG
from .models import VendorSearchRequest


def make_key(request: VendorSearchRequest, default_radius: int = DEFAULT_SEARCH_CONFIG.default_radius_km) -> str:
    budget = request.budget_range
    budget_key = budget if budget and budget != "any-budget" else "any"
    return f"{request.category}-{request.location}-{budget_key}-{request.search_radius or default_radius}"


class SearchCache:
    """
    Time-boxed store of gathered search listings.

    Expired entries are dropped when read and swept on every write. Two
    requests racing on the same key both recompute; the last write wins.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_SEARCH_CONFIG.cache_ttl_seconds,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, dict[str, Any]] = {}
        self._hits = 0
        self._misses = 0

    def _expired(self, entry: dict[str, Any], now: float) -> bool:
        return now - entry["created_at"] >= self.ttl_seconds

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry and not self._expired(entry, self._clock()):
            self._hits += 1
            return entry["value"]
        if entry:
            del self._entries[key]
        self._misses += 1
        return None

    def set(self, key: str, value: Any) -> None:
        now = self._clock()
        self.evict_expired(now)
        self._entries[key] = {"value": value, "created_at": now}

    def evict_expired(self, now: float | None = None) -> int:
        now = self._clock() if now is None else now
        stale = [k for k, entry in self._entries.items() if self._expired(entry, now)]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def stats(self) -> dict:
        total = self._hits + self._misses
        return {
            "size": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
        }

    def clear(self) -> None:
        self._entries.clear()
        self._hits = 0
        self._misses = 0
