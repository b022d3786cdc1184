from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field

from .cache import SearchCache, make_key
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .filters import filter_candidates
from .models import Vendor, VendorSearchRequest
from .ranking import Ranker, ScoreRanker, deduplicate
from .sources import SOURCES, VendorSource

logger = logging.getLogger(__name__)


@dataclass
class SearchOutcome:
    vendors: list[Vendor]
    cache_used: bool
    strategy: str
    sources: list[str] = field(default_factory=list)


class VendorSearchService:
    """
    Runs the matching pipeline for one request.

    sources -> filter -> deduplicate -> rank. The shared cache holds the
    gathered source listings per key; filtering and ranking always run
    against the current request. A source that raises is logged and left
    out.
    """

    def __init__(
        self,
        cache: SearchCache,
        ranker: Ranker | None = None,
        rng: random.Random | None = None,
        config: SearchConfig = DEFAULT_SEARCH_CONFIG,
        sources: dict[str, VendorSource] | None = None,
    ) -> None:
        self.cache = cache
        self.ranker = ranker or ScoreRanker()
        self.rng = rng or random.Random()
        self.config = config
        self.sources = sources if sources is not None else {
            name: SOURCES[name] for name in config.sources
        }

    def _gather(self, request: VendorSearchRequest) -> tuple[list[Vendor], list[str]]:
        vendors: list[Vendor] = []
        used: list[str] = []
        for name, source in self.sources.items():
            try:
                vendors.extend(source(request, self.rng))
                used.append(name)
            except Exception:
                logger.warning("Vendor source %s failed, skipping", name, exc_info=True)
        return vendors, used

    def search(self, request: VendorSearchRequest) -> SearchOutcome:
        key = make_key(request, self.config.default_radius_km)
        start = time.time()

        cached = self.cache.get(key)
        cache_used = cached is not None
        if cache_used:
            candidates, used = cached
        else:
            candidates, used = self._gather(request)
            self.cache.set(key, (candidates, used))

        # Guest count is not part of the key, so filtering runs on every request.
        matched = filter_candidates(candidates, request)
        unique = deduplicate(matched)
        ranked, strategy = self.ranker.rank(unique, request)

        logger.info(
            "Vendor search %s: %d candidates, %d matched, %d returned (%s, cache_used=%s) in %.1f ms",
            key, len(candidates), len(matched), len(ranked), strategy, cache_used,
            (time.time() - start) * 1000,
        )
        return SearchOutcome(vendors=ranked, cache_used=cache_used, strategy=strategy, sources=list(used))
