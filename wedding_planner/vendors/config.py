from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    cache_ttl_seconds: float = 30 * 60
    default_radius_km: int = 50
    sources: tuple[str, ...] = ("google_places", "wedding_platforms", "social_media")
    ranking_max_tokens: int = 200


DEFAULT_SEARCH_CONFIG = SearchConfig()
