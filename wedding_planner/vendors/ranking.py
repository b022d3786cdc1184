from __future__ import annotations

import json
import logging
import math
from typing import Protocol

from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import complete
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .models import Vendor, VendorSearchRequest

logger = logging.getLogger(__name__)


def dedupe_key(vendor: Vendor) -> str:
    return f"{vendor.name.lower()}-{vendor.location.lower()}"


def deduplicate(vendors: list[Vendor]) -> list[Vendor]:
    """
    Collapse listings of the same business at the same place.

    The highest rating wins and the first one seen wins ties. Output follows
    the order in which each key first appeared.
    """
    unique: dict[str, Vendor] = {}
    for vendor in vendors:
        key = dedupe_key(vendor)
        current = unique.get(key)
        if current is None or vendor.rating > current.rating:
            unique[key] = vendor
    return list(unique.values())


def score(vendor: Vendor) -> float:
    return vendor.rating * math.log(vendor.review_count + 1)


class Ranker(Protocol):
    def rank(
        self, vendors: list[Vendor], request: VendorSearchRequest
    ) -> tuple[list[Vendor], str]:
        ...


class ScoreRanker:
    """Rating weighted by review volume."""

    strategy = "score"

    def rank(
        self, vendors: list[Vendor], request: VendorSearchRequest
    ) -> tuple[list[Vendor], str]:
        return sorted(vendors, key=score, reverse=True), self.strategy


RANKING_PROMPT = (
    "Rank these wedding {category} vendors for a couple getting married in {location}.\n"
    "Budget range: {budget}\n"
    "Guest count: {guests}\n\n"
    "Vendors: {vendors}\n\n"
    "Please respond with just the vendor IDs in order of best fit, separated by commas."
)


def _summaries(vendors: list[Vendor]) -> str:
    return json.dumps(
        [
            {
                "id": v.id,
                "name": v.name,
                "rating": v.rating,
                "price_range": v.price_range,
                "features": v.features[:3],
                "specialties": v.specialties,
            }
            for v in vendors
        ]
    )


def parse_ranked_ids(reply: str) -> list[str]:
    return [part.strip() for part in reply.split(",") if part.strip()]


class LLMRanker:
    """
    Asks the LLM for a best-fit order.

    Vendors the reply does not mention keep their relative order and go to
    the end. Any failure hands the list to ``fallback`` instead.
    """

    strategy = "llm"

    def __init__(
        self,
        config: LLMConfig = DEFAULT_LLM_CONFIG,
        search_config: SearchConfig = DEFAULT_SEARCH_CONFIG,
        fallback: Ranker | None = None,
    ) -> None:
        self.config = config
        self.search_config = search_config
        self.fallback = fallback or ScoreRanker()

    def _prompt(self, vendors: list[Vendor], request: VendorSearchRequest) -> str:
        budget = request.budget_range
        return RANKING_PROMPT.format(
            category=request.category,
            location=request.location,
            budget=budget if budget and budget != "any-budget" else "Not specified",
            guests=request.guest_count or "Not specified",
            vendors=_summaries(vendors),
        )

    def rank(
        self, vendors: list[Vendor], request: VendorSearchRequest
    ) -> tuple[list[Vendor], str]:
        if not vendors or not self.config.available:
            return self.fallback.rank(vendors, request)

        try:
            reply = complete(
                [{"role": "user", "content": self._prompt(vendors, request)}],
                self.config,
                max_tokens=self.search_config.ranking_max_tokens,
            )
        except Exception:
            logger.warning("LLM ranking failed, using score ordering", exc_info=True)
            return self.fallback.rank(vendors, request)

        remaining = {v.id: v for v in vendors}
        ranked = [remaining.pop(i) for i in parse_ranked_ids(reply) if i in remaining]
        if not ranked:
            logger.warning("LLM ranking named no known vendor ids, using score ordering")
            return self.fallback.rank(vendors, request)

        # dicts keep insertion order, so leftovers stay in their original order.
        return ranked + list(remaining.values()), self.strategy
