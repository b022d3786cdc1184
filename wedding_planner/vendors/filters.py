from __future__ import annotations

import math
import re

from .models import PRICE_INDICATORS, Vendor, VendorSearchRequest

LARGE_WEDDING_GUESTS = 200
SMALL_WEDDING_GUESTS = 50

# City -> areas a couple searching that city would still travel to.
NEARBY_REGIONS: dict[str, list[str]] = {
    "london": [
        "mayfair", "strand", "park lane", "westminster", "kensington", "chelsea",
        "surrey", "kent", "essex", "hertfordshire",
        "central london", "west london", "east london", "south london", "north london",
    ],
    "manchester": ["salford", "stockport", "trafford", "greater manchester", "cheshire"],
    "birmingham": ["solihull", "west midlands", "sutton coldfield", "warwickshire"],
    "edinburgh": ["leith", "midlothian", "east lothian", "west lothian"],
    "bristol": ["bath", "clifton", "somerset", "gloucestershire"],
    "leeds": ["harrogate", "york", "west yorkshire"],
    "glasgow": ["paisley", "east kilbride", "lanarkshire"],
}

_LARGE_CAPACITY_KEYWORDS = ("ballroom", "grand", "large", "banquet", "capacity", "estate", "hall")
_INTIMATE_KEYWORDS = ("intimate", "private", "boutique", "small", "garden", "terrace", "cosy", "cozy")

_AMOUNT_RE = re.compile(r"(\d+(?:\.\d+)?)(?:\s*(k)\b)?")


def parse_price_range(text: str | None) -> tuple[float, float] | None:
    """
    Turn free-text price copy into numeric bounds.

    ``"Under £5,000"`` -> (0, 5000), ``"Over £10,000"`` and ``"£10,000+"`` ->
    (10000, inf), ``"£1,000 - £2,500"`` -> (1000, 2500), a single figure N ->
    (N, N). ``None`` means no constraint: empty text, ``any-budget``, or no
    digits at all.
    """
    if not text:
        return None
    lowered = text.lower().strip()
    if lowered in ("any", "any-budget"):
        return None

    amounts = [
        float(number) * (1000 if thousands else 1)
        for number, thousands in _AMOUNT_RE.findall(lowered.replace(",", ""))
    ]
    if not amounts:
        return None

    if any(word in lowered for word in ("under", "below", "less than", "up to")):
        return 0.0, amounts[0]
    if "over" in lowered or "above" in lowered or "+" in lowered:
        return amounts[0], math.inf
    if len(amounts) >= 2:
        return min(amounts[0], amounts[1]), max(amounts[0], amounts[1])
    return amounts[0], amounts[0]


def _vendor_bounds(vendor: Vendor, guest_count: int | None) -> tuple[float, float] | None:
    bounds = parse_price_range(vendor.price_range)
    if bounds and guest_count and "per person" in vendor.price_range.lower():
        low, high = bounds
        return low * guest_count, high * guest_count
    return bounds


def budget_overlaps(
    vendor_bounds: tuple[float, float] | None,
    budget_bounds: tuple[float, float] | None,
) -> bool:
    if vendor_bounds is None or budget_bounds is None:
        return True
    vendor_low, vendor_high = vendor_bounds
    budget_low, budget_high = budget_bounds
    return vendor_low <= budget_high and budget_low <= vendor_high


def location_matches(candidate: str, requested: str) -> bool:
    candidate = candidate.lower().strip()
    requested = requested.lower().strip()
    if not requested:
        return True
    if requested in candidate or candidate in requested:
        return True
    for city, regions in NEARBY_REGIONS.items():
        if city in requested and any(region in candidate for region in regions):
            return True
    return False


def _mentions(vendor: Vendor, keywords: tuple[str, ...]) -> bool:
    text = " ".join(vendor.features + vendor.specialties).lower()
    return any(keyword in text for keyword in keywords)


def _tier(vendor: Vendor) -> int:
    return PRICE_INDICATORS.index(vendor.price_indicator) + 1


def guest_suitable(vendor: Vendor, guest_count: int | None) -> bool:
    """Venues must fit the party size; other categories always pass."""
    if vendor.category != "venue" or not guest_count:
        return True
    if guest_count > LARGE_WEDDING_GUESTS:
        return _mentions(vendor, _LARGE_CAPACITY_KEYWORDS) or _tier(vendor) >= 3
    if guest_count < SMALL_WEDDING_GUESTS:
        return _mentions(vendor, _INTIMATE_KEYWORDS) or _tier(vendor) <= 3
    return True


def filter_candidates(vendors: list[Vendor], request: VendorSearchRequest) -> list[Vendor]:
    """Drop candidates outside the location, budget or capacity; order is kept."""
    budget_bounds = parse_price_range(request.budget_range)
    return [
        vendor
        for vendor in vendors
        if location_matches(vendor.location, request.location)
        and budget_overlaps(_vendor_bounds(vendor, request.guest_count), budget_bounds)
        and guest_suitable(vendor, request.guest_count)
    ]
