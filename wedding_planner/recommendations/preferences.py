from __future__ import annotations

import math
import re
from datetime import datetime, timedelta

from ..db.models import WeddingDetails, as_utc, utcnow
from .models import WeddingPreferences

DEFAULT_GUEST_COUNT = 50
DEFAULT_MONTHS_UNTIL_WEDDING = 12
_MONTH = timedelta(days=30)

_LEADING_INT_RE = re.compile(r"\d+")

# Representative head counts for the questionnaire buckets.
_GUEST_ESTIMATES: list[tuple[str, int]] = [
    ("1-50", 25),
    ("50-100", 75),
    ("100-150", 125),
    ("150-200", 175),
    ("200+", 250),
]

_CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "GBP": "£",
    "EUR": "€",
    "CAD": "C$",
    "AUD": "A$",
    "NZD": "NZ$",
    "CHF": "CHF",
    "SEK": "SEK",
    "NOK": "NOK",
    "DKK": "DKK",
}


def preferences_from_details(details: WeddingDetails) -> WeddingPreferences:
    """Turn a stored questionnaire into the typed input of the matching logic."""
    return WeddingPreferences(
        budget=float(details.budget or 0),
        currency=details.currency or "GBP",
        guest_count=details.guest_count,
        location=details.wedding_location or "",
        style=details.wedding_style,
        wedding_date=as_utc(details.wedding_date),
        cultural_traditions=list(details.cultural_traditions or []),
        religious_traditions=list(details.religious_traditions or []),
        planned_events=list(details.planned_events or []),
        special_requirements=details.special_requirements,
    )


def guest_count_lower_bound(bucket: str | None) -> int:
    """``"100-150"`` -> 100, ``"200+"`` -> 200, missing -> 50."""
    if not bucket:
        return DEFAULT_GUEST_COUNT
    match = _LEADING_INT_RE.search(bucket)
    if not match:
        return DEFAULT_GUEST_COUNT
    return int(match.group(0))


def guest_count_estimate(bucket: str | None) -> int:
    if not bucket:
        return 100
    for key, estimate in _GUEST_ESTIMATES:
        if key in bucket:
            return estimate
    return 100


def months_until(wedding_date: datetime | None, now: datetime | None = None) -> int:
    if wedding_date is None:
        return DEFAULT_MONTHS_UNTIL_WEDDING
    now = as_utc(now) or utcnow()
    return max(0, math.ceil((as_utc(wedding_date) - now) / _MONTH))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def currency_symbol(currency: str | None) -> str:
    return _CURRENCY_SYMBOLS.get((currency or "").upper(), "$")


def format_money(amount: float, currency: str | None = "GBP") -> str:
    return f"{currency_symbol(currency)}{round_half_up(amount):,}"


def format_money_range(low: float, high: float, currency: str | None = "GBP") -> str:
    return f"{format_money(low, currency)} - {format_money(high, currency)}"
