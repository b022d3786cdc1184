from __future__ import annotations

import math

from wedding_planner.vendors.filters import (
    budget_overlaps,
    filter_candidates,
    guest_suitable,
    location_matches,
    parse_price_range,
)
from wedding_planner.vendors.models import Vendor, VendorSearchRequest


def _vendor(**overrides) -> Vendor:
    fields = {
        "id": "v1",
        "name": "Ivy House",
        "category": "venue",
        "location": "London",
        "rating": 4.5,
        "review_count": 10,
        "price_range": "£1,000 - £2,500",
        "price_indicator": "$$",
    }
    fields.update(overrides)
    return Vendor(**fields)


def _request(**overrides) -> VendorSearchRequest:
    fields = {"category": "venue", "location": "London"}
    fields.update(overrides)
    return VendorSearchRequest(**fields)


# ── parse_price_range ────────────────────────────────────────────────────


def test_parse_under():
    assert parse_price_range("Under £5,000") == (0.0, 5000.0)


def test_parse_over_is_open_ended():
    assert parse_price_range("Over £10,000") == (10000.0, math.inf)


def test_parse_plus_is_open_ended():
    assert parse_price_range("£10,000+") == (10000.0, math.inf)


def test_parse_range_with_spaces():
    assert parse_price_range("£1,000 - £2,500") == (1000.0, 2500.0)


def test_parse_range_without_spaces():
    assert parse_price_range("£500-£1,000") == (500.0, 1000.0)


def test_parse_thousands_suffix():
    assert parse_price_range("10k - 20k") == (10000.0, 20000.0)


def test_parse_single_figure():
    assert parse_price_range("£5,000") == (5000.0, 5000.0)


def test_parse_no_constraint():
    assert parse_price_range(None) is None
    assert parse_price_range("") is None
    assert parse_price_range("any-budget") is None
    assert parse_price_range("Flexible") is None


# ── budget overlap ───────────────────────────────────────────────────────


def test_disjoint_budgets_do_not_overlap():
    assert not budget_overlaps((500, 1000), (5000, 10000))


def test_touching_budgets_overlap():
    assert budget_overlaps((1000, 2500), (2500, 5000))


def test_open_ended_vendor_overlaps_high_budget():
    assert budget_overlaps((10000, math.inf), (20000, math.inf))


def test_missing_bounds_never_exclude():
    assert budget_overlaps(None, (0, 10))
    assert budget_overlaps((0, 10), None)


# ── location ─────────────────────────────────────────────────────────────


def test_location_substring_either_way():
    assert location_matches("Mayfair, London", "london")
    assert location_matches("London", "Central London")


def test_location_nearby_region():
    assert location_matches("Surrey", "London")
    assert location_matches("Salford", "Manchester")


def test_location_unrelated_city():
    assert not location_matches("Leeds", "London")
    assert not location_matches("Surrey", "Manchester")


# ── guest suitability ────────────────────────────────────────────────────


def test_large_wedding_needs_capacity_or_high_tier():
    assert not guest_suitable(_vendor(features=["Bridal suite"], price_indicator="$"), 250)
    assert guest_suitable(_vendor(features=["Bridal suite"], price_indicator="$$$"), 250)
    assert guest_suitable(_vendor(features=["Grand ballroom"], price_indicator="$"), 250)


def test_small_wedding_excludes_top_tier_without_intimate_space():
    assert not guest_suitable(_vendor(features=["Dance floor"], price_indicator="$$$$"), 30)
    assert guest_suitable(_vendor(features=["Intimate garden room"], price_indicator="$$$$"), 30)
    assert guest_suitable(_vendor(features=["Dance floor"], price_indicator="$$"), 30)


def test_mid_size_and_unknown_guest_counts_pass():
    vendor = _vendor(price_indicator="$")
    assert guest_suitable(vendor, 120)
    assert guest_suitable(vendor, None)


def test_non_venue_categories_ignore_guest_count():
    photographer = _vendor(category="photographer", price_indicator="$")
    assert guest_suitable(photographer, 400)
    assert guest_suitable(photographer, 10)


# ── filter_candidates ────────────────────────────────────────────────────


def test_filter_excludes_disjoint_budget_and_keeps_order():
    vendors = [
        _vendor(id="a", price_range="£5,000-£10,000"),
        _vendor(id="b", price_range="£500-£1,000"),
        _vendor(id="c", price_range="£10,000+"),
    ]
    result = filter_candidates(vendors, _request(budget_range="£5,000 - £20,000"))
    assert [v.id for v in result] == ["a", "c"]


def test_filter_any_budget_keeps_everything_in_location():
    vendors = [_vendor(id="a"), _vendor(id="b", location="Leeds")]
    result = filter_candidates(vendors, _request(budget_range="any-budget"))
    assert [v.id for v in result] == ["a"]


def test_filter_scales_per_person_prices_by_guest_count():
    caterer = _vendor(id="cater", category="catering", price_range="£85 - £180 per person")
    matched = filter_candidates([caterer], _request(
        category="catering", budget_range="£10,000 - £20,000", guest_count=100,
    ))
    assert [v.id for v in matched] == ["cater"]


def test_filter_no_match_returns_empty_list():
    assert filter_candidates([_vendor(location="Glasgow")], _request()) == []
