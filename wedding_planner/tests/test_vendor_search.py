from __future__ import annotations

import random
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from wedding_planner.app import app
from wedding_planner.vendors.cache import SearchCache
from wedding_planner.vendors.catalog import real_vendors
from wedding_planner.vendors.models import Vendor, VendorSearchRequest
from wedding_planner.vendors.ranking import ScoreRanker, dedupe_key
from wedding_planner.vendors.search import VendorSearchService
from wedding_planner.vendors.sources import (
    google_places,
    location_variations,
    social_media,
    wedding_platforms,
)

REQUEST = VendorSearchRequest(category="venue", location="London")


def _vendor(vid: str, **overrides) -> Vendor:
    fields = {
        "id": vid, "name": f"Vendor {vid}", "category": "venue", "location": "London",
        "rating": 4.5, "review_count": 40, "price_range": "£1,000 - £2,500",
    }
    fields.update(overrides)
    return Vendor(**fields)


# ── Sources ──────────────────────────────────────────────────────────────


def test_google_places_leads_with_curated_vendors():
    vendors = google_places(REQUEST, random.Random(1))
    curated = real_vendors("venue")
    assert [v.id for v in vendors[:len(curated)]] == [v.id for v in curated]
    assert all(v.is_real for v in vendors[:len(curated)])
    assert 5 <= len(vendors) - len(curated) <= 14


def test_google_places_spreads_over_location_variations():
    vendors = google_places(REQUEST, random.Random(7))
    areas = set(location_variations("London"))
    assert all(v.location in areas for v in vendors if not v.is_real)


def test_wedding_platforms_are_verified_and_well_reviewed():
    vendors = wedding_platforms(REQUEST, random.Random(2))
    assert 3 <= len(vendors) <= 7
    for vendor in vendors:
        assert vendor.verified
        assert 4.5 <= vendor.rating <= 5.0
        assert 50 <= vendor.review_count <= 149
        assert vendor.response_time == "Within 1 hour"
        assert vendor.location == "London"


def test_social_media_vendors_have_full_social_presence():
    vendors = social_media(REQUEST, random.Random(3))
    assert 2 <= len(vendors) <= 5
    for vendor in vendors:
        assert set(vendor.social_media) == {"facebook", "instagram", "twitter"}
        assert len(vendor.images) == 5


def test_unknown_category_still_generates_listings():
    request = VendorSearchRequest(category="balloons", location="York")
    vendors = google_places(request, random.Random(4))
    assert vendors
    assert all(v.name == "Professional Wedding Services" for v in vendors)


def test_location_variations_generic_city():
    assert location_variations("York") == ["York", "York City Centre", "Greater York", "York Suburbs"]


def test_seeded_rng_is_reproducible():
    first = wedding_platforms(REQUEST, random.Random(99))
    second = wedding_platforms(REQUEST, random.Random(99))
    assert [v.model_dump() for v in first] == [v.model_dump() for v in second]


# ── Search service ───────────────────────────────────────────────────────


def test_search_pipeline_filters_dedups_and_caches():
    service = VendorSearchService(SearchCache(), ranker=ScoreRanker(), rng=random.Random(5))

    outcome = service.search(REQUEST)

    assert outcome.cache_used is False
    assert outcome.strategy == "score"
    assert outcome.sources == ["google_places", "wedding_platforms", "social_media"]
    keys = [dedupe_key(v) for v in outcome.vendors]
    assert len(keys) == len(set(keys))
    assert all(v.category == "venue" for v in outcome.vendors)

    again = service.search(REQUEST)
    assert again.cache_used is True
    assert [v.id for v in again.vendors] == [v.id for v in outcome.vendors]


def test_search_skips_failing_source():
    def broken(request, rng):
        raise RuntimeError("upstream down")

    service = VendorSearchService(
        SearchCache(),
        sources={"broken": broken, "static": lambda request, rng: [_vendor("ok")]},
    )
    outcome = service.search(REQUEST)

    assert [v.id for v in outcome.vendors] == ["ok"]
    assert outcome.sources == ["static"]


def test_search_excludes_disjoint_budgets():
    candidates = [
        _vendor("cheap", price_range="£500-£1,000"),
        _vendor("fits", price_range="£5,000-£10,000"),
    ]
    service = VendorSearchService(SearchCache(), sources={"static": lambda request, rng: candidates})
    request = VendorSearchRequest(category="venue", location="London", budget_range="Over £5,000")

    assert [v.id for v in service.search(request).vendors] == ["fits"]


def test_search_uses_injected_ranker():
    ranker = MagicMock()
    ranker.rank.side_effect = lambda vendors, request: (list(reversed(vendors)), "llm")
    candidates = [_vendor("a"), _vendor("b")]
    service = VendorSearchService(
        SearchCache(), ranker=ranker, sources={"static": lambda request, rng: candidates},
    )

    outcome = service.search(REQUEST)

    assert [v.id for v in outcome.vendors] == ["b", "a"]
    assert outcome.strategy == "llm"
    ranker.rank.assert_called_once()


def test_cache_hit_refilters_for_guest_count():
    candidates = [
        _vendor("big", price_range="", price_indicator="$$$$", features=["Grand ballroom"]),
        _vendor("pp", price_range="£50 - £60 per person", price_indicator="$$"),
    ]
    gathered = MagicMock(side_effect=lambda request, rng: candidates)
    service = VendorSearchService(SearchCache(), sources={"static": gathered})

    def search(guests):
        return service.search(VendorSearchRequest(
            category="venue", location="London", budget_range="Under £1,000", guest_count=guests,
        ))

    small = search(10)
    large = search(300)

    assert [v.id for v in small.vendors] == ["pp"]
    assert large.cache_used is True
    assert [v.id for v in large.vendors] == ["big"]
    assert large.sources == ["static"]
    gathered.assert_called_once()


# ── HTTP ─────────────────────────────────────────────────────────────────


def test_vendor_search_requires_login():
    c = TestClient(app)
    resp = c.post("/vendor-search", json={"category": "venue", "location": "London"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized"}


def test_vendor_search_missing_fields(logged_in_client):
    resp = logged_in_client.post("/vendor-search", json={"category": "venue"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields: location"}


def test_vendor_search_missing_both_fields(logged_in_client):
    resp = logged_in_client.post("/vendor-search", json={})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields: category, location"}


def test_vendor_search_invalid_guest_count(logged_in_client):
    resp = logged_in_client.post(
        "/vendor-search", json={"category": "venue", "location": "London", "guestCount": 0},
    )
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error.startswith("Invalid value for ")
    assert "guest" in error.lower()


def test_vendor_search_returns_ranked_vendors(logged_in_client):
    app.state.search_cache.clear()
    body = {
        "category": "photographer",
        "location": "Manchester",
        "budgetRange": "",
        "guestCount": "120",
        "preferences": ["candid"],
    }

    resp = logged_in_client.post("/vendor-search", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["message"] == "Vendor search completed successfully"
    assert data["search_id"].startswith("search_")
    meta = data["search_metadata"]
    assert meta["total_results"] == len(data["vendors"])
    assert meta["cache_used"] is False
    assert meta["ai_ranking_applied"] is False
    assert meta["sources"] == ["google_places", "wedding_platforms", "social_media"]
    assert all(v["category"] == "photographer" for v in data["vendors"])

    resp2 = logged_in_client.post("/vendor-search", json=body)
    assert resp2.json()["search_metadata"]["cache_used"] is True
    assert [v["id"] for v in resp2.json()["vendors"]] == [v["id"] for v in data["vendors"]]


def test_vendor_categories(logged_in_client):
    resp = logged_in_client.get("/vendor-search", params={"action": "categories"})
    assert resp.status_code == 200
    ids = [c["id"] for c in resp.json()["categories"]]
    assert ids == ["venue", "photographer", "catering", "florist", "music", "decoration"]


def test_vendor_search_history_is_empty(logged_in_client):
    resp = logged_in_client.get("/vendor-search", params={"action": "history"})
    assert resp.json() == {"success": True, "search_history": []}


def test_vendor_search_capabilities(logged_in_client):
    resp = logged_in_client.get("/vendor-search")
    data = resp.json()
    assert data["message"] == "Vendor search API is ready"
    assert "hit_rate" in data["cache"]
