from __future__ import annotations

from wedding_planner.vendors.cache import SearchCache, make_key
from wedding_planner.vendors.models import VendorSearchRequest


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


# ── Keys ─────────────────────────────────────────────────────────────────


def test_key_defaults_budget_and_radius():
    request = VendorSearchRequest(category="venue", location="London")
    assert make_key(request) == "venue-London-any-50"


def test_key_treats_any_budget_as_any():
    request = VendorSearchRequest(category="venue", location="London", budget_range="any-budget")
    assert make_key(request) == "venue-London-any-50"


def test_key_includes_budget_and_radius():
    request = VendorSearchRequest(
        category="florist", location="Leeds", budgetRange="£1,000 - £2,500", radius=25,
    )
    assert make_key(request) == "florist-Leeds-£1,000 - £2,500-25"


# ── TTL behaviour ────────────────────────────────────────────────────────


def test_cache_miss_then_hit():
    cache = SearchCache(ttl_seconds=60, clock=FakeClock())
    assert cache.get("k") is None
    cache.set("k", "value")
    assert cache.get("k") == "value"

    stats = cache.stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["hit_rate"] == 50.0


def test_entry_expires_after_ttl():
    clock = FakeClock()
    cache = SearchCache(ttl_seconds=60, clock=clock)
    cache.set("k", "value")

    clock.now += 59
    assert cache.get("k") == "value"

    clock.now += 1
    assert cache.get("k") is None
    assert cache.stats()["size"] == 0


def test_write_sweeps_expired_entries():
    clock = FakeClock()
    cache = SearchCache(ttl_seconds=60, clock=clock)
    cache.set("old", 1)
    clock.now += 120
    cache.set("new", 2)
    assert cache.stats()["size"] == 1


def test_evict_expired_reports_count():
    clock = FakeClock()
    cache = SearchCache(ttl_seconds=10, clock=clock)
    cache.set("a", 1)
    cache.set("b", 2)
    clock.now += 11
    assert cache.evict_expired() == 2


def test_last_write_wins():
    cache = SearchCache(clock=FakeClock())
    cache.set("k", "first")
    cache.set("k", "second")
    assert cache.get("k") == "second"


def test_default_ttl_is_thirty_minutes():
    assert SearchCache().ttl_seconds == 1800


def test_clear_resets_counters():
    cache = SearchCache(clock=FakeClock())
    cache.set("k", 1)
    cache.get("k")
    cache.clear()
    assert cache.stats() == {"size": 0, "hits": 0, "misses": 0, "hit_rate": 0.0}
