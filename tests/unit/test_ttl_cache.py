"""Tests for the TTL cache."""

import pytest

from app.repositories.common.ttl_cache import EvictionPolicy, TTLCache, make_cache_key


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestExpiry:
    def test_fresh_before_ttl(self):
        clock = FakeClock()
        cache = TTLCache(300, clock=clock)
        cache.set("k", [1, 2])

        clock.advance(299)
        assert cache.get("k") == [1, 2]
        assert cache.stats.hits == 1

    def test_expired_after_ttl(self):
        clock = FakeClock()
        cache = TTLCache(300, clock=clock)
        cache.set("k", [1, 2])

        clock.advance(301)
        assert cache.get("k") is None
        assert cache.stats.misses == 1
        assert cache.stats.expired == 1
        assert len(cache) == 0

    def test_expired_at_exact_ttl(self):
        clock = FakeClock()
        cache = TTLCache(300, clock=clock)
        cache.set("k", "v")

        clock.advance(300)
        assert not cache.is_valid("k")

    def test_overwrite_refreshes_expiry(self):
        clock = FakeClock()
        cache = TTLCache(300, clock=clock)
        cache.set("k", "old")
        clock.advance(200)
        cache.set("k", "new")
        clock.advance(200)
        assert cache.get("k") == "new"

    def test_purge_expired(self):
        clock = FakeClock()
        cache = TTLCache(10, clock=clock)
        cache.set("a", 1)
        clock.advance(5)
        cache.set("b", 2)
        clock.advance(6)

        assert cache.purge_expired() == 1
        assert cache.keys() == ["b"]

    def test_is_valid_does_not_count(self):
        cache = TTLCache(300, clock=FakeClock())
        cache.set("k", 1)
        assert cache.is_valid("k")
        assert "missing" not in cache
        assert cache.stats.hits == cache.stats.misses == 0


class TestCapacity:
    def test_lru_eviction(self):
        clock = FakeClock()
        cache = TTLCache(300, max_size=3, policy=EvictionPolicy.TTL_LRU, clock=clock)
        for key in ("a", "b", "c"):
            cache.set(key, key)
            clock.advance(1)

        cache.get("a")
        clock.advance(1)
        cache.set("d", "d")

        assert sorted(cache.keys()) == ["a", "c", "d"]
        assert cache.stats.evicted == 1

    def test_expired_entries_go_first(self):
        clock = FakeClock()
        cache = TTLCache(10, max_size=2, policy=EvictionPolicy.TTL_LRU, clock=clock)
        cache.set("a", 1)
        clock.advance(5)
        cache.set("b", 2)
        clock.advance(6)
        cache.set("c", 3)

        assert sorted(cache.keys()) == ["b", "c"]
        assert cache.stats.expired == 1
        assert cache.stats.evicted == 0

    def test_evict_lru_ignores_expiry(self):
        clock = FakeClock()
        cache = TTLCache(300, max_size=10, policy=EvictionPolicy.TTL_LRU, clock=clock)
        cache.set("a", 1)
        clock.advance(1)
        cache.set("b", 2)

        assert cache.evict_lru(1) == 1
        assert cache.keys() == ["b"]
        assert cache.evict_lru(0) == 0


class TestStats:
    def test_hit_rate(self):
        cache = TTLCache(300, clock=FakeClock())
        cache.set("k", 1)
        for _ in range(3):
            cache.get("k")
        cache.get("missing")

        assert cache.stats.hit_rate == 75.0

    def test_hit_rate_without_lookups(self):
        assert TTLCache(300).stats.hit_rate == 0

    def test_clear_keeps_counters(self):
        cache = TTLCache(300, clock=FakeClock())
        cache.set("k", 1)
        cache.get("k")
        cache.clear()

        assert len(cache) == 0
        assert cache.stats.hits == 1


class TestOwnership:
    def test_returned_value_is_a_copy(self):
        cache = TTLCache(300, clock=FakeClock())
        cache.set("k", [1, 2])

        cache.get("k").append(3)
        assert cache.get("k") == [1, 2]

    def test_stored_value_is_a_copy(self):
        cache = TTLCache(300, clock=FakeClock())
        data = [1, 2]
        cache.set("k", data)

        data.append(3)
        assert cache.get("k") == [1, 2]

    def test_nested_records_are_copied(self):
        cache = TTLCache(300, clock=FakeClock())
        records = [{"id": "u1", "status": "active", "skills": ["SQL"]}]
        cache.set("k", records)

        records[0]["status"] = "inactive"
        hit = cache.get("k")
        hit[0]["skills"].append("React")

        assert cache.get("k") == [{"id": "u1", "status": "active", "skills": ["SQL"]}]

    def test_entries_snapshot_is_detached(self):
        cache = TTLCache(300, clock=FakeClock())
        cache.set("k", {"top_trends": [1]})

        cache.entries()[0].value["top_trends"].append(99)
        assert cache.get("k") == {"top_trends": [1]}


class TestValidation:
    def test_non_positive_ttl(self):
        with pytest.raises(ValueError):
            TTLCache(0)

    def test_non_positive_size(self):
        with pytest.raises(ValueError):
            TTLCache(300, max_size=0)

    def test_lru_needs_size(self):
        with pytest.raises(ValueError):
            TTLCache(300, policy=EvictionPolicy.TTL_LRU)


class TestCacheKey:
    def test_filter_order_normalized(self):
        assert make_cache_key("op", {"a": 1, "b": 2}) == make_cache_key("op", {"b": 2, "a": 1})

    def test_sort_and_order_distinguish(self):
        keys = {
            make_cache_key("op"),
            make_cache_key("op", sort_by="name"),
            make_cache_key("op", sort_by="name", order="desc"),
            make_cache_key("op", {"name": "x"}),
        }
        assert len(keys) == 4

    def test_operation_recoverable(self):
        key = make_cache_key("users:active", {"note": "a:b"})
        assert key.rsplit(":", 1)[0] == "users:active"

    def test_no_filters_equals_empty_filters(self):
        assert make_cache_key("op", None) == make_cache_key("op", {})
