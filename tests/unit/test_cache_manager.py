"""Tests for the cache table manager."""

import threading

import pytest

from app.repositories.common.cache import DEFAULT_TABLES, WARM_UP_QUERIES, CacheTableManager
from app.repositories.common.monitor import CacheMonitor
from app.repositories.datasets import DatasetRepository
from app.services.processing.pipeline import DataProcessor


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def manager(clock):
    m = CacheTableManager(ttl_seconds=300, max_size=3, clock=clock)
    m.initialize_cache_tables()
    return m


class TestTables:
    def test_default_tables(self, manager):
        assert len(manager.get_cache_table_names()) == len(DEFAULT_TABLES) == 19
        assert manager.has_cache_table("admin_dashboard_cache")

    def test_access_is_recorded(self, manager):
        manager.get_cache_table("users_cache")
        manager.get_cache_table("users_cache")
        assert manager.get_cache_stats()["tables"]["users_cache"]["access_count"] == 2

    def test_invalid_configuration(self):
        with pytest.raises(ValueError):
            CacheTableManager(ttl_seconds=0)
        with pytest.raises(ValueError):
            CacheTableManager(max_size=-1)


class TestUnknownTable:
    def test_neutral_results(self, manager):
        assert manager.store_in_cache_table("nope", "k", 1) is False
        assert manager.get_from_cache_table("nope", "k") is None
        assert manager.cleanup_cache_table("nope") == 0
        assert manager.remove_lru_entries("nope") == 0
        assert manager.clear_cache_table("nope") is False


class TestEntries:
    def test_store_and_get(self, manager):
        filters = {"status": "active"}
        assert manager.store_data("users_cache", "active_users", [{"id": 1}], filters)
        assert manager.get_data("users_cache", "active_users", filters) == [{"id": 1}]

    def test_nested_payload_edits_do_not_leak(self, manager):
        manager.store_data("admin_dashboard_cache", "admin_dashboard", {"top_trends": [1]})

        manager.get_data("admin_dashboard_cache", "admin_dashboard")["top_trends"].append(99)
        assert manager.get_data("admin_dashboard_cache", "admin_dashboard") == {"top_trends": [1]}

    def test_filter_order_does_not_matter(self, manager):
        manager.store_data("users_cache", "op", "x", {"a": 1, "b": 2})
        assert manager.get_data("users_cache", "op", {"b": 2, "a": 1}) == "x"

    def test_expiry(self, manager, clock):
        manager.store_data("courses_cache", "all", [1])

        clock.advance(299)
        assert manager.get_data("courses_cache", "all") == [1]

        clock.advance(2)
        assert manager.get_data("courses_cache", "all") is None

        stats = manager.get_cache_stats()["tables"]["courses_cache"]
        assert stats["entries"] == 0
        assert stats["total_hits"] == 1
        assert stats["total_misses"] == 1
        assert stats["hit_rate"] == 50.0

    def test_capacity_bound(self, manager, clock):
        for i in range(5):
            manager.store_data("skills_cache", f"op-{i}", i)
            clock.advance(1)

        assert manager.get_cache_stats()["tables"]["skills_cache"]["entries"] == 3
        assert manager.get_data("skills_cache", "op-0") is None
        assert manager.get_data("skills_cache", "op-4") == 4


class TestMaintenance:
    def test_cleanup_all(self, manager, clock):
        manager.store_data("users_cache", "a", 1)
        manager.store_data("courses_cache", "b", 2)
        clock.advance(301)
        manager.store_data("courses_cache", "c", 3)

        assert manager.cleanup_all_cache_tables() == 2
        assert manager.get_cache_stats()["total_entries"] == 1

    def test_remove_lru(self, manager, clock):
        manager.store_data("users_cache", "a", 1)
        clock.advance(1)
        manager.store_data("users_cache", "b", 2)

        assert manager.remove_lru_entries("users_cache", count=1) == 1
        assert manager.get_data("users_cache", "a") is None
        assert manager.get_data("users_cache", "b") == 2

    def test_clear_all(self, manager):
        manager.store_data("users_cache", "a", 1)
        manager.store_data("tests_cache", "b", 2)
        manager.clear_all_cache_tables()
        assert manager.get_cache_stats()["total_entries"] == 0

    def test_sweep_skipped_while_running(self, manager):
        assert manager.run_maintenance() is True

        manager._sweep_lock.acquire()
        try:
            assert manager.run_maintenance() is False
        finally:
            manager._sweep_lock.release()


class TestStats:
    def test_shape(self, manager):
        manager.store_data("users_cache", "a", [{"id": "user-1"}])
        stats = manager.get_cache_stats()

        assert stats["total_tables"] == 19
        assert stats["total_entries"] == 1
        table = stats["tables"]["users_cache"]
        assert table["data_type"] == "users"
        assert table["memory_bytes"] > 0
        assert table["memory_usage"].endswith(" KB")

    def test_empty_table_uses_no_memory(self, manager):
        assert manager.get_cache_stats()["tables"]["teams_cache"]["memory_bytes"] == 0


class TestConcurrency:
    def test_access_counts_are_not_lost(self, manager):
        def touch():
            for _ in range(500):
                manager.get_cache_table("users_cache")

        threads = [threading.Thread(target=touch) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert manager.get_cache_stats()["tables"]["users_cache"]["access_count"] == 4000

    def test_create_tables_during_stats_pass(self, manager):
        errors = []
        done = threading.Event()

        def read_stats():
            try:
                while not done.is_set():
                    manager.get_cache_stats()
                    manager.clear_all_cache_tables()
            except Exception as e:
                errors.append(e)

        reader = threading.Thread(target=read_stats)
        reader.start()
        try:
            for i in range(200):
                manager.create_cache_table(f"extra_{i}_cache", "extra")
        finally:
            done.set()
            reader.join()

        assert errors == []
        assert manager.get_cache_stats()["total_tables"] == 19 + 200


class TestWarmUp:
    def test_precomputes_common_queries(self, manager):
        repo = DatasetRepository()
        stored = manager.warm_up_cache(DataProcessor(), repo.collections())

        assert stored == len(WARM_UP_QUERIES)
        users = manager.get_data("users_cache", "active_users")
        assert [u["id"] for u in users] == ["user-1", "user-2", "user-3"]
        exercises = manager.get_data("exercises_cache", "popular_exercises")
        assert [e["id"] for e in exercises] == ["exercise-1", "exercise-2"]

    def test_missing_dataset_is_skipped(self, manager):
        assert manager.warm_up_cache(DataProcessor(), {"users": []}) == 2


class TestMonitor:
    def test_runs_task_until_stopped(self):
        ran = threading.Event()
        monitor = CacheMonitor(ran.set, interval_seconds=0.01).start()
        try:
            assert ran.wait(2)
        finally:
            monitor.stop(timeout=2)
        assert not monitor.running
        assert monitor.runs >= 1

    def test_manager_monitoring(self, manager):
        monitor = manager.start_cache_monitoring(interval_seconds=0.01)
        assert manager.start_cache_monitoring(interval_seconds=0.01) is monitor
        manager.stop_cache_monitoring()
        assert not monitor.running

    def test_invalid_interval(self):
        with pytest.raises(ValueError):
            CacheMonitor(lambda: None, interval_seconds=0)
