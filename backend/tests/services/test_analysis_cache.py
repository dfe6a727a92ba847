import threading

import pytest

from seo_intel.services.analyzer.analysis_cache import AnalysisCache, fingerprint


class FakeTimer:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_fingerprint():
    assert fingerprint((72, 4, 81, 66)) == "72-4-81-66"
    assert fingerprint([50, 2, 60, 50]) == "50-2-60-50"


def test_get_and_put():
    cache = AnalysisCache(max_size=4)

    assert cache.get("a") is None
    cache.put("a", {"value": 1})

    assert cache.get("a") == {"value": 1}
    assert "a" in cache
    assert len(cache) == 1


def test_least_recently_used_entry_is_evicted():
    cache = AnalysisCache(max_size=2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.put("c", 3)

    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache
    assert len(cache) == 2


def test_put_existing_key_refreshes_value():
    cache = AnalysisCache(max_size=2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    cache.put("c", 3)

    assert cache.get("a") == 10
    assert "b" not in cache


def test_entries_expire_after_ttl():
    timer = FakeTimer()
    cache = AnalysisCache(max_size=4, ttl=10, timer=timer)
    cache.put("a", 1)

    timer.now = 10
    assert cache.get("a") == 1

    timer.now = 11
    assert cache.get("a") is None
    assert len(cache) == 0


def test_zero_ttl_never_expires():
    timer = FakeTimer()
    cache = AnalysisCache(max_size=4, ttl=0, timer=timer)
    cache.put("a", 1)

    timer.now = 10 ** 9

    assert cache.get("a") == 1


def test_stats_track_hits_and_misses():
    cache = AnalysisCache(max_size=8, ttl=60)
    cache.put("a", 1)
    cache.get("a")
    cache.get("a")
    cache.get("missing")

    stats = cache.stats

    assert stats.size == 1
    assert stats.max_size == 8
    assert stats.ttl == 60
    assert stats.hits == 2
    assert stats.misses == 1


def test_clear_resets_entries_and_counters():
    cache = AnalysisCache()
    cache.put("a", 1)
    cache.get("a")
    cache.get("b")

    cache.clear()

    assert len(cache) == 0
    assert cache.stats.hits == 0
    assert cache.stats.misses == 0


def test_delete():
    cache = AnalysisCache()
    cache.put("a", 1)

    cache.delete("a")
    cache.delete("never-added")

    assert "a" not in cache


def test_invalid_max_size():
    with pytest.raises(ValueError):
        AnalysisCache(max_size=0)


def test_concurrent_puts_respect_bound():
    cache = AnalysisCache(max_size=50)

    def worker(offset):
        for i in range(200):
            cache.put(f"{offset}-{i}", i)
            cache.get(f"{offset}-{i // 2}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 50
    assert cache.stats.hits + cache.stats.misses == 8 * 200
