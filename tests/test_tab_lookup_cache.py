from __future__ import annotations

import threading
import time

from songsterr.cache import TabLookupCache, get_tab_lookup_cache


def test_second_lookup_is_served_from_cache() -> None:
    cache = TabLookupCache()
    calls = {"count": 0}

    def compute():
        calls["count"] += 1
        return "https://www.songsterr.com/a/wsa/s1"

    first = cache.get_or_compute("Hey Jude", "The Beatles", compute)
    second = cache.get_or_compute("Hey Jude", "The Beatles", compute)

    assert first == second == "https://www.songsterr.com/a/wsa/s1"
    assert calls["count"] == 1


def test_no_match_is_cached() -> None:
    cache = TabLookupCache()
    calls = {"count": 0}

    def compute():
        calls["count"] += 1
        return None

    assert cache.get_or_compute("Unknown", "Nobody", compute) is None
    assert cache.get_or_compute("Unknown", "Nobody", compute) is None
    assert calls["count"] == 1
    assert "unknown::nobody" in cache


def test_equivalent_queries_share_one_entry() -> None:
    cache = TabLookupCache()
    calls = {"count": 0}

    def compute():
        calls["count"] += 1
        return "https://www.songsterr.com/a/wsa/s1"

    cache.get_or_compute("Hey Jude", "The Beatles", compute)
    result = cache.get_or_compute("  hey   jude!", "the beatles", compute)

    assert result == "https://www.songsterr.com/a/wsa/s1"
    assert calls["count"] == 1
    assert len(cache) == 1


def test_distinct_queries_compute_separately() -> None:
    cache = TabLookupCache()

    cache.get_or_compute("Hey Jude", "The Beatles", lambda: "a")
    cache.get_or_compute("Let It Be", "The Beatles", lambda: None)

    assert len(cache) == 2


def test_failing_compute_is_stored_as_no_match() -> None:
    cache = TabLookupCache()
    calls = {"count": 0}

    def compute():
        calls["count"] += 1
        raise RuntimeError("boom")

    assert cache.get_or_compute("Hey Jude", "The Beatles", compute) is None
    assert cache.get_or_compute("Hey Jude", "The Beatles", compute) is None
    assert calls["count"] == 1


def test_concurrent_callers_for_same_key_compute_once() -> None:
    cache = TabLookupCache()
    calls = {"count": 0}
    calls_lock = threading.Lock()
    start = threading.Barrier(8)
    results = []

    def compute():
        with calls_lock:
            calls["count"] += 1
        time.sleep(0.05)
        return "https://www.songsterr.com/a/wsa/s1"

    def worker():
        start.wait()
        results.append(cache.get_or_compute("Hey Jude", "The Beatles", compute))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert calls["count"] == 1
    assert results == ["https://www.songsterr.com/a/wsa/s1"] * 8


def test_default_cache_is_process_wide() -> None:
    assert get_tab_lookup_cache() is get_tab_lookup_cache()
