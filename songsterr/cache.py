import logging
import threading
from concurrent.futures import Future
from typing import Callable

from engine.tab_normalization import canonical_key

logger = logging.getLogger(__name__)


class TabLookupCache:
    """In-memory memo of tab lookup decisions, keyed by canonical ``title::artist``.

    Both positive (URL) and negative (``None``) decisions are stored and never
    expire or get evicted. Each key holds a ``Future`` so that concurrent callers
    for the same key share one computation.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, Future] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def get_or_compute(
        self,
        title: str | None,
        artist: str | None,
        compute: Callable[[], str | None],
    ) -> str | None:
        key = canonical_key(title, artist)
        with self._lock:
            future = self._entries.get(key)
            owner = future is None
            if owner:
                future = Future()
                self._entries[key] = future
        if not owner:
            logger.debug(f"[TABCACHE] key={key!r} cache=hit")
            return future.result()

        value = None
        try:
            value = compute()
        except Exception:
            logger.exception(f"[TABCACHE] key={key!r} compute failed; storing no-match")
        finally:
            future.set_result(value)
        return value


_CACHE: TabLookupCache | None = None
_CACHE_LOCK = threading.Lock()


def get_tab_lookup_cache() -> TabLookupCache:
    global _CACHE
    if _CACHE is not None:
        return _CACHE
    with _CACHE_LOCK:
        if _CACHE is None:
            _CACHE = TabLookupCache()
    return _CACHE
