import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Optional, Sequence

from loguru import logger

from seo_intel.schemas.analysis import CacheStats


def fingerprint(scores: Sequence[int]) -> str:
    """Cache key for a score tuple, e.g. (72, 4, 81, 66) -> "72-4-81-66"."""
    return "-".join(str(score) for score in scores)


class AnalysisCache:
    """
    Bounded in-memory LRU cache for synthesized analysis payloads.

    Entries may also expire after a TTL. All operations take a lock so the
    cache can be shared by request threads.
    """

    def __init__(
        self,
        max_size: int = 512,
        ttl: int = 3600,
        timer: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.

        Args:
            max_size: Maximum number of entries kept
            ttl: Time-to-live in seconds; 0 disables expiry
            timer: Monotonic clock used for expiry
        """
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self.ttl = ttl
        self.timer = timer
        self._entries = OrderedDict()  # key -> (value, timestamp)
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self.misses += 1
                return None

            value, timestamp = entry
            if self._expired(timestamp):
                del self._entries[key]
                self.misses += 1
                return None

            self._entries.move_to_end(key)
            self.hits += 1
            return value

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            self._entries[key] = (value, self.timer())

            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted analysis cache entry {evicted}")

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and not self._expired(entry[1])

    def _expired(self, timestamp: float) -> bool:
        return self.ttl > 0 and self.timer() - timestamp > self.ttl

    @property
    def stats(self) -> CacheStats:
        """Get cache statistics."""
        with self._lock:
            return CacheStats(
                size=len(self._entries),
                max_size=self.max_size,
                ttl=self.ttl,
                hits=self.hits,
                misses=self.misses,
            )
