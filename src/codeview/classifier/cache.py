"""Caching layer for classification results."""

import hashlib
import logging
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import Any

from .models import Classification

logger = logging.getLogger(__name__)


@dataclass
class CacheStatistics:
    """Hit, miss and eviction counters."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    puts: int = 0

    @property
    def total_requests(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.total_requests == 0:
            return 0.0
        return self.hits / self.total_requests


class ClassificationCache:
    """
    Thread-safe LRU cache of classification results keyed by snippet hash.

    Entries never expire: the model behind them is read-only for the life of
    the process. A ``max_size`` of zero disables storage.
    """

    def __init__(self, max_size: int = 1000):
        if max_size < 0:
            raise ValueError("Cache size cannot be negative")
        self.max_size = max_size
        self._entries: OrderedDict[str, Classification] = OrderedDict()
        self._lock = RLock()
        self.statistics = CacheStatistics()

    @staticmethod
    def key_for(snippet: str) -> str:
        """SHA-256 hex digest of a snippet."""
        return hashlib.sha256(snippet.encode("utf-8", "surrogatepass")).hexdigest()

    def get(self, snippet: str) -> Classification | None:
        """Return the cached result for a snippet, or None."""
        key = self.key_for(snippet)

        with self._lock:
            result = self._entries.get(key)
            if result is None:
                self.statistics.misses += 1
                logger.debug(f"Cache miss for key={key[:8]}...")
                return None

            self._entries.move_to_end(key)
            self.statistics.hits += 1
            logger.debug(f"Cache hit for key={key[:8]}..., language={result.language}")
            return result

    def put(self, snippet: str, result: Classification) -> None:
        """Store a result, evicting the least recently used entry when full."""
        if self.max_size == 0:
            return

        key = self.key_for(snippet)

        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self.max_size:
                oldest_key, _ = self._entries.popitem(last=False)
                self.statistics.evictions += 1
                logger.debug(f"Evicted oldest entry: key={oldest_key[:8]}...")

            self._entries[key] = result
            self.statistics.puts += 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        """Clear all entries from the cache."""
        with self._lock:
            self._entries.clear()
            logger.info("Classification cache cleared")

    def reset_statistics(self) -> None:
        with self._lock:
            self.statistics = CacheStatistics()

    def get_info(self) -> dict[str, Any]:
        """Size, capacity and counters as a plain dictionary."""
        with self._lock:
            return {
                "size": len(self._entries),
                "max_size": self.max_size,
                "hit_rate": self.statistics.hit_rate,
                "statistics": {
                    "hits": self.statistics.hits,
                    "misses": self.statistics.misses,
                    "evictions": self.statistics.evictions,
                    "puts": self.statistics.puts,
                    "total_requests": self.statistics.total_requests,
                },
            }
