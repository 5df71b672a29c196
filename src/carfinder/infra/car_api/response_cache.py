from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Iterator

DEFAULT_TTL_SECONDS = 15 * 60
DEFAULT_MAX_ENTRIES = 256


@dataclass(frozen=True, slots=True)
class CacheEntry:
    stored_at: float
    payload: Any


class ResponseCache:
    """
    Expiring LRU cache of upstream payloads, keyed by full request URL.

    An entry is served only while ``now - stored_at < ttl``. Expired entries
    are dropped when read; the least recently used entry is evicted once
    ``max_entries`` is reached.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be > 0")
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not self._is_fresh(entry):
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return entry.payload

    def put(self, key: str, payload: Any) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(stored_at=self._clock(), payload=payload)
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def payloads(self) -> Iterator[Any]:
        """Yield every payload that has not expired, most recent last."""
        with self._lock:
            fresh = [entry.payload for entry in self._entries.values() if self._is_fresh(entry)]
        yield from fresh

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _is_fresh(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.stored_at < self._ttl
