import threading, time
from typing import Any, Callable, Dict, Optional, Protocol, Tuple


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[Any]: ...
    def put(self, key: str, value: Any, ttl_seconds: float) -> None: ...
    def incr(self, key: str, ttl_seconds: float) -> int: ...


class MemoryStore:
    """
    In-process key/value store where every entry expires after its TTL.

    Shared across requests, so every operation takes the lock. Expired
    entries are swept on write once the earliest deadline has passed, and
    with a maxsize the oldest writes are evicted first.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, maxsize: Optional[int] = None):
        self._clock = clock
        self.maxsize = maxsize
        self._data: Dict[str, Tuple[Any, float]] = {}
        self._next_expiry = float("inf")
        self._lock = threading.Lock()

    def _live(self, key: str, now: float) -> Optional[Tuple[Any, float]]:
        hit = self._data.get(key)
        if hit is not None and now >= hit[1]:
            del self._data[key]
            return None
        return hit

    def _sweep(self, now: float) -> None:
        if now < self._next_expiry:
            return
        self._data = {k: v for k, v in self._data.items() if v[1] > now}
        self._next_expiry = min((v[1] for v in self._data.values()), default=float("inf"))

    def _store(self, key: str, value: Any, now: float, ttl_seconds: float) -> None:
        self._sweep(now)
        expires_at = now + ttl_seconds
        # re-insert so insertion order tracks the latest write
        self._data.pop(key, None)
        self._data[key] = (value, expires_at)
        self._next_expiry = min(self._next_expiry, expires_at)
        if self.maxsize is not None:
            while len(self._data) > self.maxsize:
                del self._data[next(iter(self._data))]

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            hit = self._live(key, self._clock())
            return None if hit is None else hit[0]

    def put(self, key: str, value: Any, ttl_seconds: float) -> None:
        with self._lock:
            self._store(key, value, self._clock(), ttl_seconds)

    def incr(self, key: str, ttl_seconds: float) -> int:
        """Add one to a counter stored as a decimal string; the TTL restarts."""
        with self._lock:
            now = self._clock()
            hit = self._live(key, now)
            try:
                count = int(hit[0]) if hit is not None else 0
            except (TypeError, ValueError):
                count = 0
            count += 1
            self._store(key, str(count), now, ttl_seconds)
            return count

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self._next_expiry = float("inf")

    def __len__(self) -> int:
        return len(self._data)
