"""In-memory TTL cache shared by provider lookups."""
import threading
import time
from typing import Callable, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")

class TTLCache(Generic[T]):
    """Key/value store whose entries expire ``ttl`` seconds after being set.

    Safe to share between threads; expired entries are dropped lazily on read.
    """

    def __init__(self, ttl: float = 60.0, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._store: Dict[str, Tuple[T, float]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            hit = self._store.get(key)
            if hit is None:
                return None
            value, expires_at = hit
            if expires_at < self._clock():
                del self._store[key]
                return None
            return value

    def set(self, key: str, value: T) -> None:
        with self._lock:
            self._store[key] = (value, self._clock() + self.ttl)

    def get_or_set(self, key: str, factory: Callable[[], T]) -> T:
        """Return the cached value or compute, store and return it."""
        hit = self.get(key)
        if hit is not None:
            return hit
        value = factory()
        self.set(key, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
