"""In-memory query cache with explicit invalidation triggers."""
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional

from ..utils.exceptions import ConfigError
from ..utils.logger import get_logger

logger = get_logger()


class InvalidationTrigger(Enum):
    """Events that make cached query results stale."""
    TIME = "time"
    MOUNT = "mount"
    WINDOW_FOCUS = "window_focus"
    MUTATION = "mutation"


@dataclass
class CacheEntry:
    value: Any
    stored_at: float


class QueryCache:
    """Caches fetched record lists per query key (the endpoint path)."""

    def __init__(
        self,
        stale_time: float = 0.0,
        refetch_on: Iterable[InvalidationTrigger] = (
            InvalidationTrigger.MOUNT,
            InvalidationTrigger.WINDOW_FOCUS,
            InvalidationTrigger.MUTATION,
        ),
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize query cache.

        Args:
            stale_time: Seconds an entry stays fresh; 0 means always stale
            refetch_on: Event triggers that invalidate every entry
            clock: Monotonic time source
        """
        if stale_time < 0:
            raise ConfigError(f"stale_time must be >= 0, got {stale_time}")
        self.stale_time = stale_time
        self.refetch_on: FrozenSet[InvalidationTrigger] = frozenset(refetch_on)
        self.clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self.stats = {"hits": 0, "misses": 0}

    def is_fresh(self, key: str) -> bool:
        entry = self._entries.get(key)
        if entry is None:
            return False
        return self.clock() - entry.stored_at < self.stale_time

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value while fresh, else None."""
        if self.is_fresh(key):
            self.stats["hits"] += 1
            return self._entries[key].value
        self.stats["misses"] += 1
        return None

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, stored_at=self.clock())

    def fetch(self, key: str, loader: Callable[[], Any]) -> Any:
        """
        Return the fresh cached value or load and store a new one.

        Args:
            key: Query key
            loader: Zero-argument callable producing the value

        Returns:
            Cached or freshly loaded value
        """
        if self.is_fresh(key):
            self.stats["hits"] += 1
            logger.debug(f"Query cache hit: {key}")
            return self._entries[key].value

        self.stats["misses"] += 1
        logger.debug(f"Query cache miss: {key}")
        value = loader()
        self.set(key, value)
        return value

    def invalidate(self, key: Optional[str] = None) -> int:
        """
        Drop one entry, or all entries when key is None.

        Returns:
            Number of entries removed
        """
        if key is None:
            removed = len(self._entries)
            self._entries.clear()
        else:
            removed = 1 if self._entries.pop(key, None) is not None else 0
        if removed:
            logger.debug(f"Invalidated {removed} cached queries")
        return removed

    def notify(self, trigger: InvalidationTrigger) -> int:
        """
        Handle an invalidation event.

        TIME is covered by stale_time and never clears entries here; other
        triggers clear everything when listed in refetch_on.
        """
        if trigger is InvalidationTrigger.TIME or trigger not in self.refetch_on:
            return 0
        logger.info(f"Cache invalidated by {trigger.value} event")
        return self.invalidate()
