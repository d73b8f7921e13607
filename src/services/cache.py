"""In-process key-value cache with per-entry TTL and prefix invalidation."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 300


@dataclass
class CacheEntry:
    value: Any
    stored_at: float
    ttl_seconds: float

    def is_expired(self, now: float) -> bool:
        return self.stored_at + self.ttl_seconds < now


class TTLCache:
    """Caches fetched resources for the lifetime of the process.

    Expiry is checked on read; an expired entry is dropped and reported as
    absent. ``clock`` returns seconds and can be replaced in tests.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            self._entries.pop(key, None)
            logger.debug("Cache entry expired", extra={"event": "cache.expired", "key": key})
            return None
        return entry.value

    def set(self, key: str, value: Any, ttl_seconds: float = DEFAULT_TTL_SECONDS) -> None:
        self._entries[key] = CacheEntry(value=value, stored_at=self._clock(), ttl_seconds=ttl_seconds)

    def has(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and not entry.is_expired(self._clock())

    def remove(self, key: str) -> None:
        self._entries.pop(key, None)

    def remove_by_prefix(self, prefix: str) -> int:
        """Drop every key starting with ``prefix``; return how many were dropped."""
        to_delete = [key for key in self._entries if key.startswith(prefix)]
        for key in to_delete:
            self._entries.pop(key, None)
        if to_delete:
            logger.debug(
                "Invalidated %d cache entries",
                len(to_delete),
                extra={"event": "cache.invalidated", "prefix": prefix},
            )
        return len(to_delete)

    def clear(self) -> None:
        self._entries.clear()

    def get_or_set(self, key: str, loader: Callable[[], T], ttl_seconds: float = DEFAULT_TTL_SECONDS) -> T:
        """Return the cached value for ``key``, calling ``loader`` on a miss."""
        if self.has(key):
            return self._entries[key].value
        value = loader()
        self.set(key, value, ttl_seconds)
        return value

    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for entry in self._entries.values() if not entry.is_expired(now))

    def __contains__(self, key: str) -> bool:
        return self.has(key)


def cache_key(
    namespace: str,
    identifier: Optional[Union[str, int]] = None,
    params: Optional[Mapping[str, Any]] = None,
) -> str:
    """Build ``namespace[:identifier][:{sorted non-null params}]``.

    Parameter order does not change the key, and None values are left out.
    """
    key = namespace
    if identifier is not None:
        key += f":{identifier}"
    if params is not None:
        cleaned = {name: params[name] for name in sorted(params) if params[name] is not None}
        key += ":" + json.dumps(cleaned, separators=(",", ":"), sort_keys=True, default=str)
    return key


__all__ = ["TTLCache", "CacheEntry", "cache_key", "DEFAULT_TTL_SECONDS"]
