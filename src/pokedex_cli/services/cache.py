"""Expiring in-memory cache for raw API responses."""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Protocol

_logger = logging.getLogger(__name__)


class Cache(Protocol):
    """Cache interface for raw response bodies keyed by request URL."""

    def get(self, key: str) -> tuple[bytes, bool]:
        """Return the stored bytes and whether the key was present."""

    def set(self, key: str, value: bytes) -> None:
        """Store bytes under a key, replacing any previous entry."""


@dataclass(frozen=True)
class _CacheEntry:
    created_at: float
    value: bytes


class ExpiringCache(Cache):
    """Thread-safe cache whose entries are reaped by a background thread.

    The reaper wakes every ``ttl_seconds`` and drops entries older than the
    TTL, so an entry may survive up to roughly twice the TTL. Lookups never
    check age.
    """

    def __init__(self, ttl_seconds: float) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = float(ttl_seconds)
        self._entries: dict[str, _CacheEntry] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def get(self, key: str) -> tuple[bytes, bool]:
        """Return ``(value, True)`` if the key is stored, else ``(b"", False)``."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return b"", False
        return entry.value, True

    def set(self, key: str, value: bytes) -> None:
        """Store a value stamped with the current time."""
        entry = _CacheEntry(created_at=time.monotonic(), value=bytes(value))
        with self._lock:
            self._entries[key] = entry

    def stop(self, timeout: float | None = None) -> None:
        """Stop the reaper thread. Stored entries stay readable."""
        self._stopped.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join(timeout)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _reap_loop(self) -> None:
        next_tick = time.monotonic() + self.ttl_seconds
        while not self._stopped.wait(max(0.0, next_tick - time.monotonic())):
            now = time.monotonic()
            removed = self._reap(now)
            if removed:
                _logger.debug("Cache reaped %s expired entries", removed)
            # fixed period; ticks missed by a slow reap are dropped
            next_tick += self.ttl_seconds
            while next_tick <= now:
                next_tick += self.ttl_seconds

    def _reap(self, now: float) -> int:
        with self._lock:
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created_at > self.ttl_seconds
            ]
            for key in expired:
                del self._entries[key]
        return len(expired)
