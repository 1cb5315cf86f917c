"""Disk-backed cache for sObject describe payloads.

Entries are keyed by a SHA-256 hash of ``instance_url|api_version|object``
so that the same object in two orgs, or under two API versions, never
collides. Entries expire after
:attr:`~sftypes.models.CacheConfig.ttl_seconds`.
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Any, Optional

import diskcache

from sftypes.models import CacheConfig


class DescribeCache:
    """Disk-backed cache of raw describe dicts.

    A disabled cache never opens a :class:`diskcache.Cache`; every lookup
    misses and every store is a no-op.

    Args:
        cache_dir: Root directory for the cache. A ``describe/``
            subdirectory is created inside it.
        config: Cache configuration (``enabled`` flag and ``ttl_seconds``).

    Example::

        cache = DescribeCache(get_cache_dir(), CacheConfig())
        cache.set("https://x.my.salesforce.com", "59.0", "Account", payload)
        cache.get("https://x.my.salesforce.com", "59.0", "Account")
    """

    def __init__(self, cache_dir: str | Path, config: CacheConfig) -> None:
        self._config = config
        self._cache_dir = Path(cache_dir)
        self._cache: Optional[diskcache.Cache] = None
        if config.enabled:
            self._cache = diskcache.Cache(str(self._cache_dir / "describe"))

    @property
    def enabled(self) -> bool:
        return self._cache is not None

    def get(self, instance_url: str, api_version: str, object_name: str) -> Optional[dict[str, Any]]:
        """Return the cached payload, or ``None`` on a miss or when disabled."""
        if self._cache is None:
            return None
        return self._cache.get(self._make_key(instance_url, api_version, object_name))

    def set(
        self,
        instance_url: str,
        api_version: str,
        object_name: str,
        payload: dict[str, Any],
    ) -> None:
        """Store a describe payload with the configured TTL."""
        if self._cache is None:
            return
        key = self._make_key(instance_url, api_version, object_name)
        self._cache.set(key, payload, expire=self._config.ttl_seconds)

    def clear(self) -> None:
        """Remove all entries from the cache."""
        if self._cache is not None:
            self._cache.clear()

    def stats(self) -> dict[str, Any]:
        """Return ``enabled`` and, when enabled, ``size``, ``directory`` and ``ttl_seconds``."""
        if self._cache is None:
            return {"enabled": False}
        return {
            "enabled": True,
            "size": len(self._cache),
            "directory": str(self._cache_dir / "describe"),
            "ttl_seconds": self._config.ttl_seconds,
        }

    def close(self) -> None:
        """Close the underlying :class:`diskcache.Cache`."""
        if self._cache is not None:
            self._cache.close()

    @staticmethod
    def _make_key(instance_url: str, api_version: str, object_name: str) -> str:
        raw = "|".join([instance_url.rstrip("/"), api_version, object_name])
        return hashlib.sha256(raw.encode()).hexdigest()
