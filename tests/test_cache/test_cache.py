"""Tests for the DescribeCache module."""

from __future__ import annotations

import time
from typing import Any

import pytest

from sftypes.cache import DescribeCache
from sftypes.models import CacheConfig

URL = "https://test.my.salesforce.com"


@pytest.fixture()
def cache(tmp_path):
    c = DescribeCache(tmp_path, CacheConfig(enabled=True, ttl_seconds=300))
    yield c
    c.close()


@pytest.fixture()
def disabled_cache(tmp_path):
    c = DescribeCache(tmp_path, CacheConfig(enabled=False, ttl_seconds=300))
    yield c
    c.close()


def _payload(name: str = "Account") -> dict[str, Any]:
    return {"name": name, "fields": [], "childRelationships": []}


# ------------------------------------------------------------------ #
# Core get/set behaviour
# ------------------------------------------------------------------ #


class TestGetSet:
    def test_set_and_get(self, cache: DescribeCache) -> None:
        cache.set(URL, "59.0", "Account", _payload())
        assert cache.get(URL, "59.0", "Account") == _payload()

    def test_cache_miss_returns_none(self, cache: DescribeCache) -> None:
        assert cache.get(URL, "59.0", "Nope") is None

    def test_trailing_slash_shares_entry(self, cache: DescribeCache) -> None:
        cache.set(URL + "/", "59.0", "Account", _payload())
        assert cache.get(URL, "59.0", "Account") == _payload()


class TestKeying:
    def test_api_version_is_part_of_key(self, cache: DescribeCache) -> None:
        cache.set(URL, "59.0", "Account", _payload())
        assert cache.get(URL, "60.0", "Account") is None

    def test_instance_is_part_of_key(self, cache: DescribeCache) -> None:
        cache.set(URL, "59.0", "Account", _payload())
        assert cache.get("https://other.my.salesforce.com", "59.0", "Account") is None

    def test_object_name_is_part_of_key(self, cache: DescribeCache) -> None:
        cache.set(URL, "59.0", "Account", _payload())
        assert cache.get(URL, "59.0", "Contact") is None

    def test_key_is_hex_digest(self) -> None:
        key = DescribeCache._make_key(URL, "59.0", "Account")
        assert len(key) == 64
        assert key == DescribeCache._make_key(URL + "/", "59.0", "Account")


# ------------------------------------------------------------------ #
# TTL expiry
# ------------------------------------------------------------------ #


class TestTTL:
    def test_ttl_expiry(self, tmp_path) -> None:
        c = DescribeCache(tmp_path, CacheConfig(enabled=True, ttl_seconds=1))
        try:
            c.set(URL, "59.0", "Account", _payload())
            assert c.get(URL, "59.0", "Account") is not None
            time.sleep(1.5)
            assert c.get(URL, "59.0", "Account") is None
        finally:
            c.close()


# ------------------------------------------------------------------ #
# Disabled cache
# ------------------------------------------------------------------ #


class TestDisabled:
    def test_disabled_get_returns_none(self, disabled_cache: DescribeCache) -> None:
        assert disabled_cache.get(URL, "59.0", "Account") is None

    def test_disabled_set_is_noop(self, disabled_cache: DescribeCache, tmp_path) -> None:
        disabled_cache.set(URL, "59.0", "Account", _payload())
        assert disabled_cache.get(URL, "59.0", "Account") is None
        assert not (tmp_path / "describe").exists()

    def test_disabled_stats(self, disabled_cache: DescribeCache) -> None:
        assert disabled_cache.stats() == {"enabled": False}
        assert disabled_cache.enabled is False


# ------------------------------------------------------------------ #
# Clear and stats
# ------------------------------------------------------------------ #


class TestClearAndStats:
    def test_clear_removes_all_entries(self, cache: DescribeCache) -> None:
        cache.set(URL, "59.0", "Account", _payload())
        cache.set(URL, "59.0", "Contact", _payload("Contact"))

        cache.clear()

        assert cache.get(URL, "59.0", "Account") is None
        assert cache.get(URL, "59.0", "Contact") is None

    def test_stats(self, cache: DescribeCache, tmp_path) -> None:
        cache.set(URL, "59.0", "Account", _payload())
        s = cache.stats()
        assert s["enabled"] is True
        assert s["size"] == 1
        assert s["ttl_seconds"] == 300
        assert s["directory"] == str(tmp_path / "describe")
