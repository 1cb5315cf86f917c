"""Disk-based describe caching for sftypes.

This package provides :class:`DescribeCache`, which stores raw sObject
describe payloads on disk using :mod:`diskcache` so that repeated runs
against the same org do not re-fetch unchanged metadata. It is consumed by
:class:`~sftypes.client.AsyncClient` and controlled by
:class:`~sftypes.models.CacheConfig`.
"""

from sftypes.cache.cache import DescribeCache

__all__ = ["DescribeCache"]
