"""Helpers shared by commands that describe sObjects."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar

import typer

from sftypes.cache import DescribeCache
from sftypes.client import AsyncClient, DirectorySource, SchemaSource
from sftypes.config import get_cache_dir, load_global_config, resolve_config
from sftypes.exceptions import ConfigError, SftypesError
from sftypes.models import CacheConfig, GlobalConfig
from sftypes.output import debug, error

T = TypeVar("T")


def open_schema_source(
    profile_name: Optional[str] = None,
    instance_url: Optional[str] = None,
    describe_dir: Optional[Path] = None,
    no_cache: bool = False,
) -> tuple[GlobalConfig, SchemaSource, Optional[DescribeCache]]:
    """Build the schema source for a command invocation.

    A *describe_dir* selects the offline :class:`~sftypes.client.DirectorySource`
    and needs no profile. Otherwise the active profile is resolved and an
    :class:`~sftypes.client.AsyncClient` is returned together with its
    describe cache, which the caller must close.

    Raises:
        ConfigError: If no profile can be resolved.
    """
    if describe_dir is not None:
        debug(f"Using describe files from {describe_dir}")
        return load_global_config(), DirectorySource(describe_dir), None

    global_cfg, profile = resolve_config(
        cli_profile=profile_name, cli_instance_url=instance_url
    )
    if profile is None:
        raise ConfigError(
            "No active profile. Run: sftypes init --instance-url <url>, "
            "or pass --describe-dir"
        )
    debug(f"Using profile: {profile.name} ({profile.instance_url})")

    cache_config = CacheConfig(enabled=False) if no_cache else global_cfg.cache
    cache = DescribeCache(get_cache_dir(), cache_config)
    return global_cfg, AsyncClient(profile, cache=cache), cache


async def _with_source(
    source: SchemaSource,
    work: Callable[[SchemaSource], Awaitable[T]],
) -> T:
    async with source:
        return await work(source)


def run_with_source(
    source: SchemaSource,
    cache: Optional[DescribeCache],
    work: Callable[[SchemaSource], Awaitable[T]],
) -> T:
    """Run *work* inside *source* on a fresh event loop, then close *cache*."""
    try:
        return asyncio.run(_with_source(source, work))
    finally:
        if cache is not None:
            cache.close()


def exit_on_error(exc: SftypesError) -> typer.Exit:
    """Report *exc* on stderr and return the :class:`typer.Exit` to raise."""
    error(str(exc))
    return typer.Exit(code=exc.exit_code)
