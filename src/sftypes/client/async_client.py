"""Asynchronous Salesforce REST client for sObject describes.

This module provides :class:`AsyncClient`, which wraps
:class:`httpx.AsyncClient` with bearer-token injection, describe caching,
retry with exponential backoff, and mapping of HTTP failures onto the
:mod:`sftypes.exceptions` hierarchy.

Many :meth:`AsyncClient.describe` calls can be in flight at once on a
single client; the batch assembler gathers them.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional
from urllib.parse import quote

import httpx

from sftypes.cache import DescribeCache
from sftypes.client.describe import parse_describe
from sftypes.config import resolve_credential
from sftypes.exceptions import (
    AuthError,
    ConnectionError_,
    DescribeParseError,
    NotFoundError,
    ServerError,
)
from sftypes.models import ObjectDescription, Profile
from sftypes.output import debug


class AsyncClient:
    """Asynchronous client for the describe endpoint of one org.

    Must be used as an async context manager. The access token is resolved
    from ``profile.token_source`` on entry.

    Args:
        profile: The org profile (instance URL, API version, token source,
            request settings).
        cache: Optional describe cache. Hits skip the network entirely.
        transport: Optional httpx transport, e.g. an
            :class:`httpx.MockTransport` in tests.

    Example::

        async with AsyncClient(profile) as client:
            account = await client.describe("Account")
    """

    def __init__(
        self,
        profile: Profile,
        cache: Optional[DescribeCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._profile = profile
        self._cache = cache
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncClient:
        token = resolve_credential(self._profile.token_source)
        config = self._profile.request
        self._client = httpx.AsyncClient(
            base_url=self._profile.instance_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
            },
            timeout=config.timeout,
            verify=config.verify_ssl,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def describe_path(self, object_name: str) -> str:
        """Return the REST path of the describe resource for *object_name*."""
        return (
            f"/services/data/v{self._profile.api_version}"
            f"/sobjects/{quote(object_name, safe='')}/describe/"
        )

    async def describe(self, object_name: str) -> ObjectDescription:
        """Fetch and parse the describe result for one sObject.

        Args:
            object_name: API name, e.g. ``"Account"`` or ``"Invoice__c"``.

        Returns:
            The parsed :class:`~sftypes.models.ObjectDescription`.

        Raises:
            AuthError: On 401 / 403.
            NotFoundError: On 404 (no such sObject in the org).
            ServerError: On any other error status after retries.
            ConnectionError_: On network / timeout errors after retries.
            DescribeParseError: If the body is not a describe payload.
        """
        instance_url = self._profile.instance_url
        api_version = self._profile.api_version

        if self._cache is not None:
            cached = self._cache.get(instance_url, api_version, object_name)
            if cached is not None:
                debug(f"Describe cache hit: {object_name}")
                return parse_describe(cached, object_name)

        response = await self._execute_with_retry(self.describe_path(object_name))
        self._map_response_error(response, object_name)

        try:
            payload = response.json()
        except ValueError as exc:
            raise DescribeParseError(
                f"Describe for {object_name} is not valid JSON: {exc}"
            ) from exc

        description = parse_describe(payload, object_name)
        if self._cache is not None:
            self._cache.set(instance_url, api_version, object_name, payload)
        return description

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    async def _execute_with_retry(self, path: str) -> httpx.Response:
        """GET *path*, retrying 5xx and network errors with exponential backoff.

        The delay doubles each attempt: 1 s, 2 s, 4 s, ...
        """
        assert self._client is not None, "Client not initialised -- use as async context manager"

        max_retries = self._profile.request.max_retries

        for attempt in range(max_retries + 1):
            try:
                response = await self._client.get(path)
            except (httpx.TimeoutException, httpx.NetworkError) as exc:
                if attempt < max_retries:
                    delay = 2 ** attempt
                    debug(
                        f"Connection error: {exc}, retrying in {delay}s "
                        f"(attempt {attempt + 1}/{max_retries})"
                    )
                    await asyncio.sleep(delay)
                    continue
                raise ConnectionError_(
                    f"Connection failed after {max_retries + 1} attempts: {exc}"
                ) from exc

            if response.status_code >= 500 and attempt < max_retries:
                delay = 2 ** attempt
                debug(
                    f"Server error {response.status_code}, retrying in {delay}s "
                    f"(attempt {attempt + 1}/{max_retries})"
                )
                await asyncio.sleep(delay)
                continue

            return response

        raise ServerError("Request failed after all retries")  # pragma: no cover

    def _map_response_error(self, response: httpx.Response, object_name: str) -> None:
        """Raise a typed exception for error HTTP status codes."""
        status = response.status_code
        if status < 400:
            return

        msg = _error_message(response)
        full_msg = f"HTTP {status} describing {object_name}"
        if msg:
            full_msg = f"{full_msg}: {msg}"

        if status in (401, 403):
            raise AuthError(full_msg)
        if status == 404:
            raise NotFoundError(full_msg)
        raise ServerError(full_msg)


def _error_message(response: httpx.Response) -> str:
    """Extract the message from a REST error body.

    The REST API answers errors with a list of
    ``{"message": ..., "errorCode": ...}`` objects.
    """
    try:
        detail: Any = response.json()
    except ValueError:
        return response.text[:200] if response.text else ""

    if isinstance(detail, list) and detail and isinstance(detail[0], dict):
        detail = detail[0]
    if isinstance(detail, dict):
        return str(detail.get("message") or detail.get("errorCode") or "")
    return str(detail)
