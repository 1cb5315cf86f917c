"""Schema sources for sftypes.

Classes:
    :class:`AsyncClient` -- describes sObjects through the org's REST API,
        backed by :class:`httpx.AsyncClient`.
    :class:`DirectorySource` -- describes sObjects from files on disk.

Both are async context managers exposing ``describe(object_name)``; see
:class:`~sftypes.client.describe.SchemaSource`.

Example::

    from sftypes.client import AsyncClient

    async with AsyncClient(profile) as client:
        account = await client.describe("Account")
"""

from sftypes.client.async_client import AsyncClient
from sftypes.client.describe import SchemaSource, parse_describe
from sftypes.client.directory import DirectorySource

__all__ = ["AsyncClient", "DirectorySource", "SchemaSource", "parse_describe"]
