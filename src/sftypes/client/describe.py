"""Describe payload parsing and the schema source interface.

A *schema source* is anything that can turn an sObject name into an
:class:`~sftypes.models.ObjectDescription` asynchronously and can be used as
an async context manager. Both :class:`~sftypes.client.AsyncClient` and
:class:`~sftypes.client.DirectorySource` satisfy :class:`SchemaSource`.
"""

from __future__ import annotations

from typing import Any, Protocol

from pydantic import ValidationError

from sftypes.exceptions import DescribeParseError
from sftypes.models import ObjectDescription


class SchemaSource(Protocol):
    """Structural type of a describe provider."""

    async def __aenter__(self) -> "SchemaSource": ...

    async def __aexit__(self, *args: object) -> None: ...

    async def describe(self, object_name: str) -> ObjectDescription: ...


def parse_describe(payload: Any, object_name: str = "") -> ObjectDescription:
    """Validate a raw describe dict into an :class:`~sftypes.models.ObjectDescription`.

    Args:
        payload: The decoded describe JSON.
        object_name: Name used in error messages.

    Raises:
        DescribeParseError: If the payload is not an object or lacks the
            ``name``/``fields``/``childRelationships`` shape.
    """
    label = object_name or "sObject"
    if not isinstance(payload, dict):
        raise DescribeParseError(
            f"Describe for {label} must be a JSON object (got {type(payload).__name__})"
        )
    try:
        return ObjectDescription.model_validate(payload)
    except ValidationError as exc:
        raise DescribeParseError(f"Invalid describe for {label}: {exc}") from exc
