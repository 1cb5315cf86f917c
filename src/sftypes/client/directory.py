"""Offline schema source backed by describe files on disk.

:class:`DirectorySource` reads ``<directory>/<ObjectName>.json`` (or
``.yaml`` / ``.yml``) files containing raw describe payloads, such as the
output of ``sf sobject describe --sobject Account --json``. When the file
wraps the describe in a ``result`` key, the wrapper is unwrapped.

It is a drop-in replacement for :class:`~sftypes.client.AsyncClient`
when no org connection is available.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import yaml

from sftypes.client.describe import parse_describe
from sftypes.exceptions import ConfigError, DescribeParseError, NotFoundError
from sftypes.models import ObjectDescription
from sftypes.output import debug

_SUFFIXES = (".json", ".yaml", ".yml")


class DirectorySource:
    """Describe sObjects from files in *directory*.

    Args:
        directory: Folder holding one describe file per sObject.

    Example::

        async with DirectorySource("describes/") as source:
            account = await source.describe("Account")
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    async def __aenter__(self) -> DirectorySource:
        if not self._directory.is_dir():
            raise ConfigError(f"Describe directory not found: {self._directory}")
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def describe(self, object_name: str) -> ObjectDescription:
        """Load and parse the describe file for *object_name*.

        Raises:
            NotFoundError: If no describe file exists for the object.
            DescribeParseError: If the file cannot be parsed.
        """
        path = self._find(object_name)
        debug(f"Reading describe for {object_name} from {path}")
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        payload = _parse_content(text, path)
        if isinstance(payload, dict) and isinstance(payload.get("result"), dict):
            payload = payload["result"]
        return parse_describe(payload, object_name)

    def _find(self, object_name: str) -> Path:
        for suffix in _SUFFIXES:
            candidate = self._directory / f"{object_name}{suffix}"
            if candidate.is_file():
                return candidate
        raise NotFoundError(
            f"No describe file for '{object_name}' in {self._directory}"
        )


def _parse_content(text: str, path: Path) -> Any:
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DescribeParseError(f"Failed to parse describe file {path}: {exc}") from exc
