"""Assemble object modules from one or many sObject descriptions.

Two entry points, both coroutines because describing an object is I/O:

* :func:`generate_single` -- describe one object and render it with no
  cross-object context.
* :func:`assemble_batch` -- describe every object of a batch concurrently,
  render each with the whole batch as the *known* set, concatenate the
  declarations in input order, and append placeholder aliases for child
  objects that were referenced but not part of the batch.

The describe call is injected as ``fetch_description`` so the assembler does
not care whether descriptions come from an org
(:class:`~sftypes.client.AsyncClient`) or from disk
(:class:`~sftypes.client.DirectorySource`).

A batch is all-or-nothing: if any describe fails, the remaining ones are
cancelled and the error propagates. No partial module is returned.
"""

from __future__ import annotations

import asyncio
import re
from typing import Awaitable, Callable, Iterable

from sftypes.generator.artifacts import (
    BASE_INTERFACE,
    GENERATED_HEADER,
    PRIMITIVE_ALIASES,
)
from sftypes.generator.synthesizer import synthesize
from sftypes.models import ObjectDescription
from sftypes.output import debug, progress

FetchDescription = Callable[[str], Awaitable[ObjectDescription]]

UNMAPPED_MARKER = "// unmapped types:"
PLACEHOLDER_TYPE = "any"

_ALIAS_USE_RE = re.compile(
    r"\?: (" + "|".join(re.escape(a) for a in PRIMITIVE_ALIASES) + r")\b"
)


class BatchContext:
    """State owned by one batch invocation.

    Holds the ordered object names, the *known* set derived from them, and
    the *unmapped* set that synthesis calls add to. The context is created
    per batch and discarded afterwards.

    Args:
        object_names: The objects of the batch, in output order.
    """

    def __init__(self, object_names: Iterable[str]) -> None:
        self.object_names: list[str] = list(object_names)
        self.known: frozenset[str] = frozenset(self.object_names)
        self.unmapped: set[str] = set()

    def synthesize(self, obj: ObjectDescription) -> str:
        """Render *obj* against this batch's known set."""
        return synthesize(obj, self.known, self.unmapped)

    def placeholder_block(self) -> str:
        """Render opaque aliases for every unmapped name, sorted.

        Returns:
            The marker comment followed by one ``type <Name> = any;`` line
            per name, or an empty string when nothing is unmapped.
        """
        if not self.unmapped:
            return ""
        lines = [UNMAPPED_MARKER]
        lines.extend(
            f"type {name} = {PLACEHOLDER_TYPE};" for name in sorted(self.unmapped)
        )
        return "\n".join(lines) + "\n"


async def generate_single(object_name: str, fetch_description: FetchDescription) -> str:
    """Describe one object and render its module.

    Args:
        object_name: API name of the sObject, e.g. ``"Account"``.
        fetch_description: Coroutine function returning the description.

    Returns:
        The complete module text: header, imports and one interface.
    """
    obj = await fetch_description(object_name)
    return render_module(synthesize(obj))


async def assemble_batch(
    object_names: Iterable[str],
    fetch_description: FetchDescription,
) -> str:
    """Describe and render a batch of objects into one module.

    Descriptions are fetched concurrently. Declarations are concatenated in
    the order of *object_names*, never in completion order.

    Args:
        object_names: The batch, in output order.
        fetch_description: Coroutine function returning a description.

    Returns:
        The complete module text: header, imports, one interface per
        object, then the placeholder block.

    Raises:
        SftypesError: Whatever the first failing describe raised.
    """
    context = BatchContext(object_names)

    async def _describe_and_synthesize(name: str) -> str:
        progress(f"Processing... {name}")
        obj = await fetch_description(name)
        return context.synthesize(obj)

    tasks = [
        asyncio.ensure_future(_describe_and_synthesize(name))
        for name in context.object_names
    ]
    try:
        declarations = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise

    if context.unmapped:
        debug(f"Unmapped types: {', '.join(sorted(context.unmapped))}")

    body = "\n".join(declarations)
    placeholders = context.placeholder_block()
    if placeholders:
        body = f"{body}\n{placeholders}"
    return render_module(body)


def render_module(body: str) -> str:
    """Prefix declaration text with the generated header and imports.

    Only the primitive aliases that *body* actually uses are imported.
    """
    used = set(_ALIAS_USE_RE.findall(body))
    lines = [
        GENERATED_HEADER,
        f"import {{ {BASE_INTERFACE} }} from './sobject';",
    ]
    aliases = [a for a in PRIMITIVE_ALIASES if a in used]
    if aliases:
        lines.append(f"import {{ {', '.join(aliases)} }} from './sobjectTypes';")
    lines.append("")
    return "\n".join(lines) + "\n" + body
