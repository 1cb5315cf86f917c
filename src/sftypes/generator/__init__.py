"""Type generator -- turn sObject descriptions into TypeScript modules.

Typical usage::

    from sftypes.generator import assemble_batch

    text = await assemble_batch(["Account", "Contact"], client.describe)

Sub-modules:

* :mod:`~sftypes.generator.field_mapper` -- Map a field type tag to a
  declared type name.
* :mod:`~sftypes.generator.synthesizer` -- Render one interface, resolving
  reference and child relationships against the known object set.
* :mod:`~sftypes.generator.assembler` -- Single-object and concurrent batch
  generation, including placeholder aliases for unmapped types.
* :mod:`~sftypes.generator.artifacts` -- Fixed header, base modules and
  output file names.
"""

from sftypes.generator.assembler import BatchContext, assemble_batch, generate_single
from sftypes.generator.field_mapper import map_field_type
from sftypes.generator.synthesizer import synthesize

__all__ = [
    "BatchContext",
    "assemble_batch",
    "generate_single",
    "map_field_type",
    "synthesize",
]
