"""Synthesize one TypeScript interface from an sObject description.

:func:`synthesize` is the core of the generator. Given an
:class:`~sftypes.models.ObjectDescription` and the set of object names the
current run emits declarations for (the *known* set), it renders::

    export interface Account extends SObject {
      Name?: String;
      OwnerId?: ID;
      Owner?: User;
      Contacts?: Array<Contact>;
    }

**Resolution rules:**

* Every field except ``Id`` becomes an optional property typed by
  :func:`~sftypes.generator.field_mapper.map_field_type`. ``Id`` is
  inherited from the ``SObject`` base interface.
* A reference field additionally gets a property named after its
  relationship, typed as the union of its targets that are in *known*.
  Targets outside *known* are dropped; if none remain, no relationship
  property is emitted.
* A child relationship to a known object becomes ``Array<Child>``. An
  unnamed (junction) relationship expands to one property per junction
  reference name.
* A named child relationship to an object outside *known* is still
  emitted, and the child name is recorded in *unmapped* so the batch can
  declare a placeholder for it. Unnamed ones are dropped.

Property order follows the describe payload. The function never raises on
incomplete metadata.
"""

from __future__ import annotations

from typing import AbstractSet, MutableSet, Optional

from sftypes.generator.artifacts import BASE_INTERFACE, IDENTIFIER_FIELD
from sftypes.generator.field_mapper import (
    REFERENCE_TYPE,
    is_mapped_field_type,
    map_field_type,
)
from sftypes.models import (
    ChildRelationshipDescription,
    FieldDescription,
    ObjectDescription,
)
from sftypes.output import debug


def synthesize(
    obj: ObjectDescription,
    known: Optional[AbstractSet[str]] = None,
    unmapped: Optional[MutableSet[str]] = None,
) -> str:
    """Render the interface declaration for a single sObject.

    Args:
        obj: The parsed describe result.
        known: Object names the current run declares. ``None`` means no
            cross-object context (single-object mode): reference unions are
            never emitted and no child is recorded as unmapped.
        unmapped: Receives the names of named child objects outside
            *known*. Only insertions are performed, so one set can be shared
            by many calls.

    Returns:
        The declaration text, ending with a newline.
    """
    lines = [f"export interface {obj.object_name} extends {BASE_INTERFACE} {{"]

    for field in obj.fields:
        if field.name == IDENTIFIER_FIELD:
            continue
        lines.extend(_field_properties(obj.object_name, field, known))

    for child in obj.child_relationships:
        lines.extend(_child_properties(obj.object_name, child, known, unmapped))

    lines.append("}")
    return "\n".join(lines) + "\n"


def _property(name: str, declared: str) -> str:
    return f"  {name}?: {declared};"


def _field_properties(
    object_name: str,
    field: FieldDescription,
    known: Optional[AbstractSet[str]],
) -> list[str]:
    """Return the property line(s) for one field."""
    if not is_mapped_field_type(field.primitive_type):
        debug(
            f"{object_name}.{field.name}: unmapped field type "
            f"'{field.primitive_type}', declared as String"
        )
    properties = [_property(field.name, map_field_type(field.primitive_type))]

    if field.primitive_type != REFERENCE_TYPE or known is None:
        return properties

    targets = [t for t in field.reference_targets if t in known]
    if targets and field.relationship_name:
        properties.append(_property(field.relationship_name, " | ".join(targets)))
    return properties


def _child_properties(
    object_name: str,
    child: ChildRelationshipDescription,
    known: Optional[AbstractSet[str]],
    unmapped: Optional[MutableSet[str]],
) -> list[str]:
    """Return the property line(s) for one child relationship."""
    collection = f"Array<{child.child_object_name}>"

    if known is not None and child.child_object_name in known:
        if child.relationship_name:
            return [_property(child.relationship_name, collection)]
        return [_property(j, collection) for j in child.junction_reference_names]

    if child.relationship_name:
        if known is not None and unmapped is not None:
            if child.child_object_name not in unmapped:
                debug(
                    f"{object_name}.{child.relationship_name}: "
                    f"{child.child_object_name} is not in this batch, "
                    "declaring a placeholder"
                )
            unmapped.add(child.child_object_name)
        return [_property(child.relationship_name, collection)]

    return []
