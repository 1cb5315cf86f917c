"""Map sObject field type tags to TypeScript declared types.

Every describe field carries a ``type`` tag (``"boolean"``, ``"reference"``,
``"picklist"``, ...). :func:`map_field_type` turns that tag into the name of
the type the generated interface declares for the field.

**Mapping rules:**

* ``boolean`` to ``Boolean``; ``int`` and ``double`` to ``Number``.
* ``date`` and ``datetime`` to ``DateString``; ``phone`` to ``PhoneString``.
* ``string`` and ``textarea`` to ``String``; ``reference`` to ``ID``.
* Any other tag degrades to ``String`` followed by an inline ``//<tag>``
  comment, so the original tag survives in the output for a human to
  refine later.

``ID``, ``DateString`` and ``PhoneString`` are the aliases defined in the
generated ``sobjectTypes.ts`` module (see :mod:`sftypes.generator.artifacts`).
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Type mapping
# ---------------------------------------------------------------------------

_TYPE_MAP: dict[str, str] = {
    "boolean": "Boolean",
    "int": "Number",
    "double": "Number",
    "date": "DateString",
    "datetime": "DateString",
    "phone": "PhoneString",
    "string": "String",
    "textarea": "String",
    "reference": "ID",
}

_FALLBACK_TYPE = "String"

REFERENCE_TYPE = "reference"
"""Field type tag of lookup and master-detail fields."""


def map_field_type(primitive_type: str) -> str:
    """Map a describe field type tag to a TypeScript declared type name.

    The lookup is an exact, case-sensitive match against the mapping table.
    Unknown tags never fail: they map to ``String`` annotated with the
    original tag as a trailing comment.

    Args:
        primitive_type: The describe ``type`` value of a field.

    Returns:
        The declared type, e.g. ``"Number"`` or ``"String //picklist"``.

    Example::

        >>> map_field_type("double")
        'Number'
        >>> map_field_type("picklist")
        'String //picklist'
    """
    declared = _TYPE_MAP.get(primitive_type)
    if declared is None:
        return f"{_FALLBACK_TYPE} //{primitive_type}"
    return declared


def is_mapped_field_type(primitive_type: str) -> bool:
    """Return ``True`` if *primitive_type* has an explicit mapping."""
    return primitive_type in _TYPE_MAP
