"""Fixed text artifacts and file names of a generation run.

Every run writes three files into the output directory:

* ``sobject.ts`` -- the ``SObject`` base interface that every generated
  interface extends. It contributes the single ``Id`` property.
* ``sobjectTypes.ts`` -- the primitive aliases ``ID``, ``DateString`` and
  ``PhoneString`` referenced by mapped field types.
* one object module -- ``<name>.ts`` for a single object, or
  ``sobjects.ts`` for a batch.

Each artifact starts with :data:`GENERATED_HEADER`.
"""

from __future__ import annotations

GENERATED_HEADER = """
/**
 * DO NOT MODIFY THIS FILE!
 *
 * This file is generated by the sftypes tool and
 * may be regenerated in the future. It is recommended to make
 * changes to that tool then regenerate these files.
 *
 */
"""

BASE_FILE_NAME = "sobject.ts"
TYPES_FILE_NAME = "sobjectTypes.ts"
BATCH_FILE_NAME = "sobjects.ts"

BASE_INTERFACE = "SObject"
IDENTIFIER_FIELD = "Id"

# Declared in TYPES_FILE_NAME, in import order.
PRIMITIVE_ALIASES: tuple[str, ...] = ("ID", "DateString", "PhoneString")

BASE_SOBJECT_MODULE = f"""{GENERATED_HEADER}
import {{ ID }} from './sobjectTypes';

export interface {BASE_INTERFACE} {{
  {IDENTIFIER_FIELD}?: ID;
}}
"""

SOBJECT_TYPES_MODULE = f"""{GENERATED_HEADER}
export type ID = String;
export type DateString = String;
export type PhoneString = String;
"""


def module_file_name(object_name: str) -> str:
    """Return the output file name for a single-object module.

    The first ``__c`` suffix and the first remaining underscore are removed
    and the result is lowercased.

    Example::

        >>> module_file_name("Account")
        'account.ts'
        >>> module_file_name("My_Object__c")
        'myobject.ts'
    """
    stem = object_name.replace("__c", "", 1).replace("_", "", 1)
    return f"{stem.lower()}.ts"
