"""Built-in CLI sub-commands for sftypes.

* :mod:`~sftypes.commands.create` -- generate TypeScript modules for one
  sObject or a batch.
* :mod:`~sftypes.commands.init` -- create an org profile.
* :mod:`~sftypes.commands.inspect` -- show how an sObject's fields and
  child relationships map to types.

Commands that talk to an org open their schema source through
:func:`~sftypes.commands.common.open_schema_source`.
"""
