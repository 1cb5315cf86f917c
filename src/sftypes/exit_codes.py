"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~sftypes.exceptions.SftypesError` subclass.

Example::

    $ sftypes create --sobject Acount
    $ echo $?
    4   # EXIT_NOT_FOUND -- the org has no such sObject
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or no object selection."""

EXIT_AUTH_FAILURE = 3
"""The org rejected the access token."""

EXIT_NOT_FOUND = 4
"""The requested sObject does not exist (HTTP 404 or missing describe file)."""

EXIT_SERVER_ERROR = 5
"""The org returned an HTTP error other than 401/403/404."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""

EXIT_DESCRIBE_PARSE_ERROR = 7
"""A describe payload could not be parsed into an object description."""
