"""Exception hierarchy for sftypes.

All exceptions inherit from :class:`SftypesError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`sftypes.exit_codes`.
The top-level error handler in :func:`sftypes.app.main` catches
``SftypesError`` and exits with the appropriate code.

Subclass hierarchy::

    SftypesError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- AuthError           (exit 3)
    +-- NotFoundError       (exit 4)
    +-- ServerError         (exit 5)
    +-- ConnectionError_    (exit 6)
    +-- DescribeParseError  (exit 7)
    +-- ConfigError         (exit 1)

The type generator itself never raises for incomplete metadata; only
describe fetch failures and usage errors reach the caller.
"""

from sftypes.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_DESCRIBE_PARSE_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_SERVER_ERROR,
)


class SftypesError(Exception):
    """Base exception for all sftypes errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(SftypesError):
    """Raised for invalid CLI arguments, e.g. neither an sObject nor a config file."""

    exit_code = EXIT_INVALID_USAGE


class AuthError(SftypesError):
    """Raised when the org rejects the access token (HTTP 401/403)."""

    exit_code = EXIT_AUTH_FAILURE


class NotFoundError(SftypesError):
    """Raised when an sObject cannot be found in the schema source."""

    exit_code = EXIT_NOT_FOUND


class ServerError(SftypesError):
    """Raised when the org returns an HTTP error response."""

    exit_code = EXIT_SERVER_ERROR


class ConnectionError_(SftypesError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class DescribeParseError(SftypesError):
    """Raised when a describe payload is not a valid sObject description."""

    exit_code = EXIT_DESCRIBE_PARSE_ERROR


class ConfigError(SftypesError):
    """Raised for configuration problems (missing profiles, invalid JSON, bad credential sources)."""

    exit_code = EXIT_GENERIC_FAILURE
