"""Error taxonomy for the admin GraphQL mock.

Only ``MissingQueryError`` escapes to the HTTP layer (as a 400). Everything
else is rendered into the ``{"data": ..., "errors": [...]}`` envelope by the
dispatcher; the message is the only diagnostic a client sees.
"""

from typing import Optional


class AdminApiError(Exception):
    """Base class for protocol-level failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingQueryError(AdminApiError):
    """The request body carried no operation text."""

    def __init__(self, message: str = "Query is required") -> None:
        super().__init__(message)


class UnsupportedOperationError(AdminApiError):
    """The operation text matched none of the supported operations."""


class NotFoundError(AdminApiError):
    """A referenced order or variant does not exist for the resolved shop.

    ``field`` names the top-level response key for get-style operations
    (rendered as ``data: {field: null}``); mutations leave it unset and
    render ``data: null``.
    """

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)


class StoreFailureError(AdminApiError):
    """The underlying persistence layer raised."""
