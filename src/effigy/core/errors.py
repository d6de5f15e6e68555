"""
Error taxonomy.

We separate error types so callers can react correctly.
Example:
InventoryQueryError names the osquery table that could not be read.
AdvisoryHttpError carries the status the advisory service answered with.
AdvisoryDecodeError means the service answered 200 with a body we cannot use.

Transport failures are not wrapped. They surface as OSError, which includes
urllib URLError and socket timeouts.
"""

from __future__ import annotations


class EffigyError(Exception):
    """Base class for all effigy exceptions."""


class InventorySourceError(EffigyError):
    """Raised by an inventory source when a query fails or has an unexpected shape."""


class InventoryQueryError(EffigyError):
    """
    Raised when fact collection fails for one named query.

    query is the name of the osquery table that was being read.
    """

    def __init__(self, query: str, cause: str) -> None:
        super().__init__(f"query {query} table: {cause}")
        self.query = query
        self.cause = cause


class AdvisoryHttpError(EffigyError):
    """Raised when the advisory service answers with a status other than 200."""

    def __init__(self, status: int, reason: str) -> None:
        status_text = f"{status} {reason}".strip()
        super().__init__(f"got {status_text} from effigy api")
        self.status = status
        self.reason = reason


class AdvisoryDecodeError(EffigyError):
    """Raised when a 200 response body does not match the advisory response schema."""
