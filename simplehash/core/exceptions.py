"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..runtime.pagination.results import PaginatedResult


class SimpleHashError(Exception):
    """Base exception for all library errors."""

    pass


class ValidationError(SimpleHashError):
    """Caller input is invalid.

    Raised synchronously by endpoint methods before any network call is made,
    e.g. a missing token id on a chain that requires one.
    """

    pass


class ProviderError(SimpleHashError):
    """A request to the API failed (network, HTTP status or malformed body).

    The transport never raises this by default; it is carried inside a
    ``FetchOutcome`` so pagination can tell a failed page from the last page.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class CursorError(SimpleHashError):
    """A pagination cursor could not be decoded or re-encoded."""

    pass


class PartialResultError(SimpleHashError):
    """One or more pages failed while strict mode was enabled.

    Attributes:
        result: The items gathered before the failure, with page counters.
    """

    def __init__(self, message: str, result: PaginatedResult) -> None:
        super().__init__(message)
        self.result = result
