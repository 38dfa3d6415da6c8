"""Runtime components: REST transport and the pagination engine."""

from .pagination import FloodControl, PaginatedResult, PaginatedRetriever, RateLimiter
from .rest import HTTPClient, RESTTransport, RestEndpointSpec, RestRunner

__all__ = [
    "FloodControl",
    "HTTPClient",
    "PaginatedResult",
    "PaginatedRetriever",
    "RESTTransport",
    "RateLimiter",
    "RestEndpointSpec",
    "RestRunner",
]
