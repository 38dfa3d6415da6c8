"""REST runtime abstractions."""

from .http_client import HTTPClient
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import API_KEY_HEADER, RESTTransport

__all__ = [
    "API_KEY_HEADER",
    "HTTPClient",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
