"""Client configuration.

This module centralizes the API base URL, the flood-control interval and
the construction-time options so the client itself can stay small.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any

from .exceptions import ValidationError

DEFAULT_END_POINT = "https://api.simplehash.com/api/v0/"

# Minimum spacing between two requests when flood control is enabled (seconds)
DEFAULT_FLOOD_INTERVAL = 0.1

# Environment variables read by ClientOptions.from_env / SimpleHashClient.from_env
API_KEY_ENV = "SIMPLEHASH_API_KEY"
END_POINT_ENV = "SIMPLEHASH_END_POINT"
PARALLEL_REQUESTS_ENV = "SIMPLEHASH_PARALLEL_REQUESTS"

# Option names used by the JavaScript SDK, accepted for drop-in configs
_OPTION_ALIASES = {
    "endPoint": "end_point",
    "floodControl": "flood_control",
    "debugMode": "debug_mode",
    "parallelRequests": "parallel_requests",
}


@dataclass(frozen=True)
class ClientOptions:
    """Construction-time client options.

    Attributes:
        end_point: API base URL, always ending with a slash
        flood_control: Enforce ``flood_interval`` between consecutive requests
        debug_mode: Emit per-cursor debug logs during parallel retrieval
        parallel_requests: Maximum concurrent page requests (1 = sequential)
        flood_interval: Minimum seconds between requests under flood control
        request_timeout: Total per-request timeout in seconds (None = no timeout)
        strict: Raise PartialResultError when any page fails instead of
            returning the pages that succeeded
    """

    end_point: str = DEFAULT_END_POINT
    flood_control: bool = True
    debug_mode: bool = False
    parallel_requests: int = 1
    flood_interval: float = DEFAULT_FLOOD_INTERVAL
    request_timeout: float | None = None
    strict: bool = False

    def __post_init__(self) -> None:
        if not self.end_point:
            raise ValidationError("end_point must be a non-empty URL")
        if not self.end_point.endswith("/"):
            object.__setattr__(self, "end_point", f"{self.end_point}/")
        try:
            parallel = int(self.parallel_requests)
        except (TypeError, ValueError):
            raise ValidationError(
                f"parallel_requests must be an integer, got {self.parallel_requests!r}"
            ) from None
        if parallel < 1:
            raise ValidationError("parallel_requests must be >= 1")
        object.__setattr__(self, "parallel_requests", parallel)
        if self.flood_interval < 0:
            raise ValidationError("flood_interval must be >= 0")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ValidationError("request_timeout must be positive when set")

    def merge(self, **overrides: Any) -> ClientOptions:
        """Return a copy with ``overrides`` applied on top of these options.

        Accepts both snake_case names and the camelCase names of the
        JavaScript SDK (``parallelRequests`` etc). ``None`` values are ignored.

        Raises:
            ValidationError: If an option name is unknown
        """
        known = {f.name for f in fields(self)}
        changes: dict[str, Any] = {}
        for key, value in overrides.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ValidationError(f"Unknown client option: {key}")
            if value is not None:
                changes[name] = value
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ClientOptions:
        """Build options from ``SIMPLEHASH_*`` environment variables."""
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}
        if env.get(END_POINT_ENV):
            overrides["end_point"] = env[END_POINT_ENV]
        if env.get(PARALLEL_REQUESTS_ENV):
            try:
                overrides["parallel_requests"] = int(env[PARALLEL_REQUESTS_ENV])
            except ValueError:
                raise ValidationError(
                    f"{PARALLEL_REQUESTS_ENV} must be an integer, "
                    f"got {env[PARALLEL_REQUESTS_ENV]!r}"
                ) from None
        return cls().merge(**overrides)
