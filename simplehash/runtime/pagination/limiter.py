"""Client-side flood control.

The limiter is a single-owner cell holding the time of the last outbound
request. ``acquire`` waits until the minimum interval has elapsed since that
time and then records "now".

The check and the record are not atomic across concurrent callers: requests
issued together by a parallel fan-out all observe the same last-request time,
wake up together and go out as a burst. The limit is best effort, spacing
consecutive requests of one logical sequence rather than capping the global
request rate.
"""

from __future__ import annotations

import asyncio
import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from ...core.config import DEFAULT_FLOOD_INTERVAL


class RateLimiter(ABC):
    """Interface the transport uses to throttle requests."""

    @abstractmethod
    async def acquire(self, interval: float | None = None) -> None:
        """Wait for a request slot and record the request.

        Args:
            interval: Minimum spacing for this request in seconds, overriding
                the limiter default (some endpoint families need more)
        """

    @abstractmethod
    def record(self) -> None:
        """Record that a request starts now."""


class FloodControl(RateLimiter):
    """Minimum-interval limiter keyed on the last request time."""

    def __init__(
        self,
        enabled: bool = True,
        interval: float = DEFAULT_FLOOD_INTERVAL,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.enabled = enabled
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._last_request: float | None = None

    @property
    def last_request(self) -> float | None:
        return self._last_request

    async def acquire(self, interval: float | None = None) -> None:
        if self.enabled and self._last_request is not None:
            spacing = self.interval if interval is None else interval
            remaining = spacing - (self._clock() - self._last_request)
            if remaining > 0:
                await self._sleep(remaining)
        self.record()

    def record(self) -> None:
        self._last_request = self._clock()
