"""Client-side rate limiting of API requests.

Requests are admitted with the generic cell rate algorithm: each request pushes a
theoretical arrival time forward by the quota's replenish interval, and a request is
admitted as long as that time stays within ``burst`` intervals of now. Idle time
replenishes capacity, up to the burst size.
"""

from __future__ import annotations

import asyncio
import threading
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from jolpica.api import JOLPICA_API_RATE_LIMIT, RateLimit


@dataclass(frozen=True)
class Quota:
    """One request per ``replenish_interval`` seconds, with up to ``burst`` requests at once."""

    replenish_interval: float
    burst: int = 1

    def __post_init__(self) -> None:
        if self.replenish_interval <= 0:
            raise ValueError(f"Replenish interval must be positive, got {self.replenish_interval}")
        if self.burst < 1:
            raise ValueError(f"Burst must be at least 1, got {self.burst}")

    @classmethod
    def per_second(cls, count: int, burst: int | None = None) -> Quota:
        return cls(replenish_interval=1.0 / count, burst=burst if burst is not None else count)

    @classmethod
    def per_hour(cls, count: int, burst: int | None = None) -> Quota:
        return cls(replenish_interval=3600.0 / count, burst=burst if burst is not None else count)

    @classmethod
    def from_rate_limit(cls, rate_limit: RateLimit) -> Quota:
        """The sustained hourly budget, allowing bursts of the per-second limit."""
        return cls.per_hour(rate_limit.sustained_per_hour, burst=rate_limit.burst_per_second)


JOLPICA_API_RATE_LIMIT_QUOTA = Quota.from_rate_limit(JOLPICA_API_RATE_LIMIT)

# Float slack when comparing arrival times.
_TOLERANCE = 1e-9


class RateLimiter:
    """Thread-safe rate limiter, shareable between clients.

    Usage:
        limiter = RateLimiter(Quota.per_second(10, burst=5))
        limiter.wait_until_ready()  # blocks until a request is allowed

    ``clock`` and ``sleep`` default to :func:`time.monotonic` and :func:`time.sleep`, and
    ``async_sleep`` to :func:`asyncio.sleep`.
    """

    def __init__(
        self,
        quota: Quota = JOLPICA_API_RATE_LIMIT_QUOTA,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        async_sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.quota = quota
        self._clock = clock
        self._sleep = sleep
        self._async_sleep = async_sleep
        self._lock = threading.Lock()
        self._tat: float | None = None

    def __repr__(self) -> str:
        return f"RateLimiter({self.quota!r})"

    def _reserve(self) -> float:
        """Admit a request if possible, returning 0, or else the seconds to wait."""
        interval = self.quota.replenish_interval
        with self._lock:
            now = self._clock()
            tat = now if self._tat is None else max(self._tat, now)
            new_tat = tat + interval
            delay = new_tat - now - self.quota.burst * interval
            if delay > _TOLERANCE:
                return delay
            self._tat = new_tat
            return 0.0

    def try_acquire(self) -> bool:
        """Admit a request without waiting. Returns ``False`` if it is not allowed yet."""
        return self._reserve() == 0.0

    def wait_until_ready(self) -> None:
        """Block until a request is admitted."""
        while (delay := self._reserve()) > 0:
            self._sleep(delay)

    async def wait_until_ready_async(self) -> None:
        """Wait, without blocking the event loop, until a request is admitted."""
        while (delay := self._reserve()) > 0:
            await self._async_sleep(delay)
