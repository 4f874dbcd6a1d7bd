"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from jolpica._http import DEFAULT_TIMEOUT
from jolpica.api import JOLPICA_API_BASE_URL
from jolpica.rate_limiter import RateLimiter


@dataclass(frozen=True)
class MultiPageOption:
    """Whether a client fetches and concatenates all pages of a multi-page response.

    Usage:
        MultiPageOption.enabled()                   # fetch every page
        MultiPageOption.enabled(max_page_count=5)   # but fail beyond 5 pages
        MultiPageOption.disabled()                  # fail on any multi-page response
    """

    is_enabled: bool
    max_page_count: int | None = None

    def __post_init__(self) -> None:
        if self.max_page_count is not None and self.max_page_count < 1:
            raise ValueError(f"max_page_count must be at least 1, got {self.max_page_count}")

    @classmethod
    def enabled(cls, max_page_count: int | None = None) -> MultiPageOption:
        return cls(is_enabled=True, max_page_count=max_page_count)

    @classmethod
    def disabled(cls) -> MultiPageOption:
        return cls(is_enabled=False)


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by :class:`~jolpica.client.JolpicaClient` and its async twin.

    ``http_retries`` applies to each page request on its own, so a multi-page response
    may be retried more times in total. Set ``rate_limiter`` to ``None`` to disable rate
    limiting, or pass one :class:`RateLimiter` to several clients to share the quota.
    """

    base_url: str = JOLPICA_API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    multi_page: MultiPageOption = field(default_factory=MultiPageOption.enabled)
    http_retries: int = 2
    rate_limiter: RateLimiter | None = field(default_factory=RateLimiter)

    def __post_init__(self) -> None:
        if self.http_retries < 0:
            raise ValueError(f"http_retries must not be negative, got {self.http_retries}")
