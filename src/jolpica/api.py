"""Constants describing the jolpica-f1 API: base URL, pagination and rate limits."""

from __future__ import annotations

from dataclasses import dataclass

JOLPICA_API_BASE_URL = "https://api.jolpi.ca/ergast/f1"

# Every endpoint renders as ``<base><path>.json``.
RESPONSE_FORMAT_SUFFIX = ".json"

# Grid position reported for (and filterable as) a pit-lane start.
GRID_PIT_LANE = 0


@dataclass(frozen=True)
class PaginationDefaults:
    """Default and maximum page windows accepted by the API."""

    default_limit: int
    default_offset: int
    max_limit: int


JOLPICA_API_PAGINATION = PaginationDefaults(default_limit=30, default_offset=0, max_limit=100)

# Hard bound on any requested page size, independent of the service's current maximum.
PAGE_LIMIT_CEILING = 1000


@dataclass(frozen=True)
class RateLimit:
    """Rate limit published by the API: a short burst and a sustained hourly budget."""

    burst_per_second: int
    sustained_per_hour: int


# https://github.com/jolpica/jolpica-f1/blob/main/docs/rate_limits.md
JOLPICA_API_RATE_LIMIT = RateLimit(burst_per_second=4, sustained_per_hour=500)
