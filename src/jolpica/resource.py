"""Resources that can be requested from the jolpica-f1 API and their rendering into URLs.

Each :class:`Resource` subclass maps to one API endpoint and carries the filters to apply,
e.g. ``RaceResults(Filters(season=2023, round=4))`` renders to
``https://api.jolpi.ca/ergast/f1/2023/4/results.json``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

import httpx

from jolpica._filters import Filters, LapTimeFilters, PitStopFilters
from jolpica.api import (
    JOLPICA_API_BASE_URL,
    JOLPICA_API_PAGINATION,
    PAGE_LIMIT_CEILING,
    RESPONSE_FORMAT_SUFFIX,
)
from jolpica.exceptions import InvalidPageError

if TYPE_CHECKING:
    from jolpica.models.response import Pagination


@dataclass(frozen=True)
class Page:
    """A requested page window: at most ``limit`` items, skipping the first ``offset``."""

    limit: int = JOLPICA_API_PAGINATION.default_limit
    offset: int = JOLPICA_API_PAGINATION.default_offset

    def __post_init__(self) -> None:
        if not 1 <= self.limit <= PAGE_LIMIT_CEILING:
            raise InvalidPageError(f"Page limit {self.limit} is not within 1..={PAGE_LIMIT_CEILING}")
        if self.offset < 0:
            raise InvalidPageError(f"Page offset {self.offset} is negative")

    @classmethod
    def with_offset(cls, offset: int) -> Page:
        return cls(offset=offset)

    @classmethod
    def with_limit(cls, limit: int) -> Page:
        return cls(limit=limit)

    @classmethod
    def with_max_limit(cls) -> Page:
        """First page at the largest size the API serves."""
        return cls(limit=JOLPICA_API_PAGINATION.max_limit)

    @classmethod
    def from_pagination(cls, pagination: Pagination) -> Page:
        return cls(limit=pagination.limit, offset=pagination.offset)

    def next(self) -> Page:
        """The window immediately after this one, same size."""
        return Page(limit=self.limit, offset=self.offset + self.limit)


@dataclass(frozen=True)
class Resource:
    """Base class for a requestable resource and the filters to apply to it."""

    key: ClassVar[str]

    filters: Filters = field(default_factory=Filters)

    def to_endpoint(self) -> str:
        """Render the resource path, e.g. ``/2023/drivers/leclerc/results``.

        The resource key always comes last, as the API expects. If the key is also one of
        the active filters (e.g. ``DriverInfo`` filtered by driver id), the filter is moved
        to the end rather than repeated.

        Raises:
            InvalidFiltersError: If the filters cannot be rendered.
        """
        pairs = self.filters.to_path_pairs()

        resource_pair = (self.key, "")
        for idx, (segment_key, _) in enumerate(pairs):
            if segment_key == self.key:
                resource_pair = pairs.pop(idx)
                break
        pairs.append(resource_pair)

        return "".join(
            segment_key + value
            for segment_key, value in pairs
            if value or segment_key == self.key
        )

    def to_url(self, page: Page | None = None, base_url: str = JOLPICA_API_BASE_URL) -> str:
        """Render the full request URL, with ``limit`` and ``offset`` query parameters if paged."""
        url = f"{base_url}{self.to_endpoint()}{RESPONSE_FORMAT_SUFFIX}"
        if page is None:
            return url
        return str(httpx.URL(url, params={"limit": page.limit, "offset": page.offset}))


@dataclass(frozen=True)
class SeasonList(Resource):
    """Seasons supported by the API, e.g. ``/seasons``."""

    key: ClassVar[str] = "/seasons"


@dataclass(frozen=True)
class DriverInfo(Resource):
    key: ClassVar[str] = "/drivers"


@dataclass(frozen=True)
class ConstructorInfo(Resource):
    key: ClassVar[str] = "/constructors"


@dataclass(frozen=True)
class CircuitInfo(Resource):
    key: ClassVar[str] = "/circuits"


@dataclass(frozen=True)
class RaceSchedule(Resource):
    """Race weekends with their session dates and times."""

    key: ClassVar[str] = "/races"


@dataclass(frozen=True)
class QualifyingResults(Resource):
    key: ClassVar[str] = "/qualifying"


@dataclass(frozen=True)
class SprintResults(Resource):
    key: ClassVar[str] = "/sprint"


@dataclass(frozen=True)
class RaceResults(Resource):
    key: ClassVar[str] = "/results"


@dataclass(frozen=True)
class FinishingStatus(Resource):
    """Finishing status codes and how many times each occurred."""

    key: ClassVar[str] = "/status"


@dataclass(frozen=True)
class LapTimes(Resource):
    """Per-lap timings for a single race."""

    key: ClassVar[str] = "/laps"

    filters: LapTimeFilters  # type: ignore[assignment]


@dataclass(frozen=True)
class PitStops(Resource):
    """Pit stops made during a single race."""

    key: ClassVar[str] = "/pitstops"

    filters: PitStopFilters  # type: ignore[assignment]
