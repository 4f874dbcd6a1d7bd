"""jolpica: typed Python client for the jolpica-f1 (Ergast-compatible) API."""

from jolpica._filters import Filters, LapTimeFilters, PitStopFilters
from jolpica.api import GRID_PIT_LANE, JOLPICA_API_BASE_URL
from jolpica.client import AsyncJolpicaClient, JolpicaClient
from jolpica.concat import PageVerify, concat_response_multi_pages
from jolpica.config import ClientConfig, MultiPageOption
from jolpica.durations import parse_delta, parse_duration, parse_time
from jolpica.exceptions import (
    BadPaginationError,
    BadPayloadVariantError,
    BadResponseInfoError,
    BadTableVariantError,
    EmptyResponseListError,
    ExceededMaxPageCountError,
    InvalidDurationError,
    InvalidFiltersError,
    InvalidPageError,
    InvalidTimeError,
    JolpicaAPIError,
    JolpicaConnectionError,
    JolpicaError,
    JolpicaRetriesExhaustedError,
    JolpicaTimeoutError,
    JolpicaValidationError,
    MultiPageError,
    NotFoundError,
    TooManyError,
    UnexpectedDataError,
)
from jolpica.rate_limiter import Quota, RateLimiter
from jolpica.resource import (
    CircuitInfo,
    ConstructorInfo,
    DriverInfo,
    FinishingStatus,
    LapTimes,
    Page,
    PitStops,
    QualifyingResults,
    RaceResults,
    RaceSchedule,
    Resource,
    SeasonList,
    SprintResults,
)

__all__ = [
    "AsyncJolpicaClient",
    "BadPaginationError",
    "BadPayloadVariantError",
    "BadResponseInfoError",
    "BadTableVariantError",
    "CircuitInfo",
    "ClientConfig",
    "ConstructorInfo",
    "DriverInfo",
    "EmptyResponseListError",
    "ExceededMaxPageCountError",
    "Filters",
    "FinishingStatus",
    "GRID_PIT_LANE",
    "InvalidDurationError",
    "InvalidFiltersError",
    "InvalidPageError",
    "InvalidTimeError",
    "JOLPICA_API_BASE_URL",
    "JolpicaAPIError",
    "JolpicaClient",
    "JolpicaConnectionError",
    "JolpicaError",
    "JolpicaRetriesExhaustedError",
    "JolpicaTimeoutError",
    "JolpicaValidationError",
    "LapTimeFilters",
    "LapTimes",
    "MultiPageError",
    "MultiPageOption",
    "NotFoundError",
    "Page",
    "PageVerify",
    "PitStopFilters",
    "PitStops",
    "QualifyingResults",
    "Quota",
    "RaceResults",
    "RaceSchedule",
    "RateLimiter",
    "Resource",
    "SeasonList",
    "SprintResults",
    "TooManyError",
    "UnexpectedDataError",
    "concat_response_multi_pages",
    "parse_delta",
    "parse_duration",
    "parse_time",
]

__version__ = "0.1.0"
