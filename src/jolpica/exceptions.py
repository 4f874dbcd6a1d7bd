"""Custom exceptions for the jolpica client."""

from __future__ import annotations


class JolpicaError(Exception):
    """Base exception for all jolpica client errors."""


# ── Transport ──────────────────────────────────────────────


class JolpicaConnectionError(JolpicaError):
    """Raised when the client cannot connect to the API."""


class JolpicaTimeoutError(JolpicaError):
    """Raised when a request to the API times out."""


class JolpicaAPIError(JolpicaError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class JolpicaRetriesExhaustedError(JolpicaError):
    """Raised when a request keeps failing at the transport level after all retries."""

    def __init__(self, retries: int, last_error: JolpicaError) -> None:
        self.retries = retries
        self.last_error = last_error
        super().__init__(f"Request failed after {retries} retries: {last_error}")


class JolpicaValidationError(JolpicaError):
    """Raised when API response data fails model validation."""


# ── Request construction and parsing ───────────────────────


class InvalidFiltersError(JolpicaError, ValueError):
    """Raised when a filter set cannot be rendered, e.g. a round without a season."""


class InvalidPageError(JolpicaError, ValueError):
    """Raised when a requested page window is out of range."""


class InvalidDurationError(JolpicaError, ValueError):
    """Raised when text does not match the lap/gap duration notation."""


class InvalidTimeError(JolpicaError, ValueError):
    """Raised when text is not a valid ``HH:MM:SSZ`` time of day."""


# ── Aggregation ────────────────────────────────────────────


class EmptyResponseListError(JolpicaError):
    """Raised when asked to concatenate an empty sequence of responses."""


class BadResponseInfoError(JolpicaError):
    """Raised when pages disagree on their envelope identity."""


class BadPaginationError(JolpicaError):
    """Raised when pages fail the requested pagination checks."""


class BadTableVariantError(JolpicaError):
    """Raised when a response holds a different table than expected."""


class BadPayloadVariantError(JolpicaError):
    """Raised when a race holds a different payload than expected."""


# ── Response shape ─────────────────────────────────────────


class MultiPageError(JolpicaError):
    """Raised when a single-page request resulted in a multi-page response."""


class ExceededMaxPageCountError(JolpicaError):
    """Raised when a multi-page request would need more pages than allowed."""

    def __init__(self, page_count: int, max_page_count: int) -> None:
        self.page_count = page_count
        self.max_page_count = max_page_count
        super().__init__(f"Response needs {page_count} pages, more than the maximum of {max_page_count}")


class NotFoundError(JolpicaError):
    """Raised when a response holds none of the expected elements."""


class TooManyError(JolpicaError):
    """Raised when a response holds more than the expected number of elements."""


class UnexpectedDataError(JolpicaError):
    """Raised when a response holds data that contradicts the request."""
