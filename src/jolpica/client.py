"""Public client classes for the jolpica-f1 API."""

from __future__ import annotations

import dataclasses
from typing import Any

from pydantic import ValidationError

from jolpica._filters import Filters, LapTimeFilters, PitStopFilters
from jolpica._http import AsyncTransport, SyncTransport
from jolpica._logging import get_logger, log_api_call
from jolpica.concat import PageVerify, concat_response_multi_pages
from jolpica.config import ClientConfig
from jolpica.exceptions import (
    ExceededMaxPageCountError,
    JolpicaAPIError,
    JolpicaConnectionError,
    JolpicaError,
    JolpicaRetriesExhaustedError,
    JolpicaTimeoutError,
    JolpicaValidationError,
    MultiPageError,
)
from jolpica.models.circuit import Circuit
from jolpica.models.constructor import Constructor
from jolpica.models.driver import Driver
from jolpica.models.lap import DriverLap, Timing
from jolpica.models.pit_stop import PitStop
from jolpica.models.race import (
    QualifyingPayload,
    Race,
    RaceResultsPayload,
    SchedulePayload,
    SprintPayload,
)
from jolpica.models.response import Pagination, Response
from jolpica.models.season import Season
from jolpica.models.status import Status
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

# Failures worth repeating a request for; anything else is raised straight away.
_RETRYABLE_ERRORS = (JolpicaConnectionError, JolpicaTimeoutError, JolpicaAPIError)


def _validate_response(data: dict[str, Any]) -> Response:
    """Validate a parsed JSON body against the response model."""
    try:
        return Response.model_validate(data)
    except ValidationError as exc:
        raise JolpicaValidationError(f"Failed to validate response: {exc}") from exc


def _resolve_config(
    config: ClientConfig | None,
    base_url: str | None,
    timeout: float | None,
) -> ClientConfig:
    config = config if config is not None else ClientConfig()
    overrides: dict[str, Any] = {}
    if base_url is not None:
        overrides["base_url"] = base_url
    if timeout is not None:
        overrides["timeout"] = timeout
    return dataclasses.replace(config, **overrides) if overrides else config


def _remaining_pages(first: Pagination, max_page_count: int | None) -> list[Page]:
    """Pages following ``first`` up to the total, checked against ``max_page_count``."""
    pages: list[Page] = []
    pagination = first.next_page()
    while pagination is not None:
        pages.append(Page.from_pagination(pagination))
        pagination = pagination.next_page()

    page_count = len(pages) + 1
    if max_page_count is not None and page_count > max_page_count:
        raise ExceededMaxPageCountError(page_count, max_page_count)
    return pages


def _verify_is_single_page(response: Response) -> Response:
    if not response.pagination.is_single_page:
        pagination = response.pagination
        raise MultiPageError(
            f"Response for {response.url} spans multiple pages: "
            f"limit={pagination.limit}, offset={pagination.offset}, total={pagination.total}"
        )
    return response


def _retries_exhausted(url: str, retries: int, exc: JolpicaError) -> JolpicaRetriesExhaustedError:
    get_logger().error("GET %s failed after %d retries: %s", url, retries, exc)
    return JolpicaRetriesExhaustedError(retries, exc)


def _single_result_race(response: Response, payload_type: type[Any]) -> Race:
    race = response.race_with(payload_type)
    response.single(race.payload.results)
    return race


class JolpicaClient:
    """Synchronous client for the jolpica-f1 API.

    Usage:
        jolpica = JolpicaClient()
        drivers = jolpica.get_drivers(Filters(season=2023))
        jolpica.close()

        # Or as a context manager:
        with JolpicaClient() as jolpica:
            races = jolpica.get_race_results(Filters(season=2023, round=4))

    Multi-page responses are fetched page by page and concatenated, unless
    ``config.multi_page`` is :meth:`~jolpica.config.MultiPageOption.disabled`.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.config = _resolve_config(config, base_url, timeout)
        self._transport = SyncTransport(timeout=self.config.timeout)

    def __enter__(self) -> JolpicaClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def _get_with_retries(self, url: str) -> dict[str, Any]:
        retries = self.config.http_retries
        limiter = self.config.rate_limiter
        logger = get_logger()

        for attempt in range(retries + 1):
            if limiter is not None:
                limiter.wait_until_ready()
            logger.debug("GET %s", url)
            try:
                return self._transport.get(url)
            except _RETRYABLE_ERRORS as exc:
                if retries == 0:
                    raise
                if attempt == retries:
                    raise _retries_exhausted(url, retries, exc) from exc
                logger.warning("GET %s failed (attempt %d of %d): %s", url, attempt + 1, retries + 1, exc)

        raise AssertionError("unreachable")

    # ── Responses ──────────────────────────────────────────────

    def get_response_page(self, resource: Resource, page: Page | None = None) -> Response:
        """Fetch a single page of ``resource``.

        ``response.pagination`` tells whether more pages follow; request them by passing
        ``Page.from_pagination(response.pagination.next_page())``. Without ``page``, the
        API's default window applies.
        """
        url = resource.to_url(page, base_url=self.config.base_url)
        return _validate_response(self._get_with_retries(url))

    def get_response_multi_pages(
        self,
        resource: Resource,
        initial_page: Page | None = None,
        max_page_count: int | None = None,
    ) -> list[Response]:
        """Fetch ``initial_page`` and every page after it, one response per page.

        Raises:
            ExceededMaxPageCountError: If more than ``max_page_count`` pages would be
                needed. Only the first page has been requested at that point.
        """
        first = self.get_response_page(resource, initial_page)
        responses = [first]
        for page in _remaining_pages(first.pagination, max_page_count):
            responses.append(self.get_response_page(resource, page))
        return responses

    def get_response(self, resource: Resource) -> Response:
        """Fetch the complete response for ``resource``, as configured by ``config.multi_page``.

        Pages are requested at the API's maximum page size.

        Raises:
            MultiPageError: If multi-page handling is disabled and the response has more
                than one page.
            ExceededMaxPageCountError: If more pages are needed than the configured maximum.
        """
        multi_page = self.config.multi_page
        if not multi_page.is_enabled:
            return _verify_is_single_page(self.get_response_page(resource, Page.with_max_limit()))

        responses = self.get_response_multi_pages(
            resource, Page.with_max_limit(), multi_page.max_page_count
        )
        return concat_response_multi_pages(responses, PageVerify.ALL)

    # ── Endpoints ──────────────────────────────────────────────

    @log_api_call
    def get_seasons(self, filters: Filters | None = None) -> tuple[Season, ...]:
        """Get the seasons matching ``filters``, e.g. those a driver raced in."""
        return self.get_response(SeasonList(filters or Filters())).seasons()

    @log_api_call
    def get_season(self, season: int) -> Season:
        response = self.get_response(SeasonList(Filters(season=season)))
        return response.single(response.seasons())

    @log_api_call
    def get_drivers(self, filters: Filters | None = None) -> tuple[Driver, ...]:
        """Get driver information, e.g. all drivers of a season."""
        return self.get_response(DriverInfo(filters or Filters())).drivers()

    @log_api_call
    def get_driver(self, driver_id: str) -> Driver:
        response = self.get_response(DriverInfo(Filters(driver_id=driver_id)))
        return response.single(response.drivers())

    @log_api_call
    def get_constructors(self, filters: Filters | None = None) -> tuple[Constructor, ...]:
        return self.get_response(ConstructorInfo(filters or Filters())).constructors()

    @log_api_call
    def get_constructor(self, constructor_id: str) -> Constructor:
        response = self.get_response(ConstructorInfo(Filters(constructor_id=constructor_id)))
        return response.single(response.constructors())

    @log_api_call
    def get_circuits(self, filters: Filters | None = None) -> tuple[Circuit, ...]:
        return self.get_response(CircuitInfo(filters or Filters())).circuits()

    @log_api_call
    def get_circuit(self, circuit_id: str) -> Circuit:
        response = self.get_response(CircuitInfo(Filters(circuit_id=circuit_id)))
        return response.single(response.circuits())

    @log_api_call
    def get_race_schedules(self, filters: Filters | None = None) -> tuple[Race, ...]:
        """Get race weekends, each with a :class:`SchedulePayload` of session times."""
        return self.get_response(RaceSchedule(filters or Filters())).races_with(SchedulePayload)

    @log_api_call
    def get_race_schedule(self, season: int, round: int) -> Race:
        response = self.get_response(RaceSchedule(Filters(season=season, round=round)))
        return response.race_with(SchedulePayload)

    @log_api_call
    def get_qualifying_results(self, filters: Filters | None = None) -> tuple[Race, ...]:
        """Get races, each with the qualifying results matching ``filters``."""
        return self.get_response(QualifyingResults(filters or Filters())).races_with(QualifyingPayload)

    @log_api_call
    def get_sprint_results(self, filters: Filters | None = None) -> tuple[Race, ...]:
        """Get races, each with the sprint results matching ``filters``."""
        return self.get_response(SprintResults(filters or Filters())).races_with(SprintPayload)

    @log_api_call
    def get_race_results(self, filters: Filters | None = None) -> tuple[Race, ...]:
        """Get races, each with the race results matching ``filters``."""
        return self.get_response(RaceResults(filters or Filters())).races_with(RaceResultsPayload)

    @log_api_call
    def get_race_result(self, filters: Filters) -> Race:
        """Get the one race, holding exactly one result, that matches ``filters``.

        Usage:
            race = jolpica.get_race_result(Filters(season=2023, round=4, finish_pos=1))
            winner = race.payload.results[0].driver

        Raises:
            NotFoundError: If no race or result matches.
            TooManyError: If more than one race or result matches.
        """
        return _single_result_race(self.get_response(RaceResults(filters)), RaceResultsPayload)

    @log_api_call
    def get_statuses(self, filters: Filters | None = None) -> tuple[Status, ...]:
        """Get finishing statuses and how often each occurred."""
        return self.get_response(FinishingStatus(filters or Filters())).statuses()

    @log_api_call
    def get_driver_laps(self, season: int, round: int, driver_id: str) -> list[DriverLap]:
        """Get every lap one driver completed in a race."""
        resource = LapTimes(LapTimeFilters(season=season, round=round, driver_id=driver_id))
        return self.get_response(resource).driver_laps(driver_id)

    @log_api_call
    def get_lap_timings(self, season: int, round: int, lap: int) -> tuple[Timing, ...]:
        """Get every driver's timing on one lap of a race."""
        resource = LapTimes(LapTimeFilters(season=season, round=round, lap=lap))
        return self.get_response(resource).lap_timings()

    @log_api_call
    def get_pit_stops(self, filters: PitStopFilters) -> tuple[PitStop, ...]:
        """Get the pit stops of one race, optionally narrowed by lap, driver or stop."""
        return self.get_response(PitStops(filters)).pit_stops()


class AsyncJolpicaClient:
    """Asynchronous client for the jolpica-f1 API.

    Usage:
        async with AsyncJolpicaClient() as jolpica:
            drivers = await jolpica.get_drivers(Filters(season=2023))
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.config = _resolve_config(config, base_url, timeout)
        self._transport = AsyncTransport(timeout=self.config.timeout)

    async def __aenter__(self) -> AsyncJolpicaClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def _get_with_retries(self, url: str) -> dict[str, Any]:
        retries = self.config.http_retries
        limiter = self.config.rate_limiter
        logger = get_logger()

        for attempt in range(retries + 1):
            if limiter is not None:
                await limiter.wait_until_ready_async()
            logger.debug("GET %s", url)
            try:
                return await self._transport.get(url)
            except _RETRYABLE_ERRORS as exc:
                if retries == 0:
                    raise
                if attempt == retries:
                    raise _retries_exhausted(url, retries, exc) from exc
                logger.warning("GET %s failed (attempt %d of %d): %s", url, attempt + 1, retries + 1, exc)

        raise AssertionError("unreachable")

    # ── Responses ──────────────────────────────────────────────

    async def get_response_page(self, resource: Resource, page: Page | None = None) -> Response:
        """Fetch a single page of ``resource``."""
        url = resource.to_url(page, base_url=self.config.base_url)
        return _validate_response(await self._get_with_retries(url))

    async def get_response_multi_pages(
        self,
        resource: Resource,
        initial_page: Page | None = None,
        max_page_count: int | None = None,
    ) -> list[Response]:
        """Fetch ``initial_page`` and every page after it, in order."""
        first = await self.get_response_page(resource, initial_page)
        responses = [first]
        for page in _remaining_pages(first.pagination, max_page_count):
            responses.append(await self.get_response_page(resource, page))
        return responses

    async def get_response(self, resource: Resource) -> Response:
        """Fetch the complete response for ``resource``, as configured by ``config.multi_page``."""
        multi_page = self.config.multi_page
        if not multi_page.is_enabled:
            response = await self.get_response_page(resource, Page.with_max_limit())
            return _verify_is_single_page(response)

        responses = await self.get_response_multi_pages(
            resource, Page.with_max_limit(), multi_page.max_page_count
        )
        return concat_response_multi_pages(responses, PageVerify.ALL)

    # ── Endpoints ──────────────────────────────────────────────

    @log_api_call
    async def get_seasons(self, filters: Filters | None = None) -> tuple[Season, ...]:
        return (await self.get_response(SeasonList(filters or Filters()))).seasons()

    @log_api_call
    async def get_season(self, season: int) -> Season:
        response = await self.get_response(SeasonList(Filters(season=season)))
        return response.single(response.seasons())

    @log_api_call
    async def get_drivers(self, filters: Filters | None = None) -> tuple[Driver, ...]:
        return (await self.get_response(DriverInfo(filters or Filters()))).drivers()

    @log_api_call
    async def get_driver(self, driver_id: str) -> Driver:
        response = await self.get_response(DriverInfo(Filters(driver_id=driver_id)))
        return response.single(response.drivers())

    @log_api_call
    async def get_constructors(self, filters: Filters | None = None) -> tuple[Constructor, ...]:
        return (await self.get_response(ConstructorInfo(filters or Filters()))).constructors()

    @log_api_call
    async def get_constructor(self, constructor_id: str) -> Constructor:
        response = await self.get_response(ConstructorInfo(Filters(constructor_id=constructor_id)))
        return response.single(response.constructors())

    @log_api_call
    async def get_circuits(self, filters: Filters | None = None) -> tuple[Circuit, ...]:
        return (await self.get_response(CircuitInfo(filters or Filters()))).circuits()

    @log_api_call
    async def get_circuit(self, circuit_id: str) -> Circuit:
        response = await self.get_response(CircuitInfo(Filters(circuit_id=circuit_id)))
        return response.single(response.circuits())

    @log_api_call
    async def get_race_schedules(self, filters: Filters | None = None) -> tuple[Race, ...]:
        response = await self.get_response(RaceSchedule(filters or Filters()))
        return response.races_with(SchedulePayload)

    @log_api_call
    async def get_race_schedule(self, season: int, round: int) -> Race:
        response = await self.get_response(RaceSchedule(Filters(season=season, round=round)))
        return response.race_with(SchedulePayload)

    @log_api_call
    async def get_qualifying_results(self, filters: Filters | None = None) -> tuple[Race, ...]:
        response = await self.get_response(QualifyingResults(filters or Filters()))
        return response.races_with(QualifyingPayload)

    @log_api_call
    async def get_sprint_results(self, filters: Filters | None = None) -> tuple[Race, ...]:
        response = await self.get_response(SprintResults(filters or Filters()))
        return response.races_with(SprintPayload)

    @log_api_call
    async def get_race_results(self, filters: Filters | None = None) -> tuple[Race, ...]:
        response = await self.get_response(RaceResults(filters or Filters()))
        return response.races_with(RaceResultsPayload)

    @log_api_call
    async def get_race_result(self, filters: Filters) -> Race:
        """Get the one race, holding exactly one result, that matches ``filters``."""
        return _single_result_race(await self.get_response(RaceResults(filters)), RaceResultsPayload)

    @log_api_call
    async def get_statuses(self, filters: Filters | None = None) -> tuple[Status, ...]:
        return (await self.get_response(FinishingStatus(filters or Filters()))).statuses()

    @log_api_call
    async def get_driver_laps(self, season: int, round: int, driver_id: str) -> list[DriverLap]:
        resource = LapTimes(LapTimeFilters(season=season, round=round, driver_id=driver_id))
        return (await self.get_response(resource)).driver_laps(driver_id)

    @log_api_call
    async def get_lap_timings(self, season: int, round: int, lap: int) -> tuple[Timing, ...]:
        resource = LapTimes(LapTimeFilters(season=season, round=round, lap=lap))
        return (await self.get_response(resource)).lap_timings()

    @log_api_call
    async def get_pit_stops(self, filters: PitStopFilters) -> tuple[PitStop, ...]:
        return (await self.get_response(PitStops(filters))).pit_stops()
