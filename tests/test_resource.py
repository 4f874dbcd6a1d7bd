"""Tests for resources, pages and URL rendering."""

from __future__ import annotations

import pytest

from jolpica._filters import Filters, LapTimeFilters, PitStopFilters
from jolpica.exceptions import InvalidFiltersError, InvalidPageError
from jolpica.models.response import Pagination
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
    SeasonList,
    SprintResults,
)
from tests.conftest import BASE_URL


class TestPage:
    def test_default(self) -> None:
        page = Page()
        assert (page.limit, page.offset) == (30, 0)

    def test_constructors(self) -> None:
        assert Page.with_offset(10) == Page(limit=30, offset=10)
        assert Page.with_limit(50) == Page(limit=50, offset=0)
        assert Page.with_max_limit() == Page(limit=100, offset=0)

    def test_from_pagination(self) -> None:
        pagination = Pagination(limit=100, offset=200, total=450)
        assert Page.from_pagination(pagination) == Page(limit=100, offset=200)

    def test_next(self) -> None:
        assert Page(limit=10, offset=5).next() == Page(limit=10, offset=15)

    @pytest.mark.parametrize("limit", [0, -1, 1001])
    def test_limit_out_of_range(self, limit: int) -> None:
        with pytest.raises(InvalidPageError):
            Page(limit=limit)

    def test_limit_bounds(self) -> None:
        assert Page(limit=1).limit == 1
        assert Page(limit=1000).limit == 1000

    def test_negative_offset(self) -> None:
        with pytest.raises(InvalidPageError):
            Page(offset=-1)


class TestResourceEndpoint:
    @pytest.mark.parametrize(
        ("resource", "endpoint"),
        [
            (SeasonList(), "/seasons"),
            (DriverInfo(), "/drivers"),
            (ConstructorInfo(), "/constructors"),
            (CircuitInfo(), "/circuits"),
            (RaceSchedule(), "/races"),
            (QualifyingResults(), "/qualifying"),
            (SprintResults(), "/sprint"),
            (RaceResults(), "/results"),
            (FinishingStatus(), "/status"),
        ],
    )
    def test_keys(self, resource, endpoint: str) -> None:
        assert resource.to_endpoint() == endpoint

    @pytest.mark.parametrize(
        ("resource", "endpoint"),
        [
            (DriverInfo(Filters(driver_id="leclerc")), "/drivers/leclerc"),
            (ConstructorInfo(Filters(constructor_id="ferrari")), "/constructors/ferrari"),
            (CircuitInfo(Filters(circuit_id="spa")), "/circuits/spa"),
            (QualifyingResults(Filters(qualifying_pos=1)), "/qualifying/1"),
            (SprintResults(Filters(sprint_pos=1)), "/sprint/1"),
            (RaceResults(Filters(finish_pos=1)), "/results/1"),
            (FinishingStatus(Filters(finishing_status=1)), "/status/1"),
        ],
    )
    def test_resource_filter_is_kept_once(self, resource, endpoint: str) -> None:
        assert resource.to_endpoint() == endpoint

    def test_non_resource_filter(self) -> None:
        assert SeasonList(Filters(driver_id="leclerc")).to_endpoint() == "/drivers/leclerc/seasons"

    def test_mixed_filters(self) -> None:
        filters = Filters(constructor_id="ferrari", circuit_id="spa", qualifying_pos=1)
        assert (
            DriverInfo(filters).to_endpoint()
            == "/constructors/ferrari/circuits/spa/qualifying/1/drivers"
        )

    def test_resource_filter_moves_to_end(self) -> None:
        filters = Filters(
            driver_id="leclerc", constructor_id="ferrari", circuit_id="spa", qualifying_pos=1
        )
        assert (
            DriverInfo(filters).to_endpoint()
            == "/constructors/ferrari/circuits/spa/qualifying/1/drivers/leclerc"
        )

    def test_season_and_round(self) -> None:
        assert DriverInfo(Filters(season=2023)).to_endpoint() == "/2023/drivers"
        assert SeasonList(Filters(season=2023, round=1)).to_endpoint() == "/2023/1/seasons"
        assert RaceSchedule(Filters(season=2023, round=4)).to_endpoint() == "/2023/4/races"

    def test_grid_pit_lane(self) -> None:
        resource = RaceResults(Filters(season=2023, grid_pos=Filters.GRID_PIT_LANE))
        assert resource.to_endpoint() == "/2023/grid/0/results"

    def test_round_without_season(self) -> None:
        with pytest.raises(InvalidFiltersError):
            RaceResults(Filters(round=4)).to_endpoint()

    def test_lap_times(self) -> None:
        assert LapTimes(LapTimeFilters(season=2023, round=4)).to_endpoint() == "/2023/4/laps"
        assert LapTimes(LapTimeFilters(season=2023, round=4, lap=1)).to_endpoint() == "/2023/4/laps/1"
        assert (
            LapTimes(LapTimeFilters(season=2023, round=4, driver_id="leclerc")).to_endpoint()
            == "/2023/4/drivers/leclerc/laps"
        )
        assert (
            LapTimes(LapTimeFilters(season=2023, round=4, lap=1, driver_id="leclerc")).to_endpoint()
            == "/2023/4/drivers/leclerc/laps/1"
        )

    def test_pit_stops(self) -> None:
        assert PitStops(PitStopFilters(season=2023, round=4)).to_endpoint() == "/2023/4/pitstops"
        assert (
            PitStops(PitStopFilters(season=2023, round=4, lap=10)).to_endpoint()
            == "/2023/4/laps/10/pitstops"
        )
        assert (
            PitStops(
                PitStopFilters(season=2023, round=4, driver_id="leclerc", pit_stop=2)
            ).to_endpoint()
            == "/2023/4/drivers/leclerc/pitstops/2"
        )


class TestResourceUrl:
    def test_without_page(self) -> None:
        assert SeasonList().to_url() == f"{BASE_URL}/seasons.json"
        assert DriverInfo(Filters(driver_id="leclerc")).to_url() == f"{BASE_URL}/drivers/leclerc.json"

    @pytest.mark.parametrize(
        ("page", "query"),
        [
            (Page(limit=10, offset=5), "?limit=10&offset=5"),
            (Page.with_offset(10), "?limit=30&offset=10"),
            (Page.with_max_limit(), "?limit=100&offset=0"),
        ],
    )
    def test_with_page(self, page: Page, query: str) -> None:
        assert DriverInfo().to_url(page) == f"{BASE_URL}/drivers.json{query}"

    def test_custom_base_url(self) -> None:
        url = SeasonList().to_url(base_url="http://localhost:8000/ergast/f1")
        assert url == "http://localhost:8000/ergast/f1/seasons.json"

    def test_resources_are_immutable_and_comparable(self) -> None:
        assert DriverInfo(Filters(season=2023)) == DriverInfo(Filters(season=2023))
        assert DriverInfo(Filters(season=2023)) != ConstructorInfo(Filters(season=2023))
