"""Filter sets that narrow a resource request, rendered as URL path segments."""

from __future__ import annotations

from dataclasses import dataclass

from jolpica.api import GRID_PIT_LANE
from jolpica.exceptions import InvalidFiltersError


def _segment(value: int | str | None) -> str:
    """Format a filter value as a path segment: ``""`` if unset, ``"/<value>"`` otherwise."""
    return "" if value is None else f"/{value}"


@dataclass(frozen=True)
class Filters:
    """Optional filters accepted by most resources.

    Usage:
        Filters(season=2023, round=4)  # renders: /2023/4
        Filters(driver_id="leclerc", constructor_id="ferrari")
        Filters(grid_pos=Filters.GRID_PIT_LANE)

    ``round`` may only be set together with ``season``.
    """

    GRID_PIT_LANE = GRID_PIT_LANE

    season: int | None = None
    round: int | None = None
    driver_id: str | None = None
    constructor_id: str | None = None
    circuit_id: str | None = None
    qualifying_pos: int | None = None
    grid_pos: int | None = None
    sprint_pos: int | None = None
    finish_pos: int | None = None
    fastest_lap_rank: int | None = None
    finishing_status: int | None = None

    def to_path_pairs(self) -> list[tuple[str, str]]:
        """Convert to ordered ``(segment_key, formatted_value)`` pairs.

        The order is the one the API expects in a path. Season and round have no key
        of their own; their values are placed directly.

        Raises:
            InvalidFiltersError: If ``round`` is set without ``season``.
        """
        if self.round is not None and self.season is None:
            raise InvalidFiltersError(f"Filter round={self.round} requires a season")

        return [
            ("", _segment(self.season)),
            ("", _segment(self.round)),
            ("/drivers", _segment(self.driver_id)),
            ("/constructors", _segment(self.constructor_id)),
            ("/circuits", _segment(self.circuit_id)),
            ("/qualifying", _segment(self.qualifying_pos)),
            ("/grid", _segment(self.grid_pos)),
            ("/sprint", _segment(self.sprint_pos)),
            ("/results", _segment(self.finish_pos)),
            ("/fastest", _segment(self.fastest_lap_rank)),
            ("/status", _segment(self.finishing_status)),
        ]


@dataclass(frozen=True)
class LapTimeFilters:
    """Filters for lap timings, which always target a single race."""

    season: int
    round: int
    lap: int | None = None
    driver_id: str | None = None

    def to_path_pairs(self) -> list[tuple[str, str]]:
        return [
            ("", _segment(self.season)),
            ("", _segment(self.round)),
            ("/laps", _segment(self.lap)),
            ("/drivers", _segment(self.driver_id)),
        ]


@dataclass(frozen=True)
class PitStopFilters:
    """Filters for pit stops, which always target a single race."""

    season: int
    round: int
    lap: int | None = None
    driver_id: str | None = None
    pit_stop: int | None = None

    def to_path_pairs(self) -> list[tuple[str, str]]:
        return [
            ("", _segment(self.season)),
            ("", _segment(self.round)),
            ("/laps", _segment(self.lap)),
            ("/drivers", _segment(self.driver_id)),
            ("/pitstops", _segment(self.pit_stop)),
        ]
