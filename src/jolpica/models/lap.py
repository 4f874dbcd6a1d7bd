"""Lap timing models."""

from __future__ import annotations

from datetime import timedelta

from pydantic import Field

from jolpica.exceptions import NotFoundError, TooManyError, UnexpectedDataError
from jolpica.models._base import Duration, ErgastModel


class Timing(ErgastModel):
    """One driver's position and time on a given lap."""

    driver_id: str
    position: int
    time: Duration


class Lap(ErgastModel):
    """A lap of a race, with the timings of every driver (or of the filtered ones)."""

    number: int
    timings: tuple[Timing, ...] = Field(alias="Timings")


class DriverLap(ErgastModel):
    """A single driver's lap: lap number, position and lap time."""

    number: int
    position: int
    time: timedelta

    @classmethod
    def from_lap(cls, lap: Lap, driver_id: str) -> DriverLap:
        """Extract ``driver_id``'s timing from a lap filtered down to that driver.

        Raises:
            NotFoundError: If the lap has no timings.
            TooManyError: If the lap has more than one timing.
            UnexpectedDataError: If the timing belongs to another driver.
        """
        if not lap.timings:
            raise NotFoundError(f"Lap {lap.number} has no timings")
        if len(lap.timings) > 1:
            raise TooManyError(f"Lap {lap.number} has {len(lap.timings)} timings, expected 1")

        timing = lap.timings[0]
        if timing.driver_id != driver_id:
            raise UnexpectedDataError(f"Expected driver_id {driver_id!r} but got {timing.driver_id!r}")

        return cls(number=lap.number, position=timing.position, time=timing.time)
