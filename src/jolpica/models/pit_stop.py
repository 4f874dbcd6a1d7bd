"""Pit stop model."""

from __future__ import annotations

from jolpica.models._base import Duration, ErgastModel, PitLaneTime


class PitStop(ErgastModel):
    """A single pit stop: who, on which lap, at what time of day and for how long."""

    driver_id: str
    lap: int
    stop: int
    time: PitLaneTime
    duration: Duration
