"""Qualifying, sprint and race result models, with their time and position types."""

from __future__ import annotations

import re
from datetime import timedelta
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, Field, model_validator

from jolpica.durations import parse_delta, parse_duration
from jolpica.models._base import Duration, ErgastModel
from jolpica.models.constructor import Constructor
from jolpica.models.driver import Driver


class PositionText(str, Enum):
    """Classification of a result that did not finish in a numbered position."""

    RETIRED = "R"
    DISQUALIFIED = "D"
    EXCLUDED = "E"
    WITHDRAWN = "W"
    FAILED_TO_QUALIFY = "F"
    NOT_CLASSIFIED = "N"


def _parse_position_text(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    try:
        return PositionText(value)
    except ValueError:
        return int(value)


Position = Annotated[int | PositionText, BeforeValidator(_parse_position_text)]
"""Finishing position as a number, or a :class:`PositionText` code."""


class QualifyingTime(ErgastModel):
    """A qualifying session lap time. An empty string from the API means no time was set."""

    time: timedelta | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"time": parse_duration(data) if data else None}
        return data

    @property
    def has_time(self) -> bool:
        return self.time is not None


def _time_text(data: dict[str, Any]) -> str:
    text = data.get("time", "")
    if not isinstance(text, str):
        raise ValueError(f"Race time 'time' must be a string, got {type(text).__name__}")
    return text


def _millis(data: dict[str, Any]) -> int:
    if "millis" not in data:
        raise ValueError("Missing key 'millis' in race time")
    try:
        return int(data["millis"])
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid 'millis' in race time: {data['millis']!r}") from exc


class RaceTime(ErgastModel):
    """Total race time, and the gap to the leader (zero for the leader)."""

    total: timedelta
    delta: timedelta = timedelta(0)

    @model_validator(mode="before")
    @classmethod
    def _from_millis_and_time(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "millis" not in data:
            return data

        text = _time_text(data)
        if not text:
            raise ValueError("Unexpected empty 'time' in race time")

        millis = _millis(data)
        total = timedelta(milliseconds=millis)
        if text.startswith("+"):
            delta = parse_delta(text)
            if delta > total:
                raise ValueError(f"Delta time {text!r} exceeds millis {millis}")
            return {"total": total, "delta": delta}

        if parse_duration(text) != total:
            raise ValueError(f"Time {text!r} does not match millis {millis}")
        return {"total": total}

    @property
    def is_lead(self) -> bool:
        return self.delta == timedelta(0)


_HOURS_MINUTES_RE = re.compile(r"(\d{1,2}):(\d{1,2})", re.ASCII)


def _coerce_reported_race_time(value: Any) -> Any:
    """Handle race times the API is known to report malformed.

    Some results carry a gap of ``"+-..."`` (dropped), or an ``H:MM`` total in place of a
    gap; the latter is accepted as a lead time if it agrees with ``millis`` to within 60s.
    """
    if not isinstance(value, dict):
        return value

    text = _time_text(value)
    if text.startswith("+-"):
        return None

    match = _HOURS_MINUTES_RE.fullmatch(text)
    if match is None:
        return value

    millis = _millis(value)
    hours, minutes = (int(group) for group in match.groups())
    if abs(millis - (hours * 3600 + minutes * 60) * 1000) > 60 * 1000:
        raise ValueError(f"Time {text!r} does not match millis {millis} to within 60s")
    return {"total": timedelta(milliseconds=millis)}


ReportedRaceTime = Annotated[RaceTime | None, BeforeValidator(_coerce_reported_race_time)]


def _extract_nested_time(value: Any) -> Any:
    return value.get("time") if isinstance(value, dict) else value


def _parse_car_number(value: Any) -> Any:
    return None if value == "None" else value


class AverageSpeed(ErgastModel):
    units: Literal["kph"]
    speed: float


class FastestLap(ErgastModel):
    """A driver's fastest lap of the event."""

    rank: int | None = None
    lap: int
    time: Annotated[Duration, BeforeValidator(_extract_nested_time)] = Field(alias="Time")
    average_speed: AverageSpeed | None = Field(default=None, alias="AverageSpeed")


class QualifyingResult(ErgastModel):
    number: int
    position: int
    driver: Driver = Field(alias="Driver")
    constructor: Constructor = Field(alias="Constructor")
    q1: QualifyingTime | None = Field(default=None, alias="Q1")
    q2: QualifyingTime | None = Field(default=None, alias="Q2")
    q3: QualifyingTime | None = Field(default=None, alias="Q3")


class SprintResult(ErgastModel):
    number: int
    position: int
    position_text: Position
    points: float
    driver: Driver = Field(alias="Driver")
    constructor: Constructor = Field(alias="Constructor")
    grid: int
    laps: int
    status: str
    time: ReportedRaceTime = Field(default=None, alias="Time")
    fastest_lap: FastestLap | None = Field(default=None, alias="FastestLap")


class RaceResult(ErgastModel):
    """A driver's classification in a race.

    ``number`` is ``None`` for early entries the API lists without a car number.
    """

    number: Annotated[int | None, BeforeValidator(_parse_car_number)]
    position: int
    position_text: Position
    points: float
    driver: Driver = Field(alias="Driver")
    constructor: Constructor = Field(alias="Constructor")
    grid: int
    laps: int
    status: str
    time: ReportedRaceTime = Field(default=None, alias="Time")
    fastest_lap: FastestLap | None = Field(default=None, alias="FastestLap")
