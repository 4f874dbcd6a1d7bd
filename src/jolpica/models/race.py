"""Race model and the per-race payloads: schedule, session results, laps and pit stops."""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Any, ClassVar, Literal, Self

from pydantic import Field, model_validator

from jolpica.models._base import ErgastModel, RecordList, TimeOfDay
from jolpica.models.circuit import Circuit
from jolpica.models.lap import Lap
from jolpica.models.pit_stop import PitStop
from jolpica.models.results import QualifyingResult, RaceResult, SprintResult


class SessionDateTime(ErgastModel):
    """Start date, and time when known, of a weekend session."""

    date: dt.date
    time: TimeOfDay | None = None


# ── Payloads ───────────────────────────────────────────────


class SchedulePayload(ErgastModel):
    """A race with no results attached, only its weekend schedule."""

    kind: Literal["schedule"] = "schedule"
    first_practice: SessionDateTime | None = Field(default=None, alias="FirstPractice")
    second_practice: SessionDateTime | None = Field(default=None, alias="SecondPractice")
    third_practice: SessionDateTime | None = Field(default=None, alias="ThirdPractice")
    qualifying: SessionDateTime | None = Field(default=None, alias="Qualifying")
    sprint: SessionDateTime | None = Field(default=None, alias="Sprint")
    sprint_shootout: SessionDateTime | None = Field(default=None, alias="SprintShootout")
    sprint_qualifying: SessionDateTime | None = Field(default=None, alias="SprintQualifying")

    def concat(self, other: Self) -> Self:
        # A schedule carries no records; the same race's schedule on another page adds nothing.
        return self


class QualifyingPayload(RecordList):
    kind: Literal["qualifying_results"] = "qualifying_results"
    records_field: ClassVar[str] = "results"
    results: tuple[QualifyingResult, ...]


class SprintPayload(RecordList):
    kind: Literal["sprint_results"] = "sprint_results"
    records_field: ClassVar[str] = "results"
    results: tuple[SprintResult, ...]


class RaceResultsPayload(RecordList):
    kind: Literal["race_results"] = "race_results"
    records_field: ClassVar[str] = "results"
    results: tuple[RaceResult, ...]


class LapsPayload(RecordList):
    kind: Literal["laps"] = "laps"
    records_field: ClassVar[str] = "laps"
    laps: tuple[Lap, ...]


class PitStopsPayload(RecordList):
    kind: Literal["pit_stops"] = "pit_stops"
    records_field: ClassVar[str] = "pit_stops"
    pit_stops: tuple[PitStop, ...]


Payload = Annotated[
    SchedulePayload | QualifyingPayload | SprintPayload | RaceResultsPayload | LapsPayload | PitStopsPayload,
    Field(discriminator="kind"),
]

# JSON key on a race object -> (payload kind, records field)
_PAYLOAD_KEYS: dict[str, tuple[str, str]] = {
    "QualifyingResults": ("qualifying_results", "results"),
    "SprintResults": ("sprint_results", "results"),
    "Results": ("race_results", "results"),
    "Laps": ("laps", "laps"),
    "PitStops": ("pit_stops", "pit_stops"),
}

_SCHEDULE_KEYS = (
    "FirstPractice",
    "SecondPractice",
    "ThirdPractice",
    "Qualifying",
    "Sprint",
    "SprintShootout",
    "SprintQualifying",
)


# ── Race ───────────────────────────────────────────────────


RaceIdentity = tuple[int, int, str, str, Circuit, dt.date, dt.time | None]


class Race(ErgastModel):
    """A race weekend and the payload requested for it.

    The payload is decoded from whichever of ``QualifyingResults``, ``SprintResults``,
    ``Results``, ``Laps`` or ``PitStops`` the race object holds; a race with none of them
    is a schedule entry.
    """

    season: int
    round: int
    url: str
    race_name: str
    circuit: Circuit = Field(alias="Circuit")
    date: dt.date
    time: TimeOfDay | None = None
    payload: Payload

    @model_validator(mode="before")
    @classmethod
    def _extract_payload(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "payload" in data:
            return data

        data = dict(data)
        for key, (kind, records_field) in _PAYLOAD_KEYS.items():
            if key in data:
                data["payload"] = {"kind": kind, records_field: data.pop(key)}
                return data

        schedule = {key: data.pop(key) for key in _SCHEDULE_KEYS if key in data}
        data["payload"] = {"kind": "schedule", **schedule}
        return data

    @property
    def identity(self) -> RaceIdentity:
        """Fields that identify the same race across pages, i.e. everything but the payload."""
        return (self.season, self.round, self.url, self.race_name, self.circuit, self.date, self.time)
