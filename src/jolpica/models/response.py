"""Top-level API response: envelope identity, pagination and a single table of records."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, TypeVar

from pydantic import Field, NonNegativeInt, model_validator

from jolpica.exceptions import (
    BadPayloadVariantError,
    BadTableVariantError,
    NotFoundError,
    TooManyError,
)
from jolpica.models._base import ErgastModel, RecordList
from jolpica.models.circuit import Circuit
from jolpica.models.constructor import Constructor
from jolpica.models.driver import Driver
from jolpica.models.lap import DriverLap, Timing
from jolpica.models.pit_stop import PitStop
from jolpica.models.race import LapsPayload, PitStopsPayload, Race
from jolpica.models.season import Season
from jolpica.models.status import Status


class Pagination(ErgastModel):
    """The page window the server actually returned."""

    limit: NonNegativeInt
    offset: NonNegativeInt
    total: NonNegativeInt

    @property
    def is_last_page(self) -> bool:
        return self.offset + self.limit >= self.total

    @property
    def is_single_page(self) -> bool:
        return self.offset == 0 and self.is_last_page

    def next_page(self) -> Pagination | None:
        """The following window, or ``None`` if this is the last page."""
        if self.is_last_page:
            return None
        return self.model_copy(update={"offset": self.offset + self.limit})


# ── Tables ─────────────────────────────────────────────────


class SeasonTable(RecordList):
    kind: Literal["seasons"] = "seasons"
    records_field: ClassVar[str] = "seasons"
    seasons: tuple[Season, ...]


class DriverTable(RecordList):
    kind: Literal["drivers"] = "drivers"
    records_field: ClassVar[str] = "drivers"
    drivers: tuple[Driver, ...]


class ConstructorTable(RecordList):
    kind: Literal["constructors"] = "constructors"
    records_field: ClassVar[str] = "constructors"
    constructors: tuple[Constructor, ...]


class CircuitTable(RecordList):
    kind: Literal["circuits"] = "circuits"
    records_field: ClassVar[str] = "circuits"
    circuits: tuple[Circuit, ...]


class RaceTable(RecordList):
    kind: Literal["races"] = "races"
    records_field: ClassVar[str] = "races"
    races: tuple[Race, ...]


class StatusTable(RecordList):
    kind: Literal["statuses"] = "statuses"
    records_field: ClassVar[str] = "statuses"
    statuses: tuple[Status, ...]


Table = Annotated[
    SeasonTable | DriverTable | ConstructorTable | CircuitTable | RaceTable | StatusTable,
    Field(discriminator="kind"),
]

# JSON table key -> (table kind, JSON list key, records field)
_TABLE_KEYS: dict[str, tuple[str, str, str]] = {
    "SeasonTable": ("seasons", "Seasons", "seasons"),
    "DriverTable": ("drivers", "Drivers", "drivers"),
    "ConstructorTable": ("constructors", "Constructors", "constructors"),
    "CircuitTable": ("circuits", "Circuits", "circuits"),
    "RaceTable": ("races", "Races", "races"),
    "StatusTable": ("statuses", "Status", "statuses"),
}


def _require_object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"Expected an object for {where!r}, got {type(value).__name__}")
    return value


def _require_key(data: dict[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing key {key!r} in {where!r}")
    return data[key]


T = TypeVar("T")
R = TypeVar("R")


def _one(records: tuple[T, ...], what: str) -> T:
    if not records:
        raise NotFoundError(f"Expected one {what}, found none")
    if len(records) > 1:
        raise TooManyError(f"Expected one {what}, found {len(records)}")
    return records[0]


# ── Response ───────────────────────────────────────────────


class Response(ErgastModel):
    """A decoded API response.

    Usage:
        response = Response.model_validate(payload)  # payload is the parsed JSON
        drivers = response.drivers()
        if not response.pagination.is_last_page:
            ...  # fetch response.pagination.next_page()
    """

    xmlns: str
    series: str
    url: str
    pagination: Pagination
    table: Table

    @model_validator(mode="before")
    @classmethod
    def _unwrap_envelope(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "MRData" not in data:
            return data

        mr_data = _require_object(data["MRData"], "MRData")
        for table_key, (kind, list_key, records_field) in _TABLE_KEYS.items():
            if table_key in mr_data:
                table_data = _require_object(mr_data[table_key], table_key)
                table = {"kind": kind, records_field: _require_key(table_data, list_key, table_key)}
                break
        else:
            raise ValueError(f"Response has none of the known tables: {', '.join(_TABLE_KEYS)}")

        return {
            "xmlns": _require_key(mr_data, "xmlns", "MRData"),
            "series": _require_key(mr_data, "series", "MRData"),
            "url": _require_key(mr_data, "url", "MRData"),
            "pagination": {
                "limit": _require_key(mr_data, "limit", "MRData"),
                "offset": _require_key(mr_data, "offset", "MRData"),
                "total": _require_key(mr_data, "total", "MRData"),
            },
            "table": table,
        }

    @property
    def info(self) -> tuple[str, str, str]:
        """Envelope identity: namespace, series and canonical URL."""
        return (self.xmlns, self.series, self.url)

    # ── Table records ──────────────────────────────────────

    def _records(self, table_type: type[RecordList]) -> tuple[Any, ...]:
        if not isinstance(self.table, table_type):
            raise BadTableVariantError(
                f"Expected {table_type.__name__}, got {type(self.table).__name__}"
            )
        return self.table.records

    def seasons(self) -> tuple[Season, ...]:
        return self._records(SeasonTable)

    def drivers(self) -> tuple[Driver, ...]:
        return self._records(DriverTable)

    def constructors(self) -> tuple[Constructor, ...]:
        return self._records(ConstructorTable)

    def circuits(self) -> tuple[Circuit, ...]:
        return self._records(CircuitTable)

    def statuses(self) -> tuple[Status, ...]:
        return self._records(StatusTable)

    def races(self) -> tuple[Race, ...]:
        return self._records(RaceTable)

    def single(self, records: tuple[R, ...]) -> R:
        """Return the only element of ``records``, e.g. ``response.single(response.drivers())``.

        Raises:
            NotFoundError: If there are no records.
            TooManyError: If there is more than one record.
        """
        return _one(records, "record")

    # ── Race payloads ──────────────────────────────────────

    def races_with(self, payload_type: type[Any]) -> tuple[Race, ...]:
        """All races, verifying each one carries a ``payload_type`` payload.

        Raises:
            BadTableVariantError: If the response does not hold races.
            BadPayloadVariantError: If any race holds a different payload.
        """
        races = self.races()
        for race in races:
            if not isinstance(race.payload, payload_type):
                raise BadPayloadVariantError(
                    f"Expected {payload_type.__name__}, got {type(race.payload).__name__}"
                    f" for {race.season} round {race.round}"
                )
        return races

    def race_with(self, payload_type: type[Any]) -> Race:
        """The only race, verified to carry a ``payload_type`` payload."""
        return _one(self.races_with(payload_type), "race")

    def driver_laps(self, driver_id: str) -> list[DriverLap]:
        """Laps of the single race in a lap-times response filtered to ``driver_id``."""
        laps = self.race_with(LapsPayload).payload.laps
        return [DriverLap.from_lap(lap, driver_id) for lap in laps]

    def lap_timings(self) -> tuple[Timing, ...]:
        """Timings of the single lap in a lap-times response filtered to one lap."""
        laps = self.race_with(LapsPayload).payload.laps
        return _one(laps, "lap").timings

    def pit_stops(self) -> tuple[PitStop, ...]:
        return self.race_with(PitStopsPayload).payload.pit_stops
