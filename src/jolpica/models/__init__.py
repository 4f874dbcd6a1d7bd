"""jolpica-f1 data models."""

from jolpica.models.circuit import Circuit, Location
from jolpica.models.constructor import Constructor
from jolpica.models.driver import Driver
from jolpica.models.lap import DriverLap, Lap, Timing
from jolpica.models.pit_stop import PitStop
from jolpica.models.race import (
    LapsPayload,
    Payload,
    PitStopsPayload,
    QualifyingPayload,
    Race,
    RaceResultsPayload,
    SchedulePayload,
    SessionDateTime,
    SprintPayload,
)
from jolpica.models.response import (
    CircuitTable,
    ConstructorTable,
    DriverTable,
    Pagination,
    RaceTable,
    Response,
    SeasonTable,
    StatusTable,
    Table,
)
from jolpica.models.results import (
    AverageSpeed,
    FastestLap,
    Position,
    PositionText,
    QualifyingResult,
    QualifyingTime,
    RaceResult,
    RaceTime,
    SprintResult,
)
from jolpica.models.season import Season
from jolpica.models.status import Status

__all__ = [
    "AverageSpeed",
    "Circuit",
    "CircuitTable",
    "Constructor",
    "ConstructorTable",
    "Driver",
    "DriverLap",
    "DriverTable",
    "FastestLap",
    "Lap",
    "LapsPayload",
    "Location",
    "Pagination",
    "Payload",
    "PitStop",
    "PitStopsPayload",
    "Position",
    "PositionText",
    "QualifyingPayload",
    "QualifyingResult",
    "QualifyingTime",
    "Race",
    "RaceResult",
    "RaceResultsPayload",
    "RaceTable",
    "RaceTime",
    "Response",
    "Season",
    "SeasonTable",
    "SessionDateTime",
    "SprintPayload",
    "SprintResult",
    "Status",
    "StatusTable",
    "Table",
    "Timing",
]
