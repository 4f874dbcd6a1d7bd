"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any

import pytest

from jolpica import ClientConfig, JolpicaClient, MultiPageOption
from jolpica.models.response import Response

BASE_URL = "https://api.jolpi.ca/ergast/f1"


SAMPLE_SEASON_1950 = {
    "season": "1950",
    "url": "https://en.wikipedia.org/wiki/1950_Formula_One_season",
}

SAMPLE_SEASON_2023 = {
    "season": "2023",
    "url": "https://en.wikipedia.org/wiki/2023_Formula_One_World_Championship",
}

SAMPLE_DRIVER_LECLERC = {
    "driverId": "leclerc",
    "permanentNumber": "16",
    "code": "LEC",
    "url": "http://en.wikipedia.org/wiki/Charles_Leclerc",
    "givenName": "Charles",
    "familyName": "Leclerc",
    "dateOfBirth": "1997-10-16",
    "nationality": "Monegasque",
}

SAMPLE_DRIVER_MAX = {
    "driverId": "max_verstappen",
    "permanentNumber": "33",
    "code": "VER",
    "url": "http://en.wikipedia.org/wiki/Max_Verstappen",
    "givenName": "Max",
    "familyName": "Verstappen",
    "dateOfBirth": "1997-09-30",
    "nationality": "Dutch",
}

# Optional fields are missing: "permanentNumber", "code"
SAMPLE_DRIVER_FANGIO = {
    "driverId": "fangio",
    "url": "http://en.wikipedia.org/wiki/Juan_Manuel_Fangio",
    "givenName": "Juan",
    "familyName": "Fangio",
    "dateOfBirth": "1911-06-24",
    "nationality": "Argentine",
}

SAMPLE_CONSTRUCTOR_FERRARI = {
    "constructorId": "ferrari",
    "url": "http://en.wikipedia.org/wiki/Scuderia_Ferrari",
    "name": "Ferrari",
    "nationality": "Italian",
}

SAMPLE_CONSTRUCTOR_RED_BULL = {
    "constructorId": "red_bull",
    "url": "http://en.wikipedia.org/wiki/Red_Bull_Racing",
    "name": "Red Bull",
    "nationality": "Austrian",
}

SAMPLE_CIRCUIT_SPA = {
    "circuitId": "spa",
    "url": "https://en.wikipedia.org/wiki/Circuit_de_Spa-Francorchamps",
    "circuitName": "Circuit de Spa-Francorchamps",
    "Location": {
        "lat": "50.4372",
        "long": "5.97139",
        "locality": "Spa",
        "country": "Belgium",
    },
}

SAMPLE_CIRCUIT_BAKU = {
    "circuitId": "baku",
    "url": "https://en.wikipedia.org/wiki/Baku_City_Circuit",
    "circuitName": "Baku City Circuit",
    "Location": {
        "lat": "40.3725",
        "long": "49.8533",
        "locality": "Baku",
        "country": "Azerbaijan",
    },
}

SAMPLE_CIRCUIT_IMOLA = {
    "circuitId": "imola",
    "url": "https://en.wikipedia.org/wiki/Imola_Circuit",
    "circuitName": "Autodromo Enzo e Dino Ferrari",
    "Location": {
        "lat": "44.3439",
        "long": "11.7167",
        "locality": "Imola",
        "country": "Italy",
    },
}

SAMPLE_STATUS_FINISHED = {"statusId": "1", "count": "7674", "status": "Finished"}

# Race identities, without a payload

RACE_2003_4 = {
    "season": "2003",
    "round": "4",
    "url": "https://en.wikipedia.org/wiki/2003_San_Marino_Grand_Prix",
    "raceName": "San Marino Grand Prix",
    "Circuit": SAMPLE_CIRCUIT_IMOLA,
    "date": "2003-04-20",
}

RACE_2021_12 = {
    "season": "2021",
    "round": "12",
    "url": "https://en.wikipedia.org/wiki/2021_Belgian_Grand_Prix",
    "raceName": "Belgian Grand Prix",
    "Circuit": SAMPLE_CIRCUIT_SPA,
    "date": "2021-08-29",
    "time": "13:00:00Z",
}

RACE_2023_4 = {
    "season": "2023",
    "round": "4",
    "url": "https://en.wikipedia.org/wiki/2023_Azerbaijan_Grand_Prix",
    "raceName": "Azerbaijan Grand Prix",
    "Circuit": SAMPLE_CIRCUIT_BAKU,
    "date": "2023-04-30",
    "time": "11:00:00Z",
}

SAMPLE_RACE_2023_4_SCHEDULE = {
    **RACE_2023_4,
    "FirstPractice": {"date": "2023-04-28", "time": "09:30:00Z"},
    "Qualifying": {"date": "2023-04-28", "time": "13:00:00Z"},
    "Sprint": {"date": "2023-04-29", "time": "13:30:00Z"},
    "SprintShootout": {"date": "2023-04-29", "time": "09:30:00Z"},
}

SAMPLE_QUALIFYING_RESULT = {
    "number": "16",
    "position": "1",
    "Driver": SAMPLE_DRIVER_LECLERC,
    "Constructor": SAMPLE_CONSTRUCTOR_FERRARI,
    "Q1": "1:41.269",
    "Q2": "1:41.037",
    "Q3": "1:40.203",
}

SAMPLE_RACE_RESULT_P1 = {
    "number": "11",
    "position": "1",
    "positionText": "1",
    "points": "25",
    "Driver": {
        "driverId": "perez",
        "permanentNumber": "11",
        "code": "PER",
        "url": "http://en.wikipedia.org/wiki/Sergio_P%C3%A9rez",
        "givenName": "Sergio",
        "familyName": "Pérez",
        "dateOfBirth": "1990-01-26",
        "nationality": "Mexican",
    },
    "Constructor": SAMPLE_CONSTRUCTOR_RED_BULL,
    "grid": "3",
    "laps": "51",
    "status": "Finished",
    "Time": {"millis": "5562436", "time": "1:32:42.436"},
    "FastestLap": {
        "rank": "5",
        "lap": "50",
        "Time": {"time": "1:44.589"},
        "AverageSpeed": {"units": "kph", "speed": "206.625"},
    },
}

SAMPLE_RACE_RESULT_P2 = {
    "number": "1",
    "position": "2",
    "positionText": "2",
    "points": "18",
    "Driver": SAMPLE_DRIVER_MAX,
    "Constructor": SAMPLE_CONSTRUCTOR_RED_BULL,
    "grid": "1",
    "laps": "51",
    "status": "Finished",
    "Time": {"millis": "5564573", "time": "+2.137"},
}

SAMPLE_RACE_RESULT_P3 = {
    "number": "16",
    "position": "3",
    "positionText": "3",
    "points": "15",
    "Driver": SAMPLE_DRIVER_LECLERC,
    "Constructor": SAMPLE_CONSTRUCTOR_FERRARI,
    "grid": "2",
    "laps": "51",
    "status": "Finished",
    "Time": {"millis": "5583653", "time": "+21.217"},
}

SAMPLE_RACE_RESULT_RETIRED = {
    "number": "55",
    "position": "20",
    "positionText": "R",
    "points": "0",
    "Driver": {
        "driverId": "sainz",
        "permanentNumber": "55",
        "code": "SAI",
        "url": "http://en.wikipedia.org/wiki/Carlos_Sainz_Jr.",
        "givenName": "Carlos",
        "familyName": "Sainz",
        "dateOfBirth": "1994-09-01",
        "nationality": "Spanish",
    },
    "Constructor": SAMPLE_CONSTRUCTOR_FERRARI,
    "grid": "4",
    "laps": "10",
    "status": "Accident",
}

SAMPLE_LAP_1 = {
    "number": "1",
    "Timings": [
        {"driverId": "leclerc", "position": "1", "time": "1:50.109"},
        {"driverId": "max_verstappen", "position": "2", "time": "1:50.456"},
    ],
}

SAMPLE_LAP_2 = {
    "number": "2",
    "Timings": [
        {"driverId": "leclerc", "position": "1", "time": "1:47.707"},
        {"driverId": "max_verstappen", "position": "2", "time": "1:47.707"},
    ],
}

SAMPLE_PIT_STOP_MAX = {
    "driverId": "max_verstappen",
    "lap": "10",
    "stop": "1",
    "time": "15:22:00",
    "duration": "20.707",
}

SAMPLE_PIT_STOP_LECLERC = {
    "driverId": "leclerc",
    "lap": "11",
    "stop": "1",
    "time": "15:24:25",
    "duration": "21.126",
}

# Table key -> list key in the JSON envelope
_TABLE_LIST_KEYS = {
    "SeasonTable": "Seasons",
    "DriverTable": "Drivers",
    "ConstructorTable": "Constructors",
    "CircuitTable": "Circuits",
    "RaceTable": "Races",
    "StatusTable": "Status",
}


def make_envelope(
    table: str,
    records: list[dict[str, Any]],
    *,
    limit: int = 30,
    offset: int = 0,
    total: int | None = None,
    url: str = f"{BASE_URL}/seasons.json",
) -> dict[str, Any]:
    """Build an API response body holding ``records`` in ``table``."""
    return {
        "MRData": {
            "xmlns": "",
            "series": "f1",
            "url": url,
            "limit": str(limit),
            "offset": str(offset),
            "total": str(len(records) if total is None else total),
            table: {_TABLE_LIST_KEYS[table]: copy.deepcopy(records)},
        }
    }


def make_response(table: str, records: list[dict[str, Any]], **kwargs: Any) -> Response:
    return Response.model_validate(make_envelope(table, records, **kwargs))


def race_with(race: dict[str, Any], key: str, records: list[dict[str, Any]]) -> dict[str, Any]:
    """A race object carrying ``records`` under payload ``key``, e.g. ``"Results"``."""
    return {**race, key: records}


@pytest.fixture
def client() -> Iterator[JolpicaClient]:
    """Client with rate limiting disabled and no retries."""
    config = ClientConfig(http_retries=0, rate_limiter=None)
    with JolpicaClient(config) as jolpica:
        yield jolpica


@pytest.fixture
def single_page_client() -> Iterator[JolpicaClient]:
    config = ClientConfig(http_retries=0, rate_limiter=None, multi_page=MultiPageOption.disabled())
    with JolpicaClient(config) as jolpica:
        yield jolpica
