"""Circuit and location models."""

from __future__ import annotations

from pydantic import Field

from jolpica.models._base import ErgastModel


class Location(ErgastModel):
    """Geographic location of a circuit."""

    lat: float
    long: float
    locality: str
    country: str


class Circuit(ErgastModel):
    """Circuit information. Hashable, as it is part of a race's identity."""

    circuit_id: str
    url: str
    circuit_name: str
    location: Location = Field(alias="Location")
