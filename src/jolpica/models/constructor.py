"""Constructor model."""

from __future__ import annotations

from jolpica.models._base import ErgastModel


class Constructor(ErgastModel):
    """Constructor (team) information."""

    constructor_id: str
    url: str
    name: str
    nationality: str | None = None
