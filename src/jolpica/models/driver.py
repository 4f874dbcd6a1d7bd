"""Driver model."""

from __future__ import annotations

import datetime as dt

from jolpica.models._base import ErgastModel


class Driver(ErgastModel):
    """Driver biographical information."""

    driver_id: str
    permanent_number: int | None = None
    code: str | None = None
    url: str
    given_name: str
    family_name: str
    date_of_birth: dt.date | None = None
    nationality: str | None = None

    @property
    def full_name(self) -> str:
        """Given and family name, e.g. ``"Charles Leclerc"``."""
        return f"{self.given_name} {self.family_name}"
