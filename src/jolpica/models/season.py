"""Season model."""

from __future__ import annotations

from jolpica.models._base import ErgastModel


class Season(ErgastModel):
    """A championship season, identified by the year it took place in."""

    season: int
    url: str
