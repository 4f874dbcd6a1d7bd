"""Finishing status model."""

from __future__ import annotations

from jolpica.models._base import ErgastModel


class Status(ErgastModel):
    """A finishing status code and how many results it applies to."""

    status_id: int
    count: int
    status: str
