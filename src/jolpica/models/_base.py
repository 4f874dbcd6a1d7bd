"""Shared model configuration and field types for API records."""

from __future__ import annotations

from datetime import time, timedelta
from functools import partial
from typing import Annotated, Any, ClassVar, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from jolpica.durations import parse_duration, parse_time


class ErgastModel(BaseModel):
    """Immutable record decoded from the API's camelCase JSON.

    Fields can be populated by their JSON alias or by their Python name.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class RecordList(ErgastModel):
    """A record collection stored in a single tuple field named by ``records_field``."""

    records_field: ClassVar[str]

    @property
    def records(self) -> tuple[Any, ...]:
        return getattr(self, self.records_field)

    def concat(self, other: Self) -> Self:
        """A copy holding this collection's records followed by ``other``'s."""
        return self.model_copy(update={self.records_field: self.records + other.records})


def _text_or_value(parser: Any, value: Any) -> Any:
    return parser(value) if isinstance(value, str) else value


Duration = Annotated[timedelta, BeforeValidator(partial(_text_or_value, parse_duration))]
"""Lap or gap duration, decoded from ``[[H:]MM:]SS.fff``."""

TimeOfDay = Annotated[time, BeforeValidator(partial(_text_or_value, parse_time))]
"""UTC time of day, decoded from ``HH:MM:SSZ``."""

PitLaneTime = Annotated[
    time,
    BeforeValidator(partial(_text_or_value, partial(parse_time, require_utc_suffix=False))),
]
"""Wall-clock time of a pit stop, reported as ``HH:MM:SS`` without the ``Z`` suffix."""
