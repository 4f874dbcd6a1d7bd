"""Concatenation of page responses into a single response.

The API serves long result sets as a sequence of pages. A race's results may be split
across page boundaries, so after concatenating the tables, races that appear on several
pages are merged back into one entry, keeping the order in which they first appeared.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence

from jolpica._logging import get_logger
from jolpica.exceptions import (
    BadPaginationError,
    BadPayloadVariantError,
    BadResponseInfoError,
    BadTableVariantError,
    EmptyResponseListError,
)
from jolpica.models.race import Race, RaceIdentity
from jolpica.models.response import RaceTable, Response


class PageVerify(enum.Flag):
    """Pagination checks to apply when concatenating pages."""

    NONE = 0
    # Each page's offset picks up exactly where the previous page ended.
    CONTIGUOUS = enum.auto()
    START_AT_FIRST_PAGE = enum.auto()
    FINISH_AT_LAST_PAGE = enum.auto()
    ALL = CONTIGUOUS | START_AT_FIRST_PAGE | FINISH_AT_LAST_PAGE


def _concat_pair(acc: Response, nxt: Response, page_verify: PageVerify) -> Response:
    if acc.info != nxt.info:
        raise BadResponseInfoError(f"Response info mismatch: {acc.info} != {nxt.info}")

    acc_page, next_page = acc.pagination, nxt.pagination
    if PageVerify.CONTIGUOUS in page_verify:
        if acc_page.total != next_page.total:
            raise BadPaginationError(
                f"Pagination total mismatch: {acc_page.total} != {next_page.total}"
            )
        if acc_page.offset + acc_page.limit != next_page.offset:
            raise BadPaginationError(
                "Pages are not contiguous: "
                f"offset {acc_page.offset} + limit {acc_page.limit} != next offset {next_page.offset}"
            )

    if type(acc.table) is not type(nxt.table):
        raise BadTableVariantError(
            f"Table variant mismatch: {type(acc.table).__name__} != {type(nxt.table).__name__}"
        )

    return acc.model_copy(
        update={
            "pagination": acc_page.model_copy(update={"limit": acc_page.limit + next_page.limit}),
            "table": acc.table.concat(nxt.table),
        }
    )


def _merge_races(races: Sequence[Race]) -> tuple[Race, ...]:
    """Merge entries of the same race, in order of first appearance."""
    merged: dict[RaceIdentity, Race] = {}
    for race in races:
        existing = merged.get(race.identity)
        if existing is None:
            merged[race.identity] = race
            continue

        if type(existing.payload) is not type(race.payload):
            raise BadPayloadVariantError(
                f"Payload variant mismatch for {race.season} round {race.round}: "
                f"{type(existing.payload).__name__} != {type(race.payload).__name__}"
            )
        merged[race.identity] = existing.model_copy(
            update={"payload": existing.payload.concat(race.payload)}
        )

    return tuple(merged.values())


def concat_response_multi_pages(
    responses: Sequence[Response],
    page_verify: PageVerify = PageVerify.ALL,
) -> Response:
    """Concatenate page responses, in order, into one response.

    The result keeps the first page's offset and total; its limit is the sum of all
    page limits. Races split across pages are merged into a single race.

    Raises:
        EmptyResponseListError: If ``responses`` is empty.
        BadResponseInfoError: If the pages belong to different requests.
        BadPaginationError: If a requested ``page_verify`` check fails.
        BadTableVariantError: If the pages hold different tables.
        BadPayloadVariantError: If parts of one race hold different payloads.
    """
    if not responses:
        raise EmptyResponseListError("Cannot concatenate an empty list of responses")

    first, rest = responses[0], responses[1:]

    if PageVerify.START_AT_FIRST_PAGE in page_verify and first.pagination.offset != 0:
        raise BadPaginationError(
            f"First page must have offset 0, got {first.pagination.offset}"
        )

    last = responses[-1].pagination
    if PageVerify.FINISH_AT_LAST_PAGE in page_verify and not last.is_last_page:
        raise BadPaginationError(
            "Last page does not reach the total: "
            f"offset {last.offset} + limit {last.limit} < total {last.total}"
        )

    acc = first
    for nxt in rest:
        acc = _concat_pair(acc, nxt, page_verify)

    if isinstance(acc.table, RaceTable):
        races = _merge_races(acc.table.races)
        acc = acc.model_copy(update={"table": acc.table.model_copy(update={"races": races})})

    get_logger().debug(
        "Concatenated %d pages of %s into %d records",
        len(responses), acc.url, len(acc.table.records),
    )
    return acc
