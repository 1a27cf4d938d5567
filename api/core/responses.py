"""
Success envelopes and list paging helpers shared by every route group.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

from fastapi import HTTPException, status

from . import documents


def ok(data: Any = None, *, message: str | None = None, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    body.update(extra)
    return body


def not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")


def bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def duplicate_slug(entity: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"{entity} with this slug already exists",
    )


def parse_active(active: str | None) -> bool | None:
    """
    `active` query flag: "all" disables the filter, otherwise "true" means
    active records and anything else means inactive ones.
    """
    if active is None or active == "all":
        return None
    return active == "true"


def parse_flag(value: str | None) -> bool | None:
    if value is None:
        return None
    return value == "true"


def sort_direction(sort_order: str | None, default: int = documents.ASC) -> int:
    if sort_order == "desc":
        return documents.DESC
    if sort_order == "asc":
        return documents.ASC
    return default


@dataclass(frozen=True)
class Page:
    number: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.number - 1) * self.limit


MAX_PAGE_SIZE = 200


def clamp_limit(limit: int) -> int:
    """Oversized page requests are served at `MAX_PAGE_SIZE`."""
    return min(limit, MAX_PAGE_SIZE)


def page_or_none(page: int, limit: int | None) -> Page | None:
    if not limit or limit <= 0:
        return None
    return Page(number=max(page, 1), limit=clamp_limit(limit))


def pagination_summary(page: Page, total: int) -> dict[str, Any]:
    return {
        "current": page.number,
        "total": math.ceil(total / page.limit),
        "count": total,
        "hasNext": page.skip + page.limit < total,
        "hasPrev": page.number > 1,
    }


async def list_response(
    table: str,
    predicates: list[documents.Predicate],
    *,
    sort: list[documents.SortKey],
    page: Page | None,
    serialize: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """
    Run a list query and wrap it: paged (with `pagination`) when a page size
    was supplied, otherwise every match.
    """
    serialize = serialize or (lambda record: record)

    if page is None:
        items = await documents.find(table, predicates, sort=sort)
        return ok([serialize(item) for item in items], count=len(items))

    items = await documents.find(table, predicates, sort=sort, skip=page.skip, limit=page.limit)
    total = await documents.count(table, predicates)
    return ok(
        [serialize(item) for item in items],
        count=len(items),
        pagination=pagination_summary(page, total),
    )
