"""
Exclusive location persistence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core import documents

TABLE = "exclusive_locations"
ENTITY = "Exclusive location"

FEATURED_SORT: list[documents.SortKey] = [("displayOrder", documents.ASC), ("createdAt", documents.ASC)]


@dataclass(frozen=True)
class LocationFilter:
    active: bool | None = True
    featured: bool | None = None

    def predicates(self) -> list[documents.Predicate]:
        preds: list[documents.Predicate] = []
        if self.active is not None:
            preds.append(documents.eq("isActive", self.active))
        if self.featured is not None:
            preds.append(documents.eq("isFeatured", self.featured))
        return preds


def formatted_capacity(capacity: str | None) -> str:
    capacity = capacity or ""
    return capacity if "guest" in capacity else f"{capacity} guests"


def serialize(record: dict[str, Any]) -> dict[str, Any]:
    return {**record, "formattedCapacity": formatted_capacity(record.get("capacity"))}


async def featured() -> list[dict[str, Any]]:
    rows = await documents.find(
        TABLE,
        LocationFilter(active=True, featured=True).predicates(),
        sort=FEATURED_SORT,
    )
    return [serialize(row) for row in rows]
