"""
Venue persistence: public list filter, derived fields and category counts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from core import documents

TABLE = "venues"
ENTITY = "Venue"

SORT: list[documents.SortKey] = [
    ("category", documents.ASC),
    ("displayOrder", documents.ASC),
    ("createdAt", documents.DESC),
]


@dataclass(frozen=True)
class VenueFilter:
    active: bool | None = True
    category: str | None = None
    featured: bool | None = None
    exclusive: bool | None = None
    location: str | None = None
    venue_type: str | None = None
    min_capacity: int | None = None
    max_capacity: int | None = None
    has_outdoor_space: bool | None = None
    has_indoor_space: bool | None = None
    price_range: str | None = None
    style: str | None = None

    def predicates(self) -> list[documents.Predicate]:
        preds: list[documents.Predicate] = []
        if self.active is not None:
            preds.append(documents.eq("isActive", self.active))
        if _given(self.category):
            preds.append(documents.eq("category", self.category))
        if self.featured is not None:
            preds.append(documents.eq("isFeatured", self.featured))
        if self.exclusive is not None:
            preds.append(documents.eq("isExclusive", self.exclusive))
        if _given(self.location):
            preds.append(documents.matches("location", re.escape(self.location)))
        if _given(self.venue_type):
            preds.append(documents.has("venueType", self.venue_type))
        if self.min_capacity:
            preds.append(documents.gte("capacity.seated", self.min_capacity))
        if self.max_capacity:
            preds.append(documents.lte("capacity.seated", self.max_capacity))
        if self.has_outdoor_space is not None:
            preds.append(documents.eq("spaces.hasOutdoorSpace", self.has_outdoor_space))
        if self.has_indoor_space is not None:
            preds.append(documents.eq("spaces.hasIndoorSpace", self.has_indoor_space))
        if _given(self.price_range):
            preds.append(documents.eq("priceRange", self.price_range))
        if _given(self.style):
            preds.append(documents.has("style", self.style))
        return preds


def _given(value: str | None) -> bool:
    return bool(value) and value != "all"


def primary_image(images: list[dict[str, Any]] | None) -> dict[str, Any] | None:
    images = images or []
    for image in images:
        if image.get("isPrimary"):
            return image
    return images[0] if images else None


def capacity_display(capacity: dict[str, Any] | None) -> str:
    capacity = capacity or {}
    if capacity.get("displayText"):
        return str(capacity["displayText"])
    return f"{capacity.get('seated')} seated, {capacity.get('standing')} standing"


def serialize(record: dict[str, Any]) -> dict[str, Any]:
    return {
        **record,
        "primaryImage": primary_image(record.get("images")),
        "capacityDisplay": capacity_display(record.get("capacity")),
    }


async def categories() -> dict[str, list[dict[str, Any]]]:
    active = [documents.eq("isActive", True)]

    def shape(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [{"_id": row["value"], "count": row["count"]} for row in rows]

    return {
        "categories": shape(await documents.count_by(TABLE, "category", active)),
        "venueTypes": shape(await documents.count_by(TABLE, "venueType", active, unwind=True)),
        "locations": shape(await documents.count_by(TABLE, "location", active)),
    }
