"""
Menu item persistence.
"""

from __future__ import annotations

from dataclasses import dataclass

from core import documents

TABLE = "menu_items"
ENTITY = "Menu item"

SORT: list[documents.SortKey] = [
    ("category", documents.ASC),
    ("displayOrder", documents.ASC),
    ("createdAt", documents.DESC),
]


@dataclass(frozen=True)
class MenuItemFilter:
    active: bool | None = True
    category: str | None = None
    service_type: str | None = "corporate"
    featured: bool | None = None

    def predicates(self) -> list[documents.Predicate]:
        preds: list[documents.Predicate] = []
        if self.active is not None:
            preds.append(documents.eq("isActive", self.active))
        if self.category and self.category != "all":
            preds.append(documents.eq("category", self.category))
        if self.service_type and self.service_type != "all":
            # Items tagged "all" are offered for every service type.
            preds.append(documents.one_of("serviceType", [self.service_type, "all"]))
        if self.featured is not None:
            preds.append(documents.eq("isFeatured", self.featured))
        return preds
