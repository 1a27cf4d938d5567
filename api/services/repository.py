"""
Service page persistence.
"""

from __future__ import annotations

from dataclasses import dataclass

from core import documents

TABLE = "services"
ENTITY = "Service"

SORT: list[documents.SortKey] = [("displayOrder", documents.ASC), ("createdAt", documents.DESC)]


@dataclass(frozen=True)
class ServiceFilter:
    active: bool | None = True
    # Service pages are addressed by slug; "serviceType" selects one page.
    service_type: str | None = None

    def predicates(self) -> list[documents.Predicate]:
        preds: list[documents.Predicate] = []
        if self.active is not None:
            preds.append(documents.eq("isActive", self.active))
        if self.service_type:
            preds.append(documents.eq("slug", self.service_type))
        return preds
