"""
Corporate service persistence.
"""

from __future__ import annotations

from dataclasses import dataclass

from core import documents

TABLE = "corporate_services"
ENTITY = "Corporate service"

SORT: list[documents.SortKey] = [("displayOrder", documents.ASC), ("createdAt", documents.DESC)]


@dataclass(frozen=True)
class CorporateServiceFilter:
    active: bool | None = True
    service_type: str | None = "corporate"

    def predicates(self) -> list[documents.Predicate]:
        preds: list[documents.Predicate] = []
        if self.active is not None:
            preds.append(documents.eq("isActive", self.active))
        if self.service_type and self.service_type != "all":
            preds.append(documents.one_of("serviceType", [self.service_type, "all"]))
        return preds
