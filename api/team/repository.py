"""
Team member persistence.
"""

from __future__ import annotations

from dataclasses import dataclass

from core import documents

TABLE = "team_members"
ENTITY = "Team member"

SORT: list[documents.SortKey] = [("displayOrder", documents.ASC), ("createdAt", documents.ASC)]


@dataclass(frozen=True)
class TeamFilter:
    active: bool | None = True
    has_photo: bool | None = None

    def predicates(self) -> list[documents.Predicate]:
        preds: list[documents.Predicate] = []
        if self.active is not None:
            preds.append(documents.eq("isActive", self.active))
        if self.has_photo is not None:
            preds.append(documents.eq("hasPhoto", self.has_photo))
        return preds
