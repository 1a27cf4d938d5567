"""
Contact persistence: typed list filter and stats queries.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from core import documents

TABLE = "contacts"
ENTITY = "Contact"


@dataclass(frozen=True)
class ContactFilter:
    status: str | None = None
    event_type: str | None = None

    def predicates(self) -> list[documents.Predicate]:
        preds: list[documents.Predicate] = []
        if self.status:
            preds.append(documents.eq("status", self.status))
        if self.event_type:
            preds.append(documents.eq("eventType", self.event_type))
        return preds


async def stats(*, now: datetime | None = None) -> dict:
    now = now or datetime.now(timezone.utc)
    week_ago = now - timedelta(days=7)

    event_types = await documents.count_by(TABLE, "eventType")
    return {
        "totalContacts": await documents.count(TABLE),
        "newContacts": await documents.count(TABLE, [documents.eq("status", "new")]),
        "inProgressContacts": await documents.count(TABLE, [documents.eq("status", "in_progress")]),
        "completedContacts": await documents.count(TABLE, [documents.eq("status", "completed")]),
        "recentContacts": await documents.count(TABLE, [documents.since(week_ago)]),
        "eventTypeStats": [{"_id": row["value"], "count": row["count"]} for row in event_types],
    }
