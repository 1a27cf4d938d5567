"""
Career application persistence: list filter, derived fields and stats.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from core import documents

TABLE = "career_applications"
ENTITY = "Career application"

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


@dataclass(frozen=True)
class CareerFilter:
    archived: bool = False
    status: str | None = None
    role: str | None = None

    def predicates(self) -> list[documents.Predicate]:
        preds = [documents.eq("isArchived", self.archived)]
        if self.status and self.status != "all":
            preds.append(documents.eq("status", self.status))
        if self.role and self.role != "all":
            # Role search is a case-insensitive substring match.
            preds.append(documents.matches("role", re.escape(self.role)))
        return preds


def format_file_size(size: int | float | None) -> str:
    """
    1536 -> "1.5 KB"
    """
    value = float(size or 0)
    if value <= 0:
        return "0 Bytes"
    exponent = 0
    while value >= 1024 and exponent < len(_SIZE_UNITS) - 1:
        value /= 1024
        exponent += 1
    return f"{round(value, 2):g} {_SIZE_UNITS[exponent]}"


def _as_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def age_in_days(created_at: Any, *, now: datetime | None = None) -> int | None:
    created = _as_datetime(created_at)
    if created is None:
        return None
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    return (now - created).days


def serialize(record: dict[str, Any]) -> dict[str, Any]:
    resume = record.get("resume") or {}
    return {
        **record,
        "ageInDays": age_in_days(record.get("createdAt")),
        "formattedFileSize": format_file_size(resume.get("fileSize")),
    }


def public_summary(record: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": record["id"],
        "name": record["name"],
        "email": record["email"],
        "role": record["role"],
        "status": record["status"],
        "createdAt": record["createdAt"],
    }


async def stats(*, now: datetime | None = None) -> dict:
    now = now or datetime.now(timezone.utc)
    not_archived = [documents.eq("isArchived", False)]

    status_rows = await documents.count_by(TABLE, "status")
    role_rows = await documents.count_by(TABLE, "role", not_archived, by_count=True, limit=10)
    return {
        "statusStats": [{"_id": row["value"], "count": row["count"]} for row in status_rows],
        "totalApplications": await documents.count(TABLE, not_archived),
        "recentApplications": await documents.count(
            TABLE, [*not_archived, documents.since(now - timedelta(days=7))]
        ),
        "roleStats": [{"_id": row["value"], "count": row["count"]} for row in role_rows],
    }
