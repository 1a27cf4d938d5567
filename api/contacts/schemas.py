"""
Contact form schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from core.schemas import Document, Patch, normalize_email

EventType = Literal["wedding", "corporate", "social", "other"]
ContactStatus = Literal["new", "contacted", "in_progress", "completed", "cancelled"]
Priority = Literal["low", "medium", "high"]
SortField = Literal["createdAt", "updatedAt", "name", "status", "eventType", "priority"]


class ContactCreate(Document):
    name: str = Field(..., min_length=2, max_length=100)
    email: str
    phone: str = Field(..., min_length=10, max_length=20)
    eventType: EventType
    message: str = Field(..., min_length=10, max_length=1000)

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: str) -> str:
        return normalize_email(value)


class ContactUpdate(Patch):
    required_fields = frozenset({"status", "priority"})

    status: ContactStatus | None = None
    priority: Priority | None = None
    notes: str | None = Field(default=None, max_length=500)
    followUpDate: datetime | None = None
