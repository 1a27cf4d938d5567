"""
Career application schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from core.schemas import Document, Patch, normalize_email

ApplicationStatus = Literal["new", "reviewing", "interview", "hired", "rejected", "archived"]
SortField = Literal["createdAt", "updatedAt", "name", "role", "status", "rating"]


class Resume(Document):
    url: str = Field(..., min_length=1)
    originalName: str = Field(..., min_length=1)
    fileType: str = Field(..., min_length=1)
    fileSize: int = Field(..., ge=0)
    key: str = Field(..., min_length=1)


class CareerApplicationCreate(Document):
    name: str = Field(..., min_length=1, max_length=100)
    email: str
    phone: str = Field(..., min_length=1, max_length=30)
    role: str = Field(..., min_length=1, max_length=100)
    resume: Resume
    source: str = "website"

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: str) -> str:
        return normalize_email(value)


class CareerApplicationUpdate(Patch):
    required_fields = frozenset({"status", "notes", "reviewedBy", "tags"})

    status: ApplicationStatus | None = None
    notes: str | None = None
    reviewedBy: str | None = None
    reviewedAt: datetime | None = None
    interviewDate: datetime | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    tags: list[str] | None = None
