"""
Team member schemas.

Blank strings in a request body are treated as "not provided", so optional
fields left empty in the admin form never trip their validators.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import Field, field_validator, model_validator

from core.schemas import Document, Patch

_DATA_URL_RE = re.compile(r"^data:image/[a-zA-Z+]+;base64,")
_HTTP_URL_RE = re.compile(r"^https?://")


class TeamMemberBody(Document):
    image: str | None = None
    imageKey: str | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_blank_strings(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {k: v for k, v in data.items() if not (isinstance(v, str) and not v.strip())}

    @field_validator("image")
    @classmethod
    def image_is_url(cls, value: str | None) -> str | None:
        if value and not (_DATA_URL_RE.match(value) or _HTTP_URL_RE.match(value)):
            raise ValueError("Image must be a data URL or an http(s) URL")
        return value


class TeamMemberCreate(TeamMemberBody):
    name: str = Field(..., min_length=2, max_length=100)
    role: str = Field(..., min_length=2, max_length=100)
    favoriteMenuItem: str | None = Field(default=None, max_length=100)
    hasPhoto: bool | None = None
    displayOrder: int = Field(default=0, ge=0)
    isActive: bool = True
    bio: str | None = Field(default=None, max_length=500)
    specialties: list[str] = Field(default_factory=list)


class TeamMemberUpdate(Patch, TeamMemberBody):
    create_schema = TeamMemberCreate

    name: str | None = Field(default=None, min_length=2, max_length=100)
    role: str | None = Field(default=None, min_length=2, max_length=100)
    favoriteMenuItem: str | None = Field(default=None, max_length=100)
    hasPhoto: bool | None = None
    displayOrder: int | None = Field(default=None, ge=0)
    isActive: bool | None = None
    bio: str | None = Field(default=None, max_length=500)
    specialties: list[str] | None = None
