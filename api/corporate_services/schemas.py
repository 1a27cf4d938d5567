"""
Corporate service card schemas.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from core.schemas import Document, ImageRef, Patch

ServiceType = Literal["corporate", "social", "wedding", "all"]


class CorporateServiceCreate(Document):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    icon: str | None = None
    image: ImageRef = Field(default_factory=ImageRef)
    isActive: bool = True
    displayOrder: int = 0
    ctaText: str = "Learn More"
    ctaLink: str = "/contact"
    serviceType: ServiceType = "corporate"


class CorporateServiceUpdate(Patch):
    create_schema = CorporateServiceCreate

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    icon: str | None = None
    image: ImageRef | None = None
    isActive: bool | None = None
    displayOrder: int | None = None
    ctaText: str | None = None
    ctaLink: str | None = None
    serviceType: ServiceType | None = None
