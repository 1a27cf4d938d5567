"""
Testimonial schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from core.schemas import Document, Patch

ServiceType = Literal["wedding", "corporate", "social", "catering", "home", "all"]


class TestimonialImage(Document):
    url: str | None = None
    alt: str | None = None


class TestimonialCreate(Document):
    clientNames: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    rating: int = Field(default=5, ge=1, le=5)
    serviceType: ServiceType = "all"
    eventDate: datetime | None = None
    location: str | None = None
    image: TestimonialImage | None = None
    isActive: bool = True
    isFeatured: bool = False
    displayOrder: int = 0


class TestimonialUpdate(Patch):
    create_schema = TestimonialCreate

    clientNames: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1)
    rating: int | None = Field(default=None, ge=1, le=5)
    serviceType: ServiceType | None = None
    eventDate: datetime | None = None
    location: str | None = None
    image: TestimonialImage | None = None
    isActive: bool | None = None
    isFeatured: bool | None = None
    displayOrder: int | None = None
