"""
Service page schemas.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from core.schemas import Document, GalleryImage, Patch


class ServiceImage(GalleryImage):
    size: Literal["small", "medium", "large", "hero"] = "medium"


class HeroImage(Document):
    url: str | None = None
    alt: str | None = None


class ServiceCreate(Document):
    title: str = Field(..., min_length=1, max_length=200)
    slug: str | None = Field(default=None, max_length=200)
    subtitle: str | None = None
    description: str = Field(..., min_length=1)
    heroImage: HeroImage | None = None
    images: list[ServiceImage] = Field(default_factory=list)
    ctaText: str = "Get Started"
    ctaLink: str = "/contact"
    isActive: bool = True
    displayOrder: int = 0
    seoTitle: str | None = None
    seoDescription: str | None = None
    seoKeywords: str | None = None


class ServiceUpdate(Patch):
    create_schema = ServiceCreate

    title: str | None = Field(default=None, min_length=1, max_length=200)
    slug: str | None = Field(default=None, max_length=200)
    subtitle: str | None = None
    description: str | None = Field(default=None, min_length=1)
    heroImage: HeroImage | None = None
    images: list[ServiceImage] | None = None
    ctaText: str | None = None
    ctaLink: str | None = None
    isActive: bool | None = None
    displayOrder: int | None = None
    seoTitle: str | None = None
    seoDescription: str | None = None
    seoKeywords: str | None = None
