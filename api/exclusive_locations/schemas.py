"""
Exclusive location schemas.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from core.schemas import Document, ImageRef, Patch

PriceRange = Literal["$", "$$", "$$$", "$$$$"]
AvailabilityStatus = Literal["Available", "Booked", "Limited", "Coming Soon"]
SortField = Literal["displayOrder", "createdAt", "name", "updatedAt"]


class LocationImage(ImageRef):
    width: int = Field(default=800, ge=0)
    height: int = Field(default=533, ge=0)


class ContactInfo(Document):
    phone: str | None = None
    email: str | None = None
    website: str | None = None


class Address(Document):
    street: str | None = None
    city: str | None = None
    state: str = "OH"
    zipCode: str | None = None


class Seo(Document):
    metaTitle: str | None = None
    metaDescription: str | None = None
    keywords: list[str] = Field(default_factory=list)


class SocialMedia(Document):
    instagram: str | None = None
    facebook: str | None = None
    twitter: str | None = None


class ExclusiveLocationCreate(Document):
    name: str = Field(..., min_length=1, max_length=200)
    slug: str | None = Field(default=None, max_length=200)
    location: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    capacity: str = Field(..., min_length=1, max_length=100)
    image: LocationImage
    features: list[str] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)
    priceRange: PriceRange = "$$$"
    contactInfo: ContactInfo | None = None
    address: Address = Field(default_factory=Address)
    isActive: bool = True
    isFeatured: bool = True
    displayOrder: int = 0
    availabilityStatus: AvailabilityStatus = "Available"
    seo: Seo | None = None
    socialMedia: SocialMedia | None = None
    tags: list[str] = Field(default_factory=list)
    notes: str | None = None

    @field_validator("image")
    @classmethod
    def image_url_required(cls, value: LocationImage) -> LocationImage:
        if not value.url:
            raise ValueError("Image URL is required")
        return value


class ExclusiveLocationUpdate(Patch):
    create_schema = ExclusiveLocationCreate

    name: str | None = Field(default=None, min_length=1, max_length=200)
    slug: str | None = Field(default=None, max_length=200)
    location: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    capacity: str | None = Field(default=None, min_length=1, max_length=100)
    image: LocationImage | None = None
    features: list[str] | None = None
    amenities: list[str] | None = None
    priceRange: PriceRange | None = None
    contactInfo: ContactInfo | None = None
    address: Address | None = None
    isActive: bool | None = None
    isFeatured: bool | None = None
    displayOrder: int | None = None
    availabilityStatus: AvailabilityStatus | None = None
    seo: Seo | None = None
    socialMedia: SocialMedia | None = None
    tags: list[str] | None = None
    notes: str | None = None
