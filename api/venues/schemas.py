"""
Venue schemas.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from core.schemas import Document, GalleryImage, Patch

PriceRange = Literal["$", "$$", "$$$", "$$$$"]
Category = Literal["Exclusive", "Featured", "Partner"]
VenueType = Literal[
    "Ballroom",
    "Barn",
    "Historic",
    "Modern",
    "Outdoor",
    "Waterfront",
    "Industrial",
    "Museum",
    "Hotel",
    "Farm",
    "Winery",
    "Lodge",
    "Garden",
    "Rooftop",
    "Church",
    "Gallery",
    "Theater",
    "Country Club",
    "Restaurant",
    "Other",
]
Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class VenueImage(GalleryImage):
    isPrimary: bool = False


class Amenity(Document):
    name: str = Field(..., min_length=1)
    icon: str | None = None
    description: str | None = None
    isHighlight: bool = False


class Address(Document):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zipCode: str | None = None
    country: str = "USA"


class Capacity(Document):
    seated: int = Field(..., ge=0)
    standing: int = Field(..., ge=0)
    displayText: str | None = None


class Spaces(Document):
    hasOutdoorSpace: bool = False
    hasIndoorSpace: bool = True
    hasBridal: bool = False
    hasDanceFloor: bool = False
    hasStage: bool = False
    hasKitchen: bool = False
    hasParking: bool = True


class VenueContact(Document):
    phone: str | None = None
    email: str | None = None
    contactPerson: str | None = None


class Pricing(Document):
    basePrice: float | None = Field(default=None, ge=0)
    priceUnit: Literal["per person", "per hour", "per day", "flat rate"] = "per person"
    minimumSpend: float | None = Field(default=None, ge=0)
    notes: str | None = None


class Availability(Document):
    daysOfWeek: list[Weekday] = Field(default_factory=lambda: ["Friday", "Saturday", "Sunday"])
    seasonality: Literal["Year-round", "Seasonal", "Spring-Fall", "Indoor only winter"] = "Year-round"


class Seo(Document):
    metaTitle: str | None = None
    metaDescription: str | None = None
    keywords: list[str] = Field(default_factory=list)


class SocialMedia(Document):
    instagram: str | None = None
    facebook: str | None = None
    twitter: str | None = None


class VenueCreate(Document):
    name: str = Field(..., min_length=1, max_length=200)
    slug: str | None = Field(default=None, max_length=200)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1, max_length=200)
    address: Address = Field(default_factory=Address)
    capacity: Capacity
    style: list[str] = Field(..., min_length=1)
    priceRange: PriceRange
    category: Category = "Partner"
    venueType: list[VenueType] = Field(default_factory=lambda: ["Other"])
    spaces: Spaces = Field(default_factory=Spaces)
    images: list[VenueImage] = Field(default_factory=list)
    amenities: list[Amenity] = Field(default_factory=list)
    website: str | None = None
    contact: VenueContact | None = None
    pricing: Pricing = Field(default_factory=Pricing)
    availability: Availability = Field(default_factory=Availability)
    features: list[str] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)
    isActive: bool = True
    isFeatured: bool = False
    isExclusive: bool = False
    displayOrder: int = 0
    seo: Seo | None = None
    socialMedia: SocialMedia | None = None
    tags: list[str] = Field(default_factory=list)


class VenueUpdate(Patch):
    create_schema = VenueCreate

    name: str | None = Field(default=None, min_length=1, max_length=200)
    slug: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    location: str | None = Field(default=None, min_length=1, max_length=200)
    address: Address | None = None
    capacity: Capacity | None = None
    style: list[str] | None = Field(default=None, min_length=1)
    priceRange: PriceRange | None = None
    category: Category | None = None
    venueType: list[VenueType] | None = None
    spaces: Spaces | None = None
    images: list[VenueImage] | None = None
    amenities: list[Amenity] | None = None
    website: str | None = None
    contact: VenueContact | None = None
    pricing: Pricing | None = None
    availability: Availability | None = None
    features: list[str] | None = None
    restrictions: list[str] | None = None
    isActive: bool | None = None
    isFeatured: bool | None = None
    isExclusive: bool | None = None
    displayOrder: int | None = None
    seo: Seo | None = None
    socialMedia: SocialMedia | None = None
    tags: list[str] | None = None
