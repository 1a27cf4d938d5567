"""
Menu item schemas.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from core.schemas import Document, ImageRef, Patch

PriceUnit = Literal["person", "platter", "dozen", "each", "hour"]
MenuCategory = Literal["breakfast", "lunch", "dinner", "packages", "beverages", "desserts"]
ServiceType = Literal["corporate", "wedding", "social", "catering", "all"]


class MenuItemCreate(Document):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    price: float = Field(..., ge=0)
    priceUnit: PriceUnit = "person"
    category: MenuCategory
    subcategory: str | None = None
    serviceType: ServiceType = "corporate"
    isActive: bool = True
    isFeatured: bool = False
    displayOrder: int = 0
    minimumOrder: int = Field(default=1, ge=1)
    notes: str | None = None
    image: ImageRef = Field(default_factory=ImageRef)


class MenuItemUpdate(Patch):
    create_schema = MenuItemCreate

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    priceUnit: PriceUnit | None = None
    category: MenuCategory | None = None
    subcategory: str | None = None
    serviceType: ServiceType | None = None
    isActive: bool | None = None
    isFeatured: bool | None = None
    displayOrder: int | None = None
    minimumOrder: int | None = Field(default=None, ge=1)
    notes: str | None = None
    image: ImageRef | None = None
