"""
Pydantic building blocks shared by the entity schemas.
"""

from __future__ import annotations

import re
from typing import Any, ClassVar, get_args

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z0-9-]{2,}$")


class Document(BaseModel):
    """
    Base for request bodies: strings are trimmed, unknown keys ignored.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    def to_fields(self) -> dict[str, Any]:
        """Create payload: every value, defaults included, JSON-ready."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_changes(self) -> dict[str, Any]:
        """Update payload: only the keys the caller sent."""
        return self.model_dump(mode="json", exclude_unset=True)


def _admits_none(annotation: Any) -> bool:
    return annotation is type(None) or type(None) in get_args(annotation)


class Patch(Document):
    """
    Base for partial-update bodies.

    Every field is optional, but a key sent as explicit `null` is rejected
    when the field cannot be null on the stored record: fields that do not
    admit None on `create_schema`, plus `required_fields`.
    """

    create_schema: ClassVar[type[BaseModel] | None] = None
    required_fields: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def non_nullable_fields(cls) -> frozenset[str]:
        names = set(cls.required_fields)
        if cls.create_schema is not None:
            for name, field in cls.create_schema.model_fields.items():
                if name in cls.model_fields and not _admits_none(field.annotation):
                    names.add(name)
        return frozenset(names)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name in cls.non_nullable_fields():
            raise ValueError(f"{info.field_name} cannot be null")
        return value


def normalize_email(value: str) -> str:
    value = (value or "").strip().lower()
    if not EMAIL_RE.match(value):
        raise ValueError("Please provide a valid email address")
    return value


class ImageRef(Document):
    """Single embedded image; `url` may be blank and is dropped before persisting."""

    url: str = ""
    alt: str = ""
    key: str = ""


class GalleryImage(ImageRef):
    caption: str | None = None
    displayOrder: int = 0


def images_with_url(images: list[dict[str, Any]] | None) -> list[dict[str, Any]]:
    return [img for img in images or [] if str(img.get("url") or "").strip()]


def drop_image_without_url(fields: dict[str, Any], key: str = "image") -> dict[str, Any]:
    """
    Remove a single embedded image block when it carries no url. Returns the
    same dict for chaining.
    """
    image = fields.get(key)
    if isinstance(image, dict) and not str(image.get("url") or "").strip():
        fields.pop(key)
    return fields


def drop_gallery_without_url(fields: dict[str, Any], key: str = "images") -> dict[str, Any]:
    if fields.get(key) is not None:
        fields[key] = images_with_url(fields[key])
    return fields


class ReorderRequest(BaseModel):
    displayOrder: int = Field(..., ge=0, strict=True)
