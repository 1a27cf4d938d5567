"""
URL slug normalization.
"""

from __future__ import annotations

import re

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def slugify(text: str) -> str:
    """
    "The Barn at Walnut Creek!" -> "the-barn-at-walnut-creek"
    """
    slug = _DISALLOWED.sub("", (text or "").strip().lower())
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def resolve_slug(explicit: str | None, source: str | None) -> str:
    """
    Normalize an explicit slug, or derive one from a name/title.
    """
    return slugify(explicit or "") or slugify(source or "")


def slug_change(explicit: str | None) -> str | None:
    """
    Normalized slug for a partial update, or None to keep the stored one.
    """
    return slugify(explicit or "") or None
