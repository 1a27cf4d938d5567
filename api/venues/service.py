"""
Venue writes: slug resolution and image cleanup before persisting.
"""

from __future__ import annotations

from typing import Any

from core import crud
from core.responses import bad_request
from core.schemas import drop_gallery_without_url
from core.slugs import resolve_slug, slug_change

from . import repository, schemas


async def create(payload: schemas.VenueCreate) -> dict[str, Any]:
    fields = drop_gallery_without_url(payload.to_fields())
    slug = resolve_slug(fields.pop("slug", None), payload.name)
    if not slug:
        raise bad_request("Venue slug cannot be derived from the name")
    return await crud.create(repository.TABLE, repository.ENTITY, fields, slug=slug)


async def update(venue_id: str, payload: schemas.VenueUpdate) -> dict[str, Any]:
    changes = drop_gallery_without_url(payload.to_changes())
    slug = slug_change(changes.pop("slug", None))
    return await crud.update_or_404(repository.TABLE, repository.ENTITY, venue_id, changes, slug=slug)
