"""
Service page writes.
"""

from __future__ import annotations

from typing import Any

from core import crud
from core.responses import bad_request
from core.schemas import drop_gallery_without_url
from core.slugs import resolve_slug, slug_change

from . import repository, schemas


async def create(payload: schemas.ServiceCreate) -> dict[str, Any]:
    fields = drop_gallery_without_url(payload.to_fields())
    slug = resolve_slug(fields.pop("slug", None), payload.title)
    if not slug:
        raise bad_request("Service slug cannot be derived from the title")
    return await crud.create(repository.TABLE, repository.ENTITY, fields, slug=slug)


async def update(service_id: str, payload: schemas.ServiceUpdate) -> dict[str, Any]:
    changes = drop_gallery_without_url(payload.to_changes())
    slug = slug_change(changes.pop("slug", None))
    return await crud.update_or_404(repository.TABLE, repository.ENTITY, service_id, changes, slug=slug)
