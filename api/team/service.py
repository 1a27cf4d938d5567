"""
Team member writes.
"""

from __future__ import annotations

from typing import Any

from core import crud

from . import repository, schemas


async def create(payload: schemas.TeamMemberCreate) -> dict[str, Any]:
    fields = payload.to_fields()
    # An explicit hasPhoto wins; otherwise it follows the image field.
    fields.setdefault("hasPhoto", bool(fields.get("image")))
    return await crud.create(repository.TABLE, repository.ENTITY, fields)


async def update(member_id: str, payload: schemas.TeamMemberUpdate) -> dict[str, Any]:
    changes = payload.to_changes()
    if changes.get("hasPhoto") is None:
        changes.pop("hasPhoto", None)
        if "image" in changes:
            changes["hasPhoto"] = bool(changes["image"])
    return await crud.update_or_404(repository.TABLE, repository.ENTITY, member_id, changes)
