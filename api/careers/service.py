"""
Career application intake and review workflow.

Status changes are caller-directed: any listed status may follow any other.
The only server-side side effect is stamping `reviewedAt` the first time an
application enters review.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from core import crud
from core.updates import apply_allowed_updates, changed_fields

from . import repository, schemas

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "status",
    "notes",
    "reviewedBy",
    "reviewedAt",
    "interviewDate",
    "rating",
    "tags",
)


async def submit(
    payload: schemas.CareerApplicationCreate,
    *,
    ip_address: str | None,
    user_agent: str | None,
) -> dict[str, Any]:
    fields = payload.to_fields()
    fields.update(
        {
            "status": "new",
            "notes": "",
            "reviewedBy": "",
            "isArchived": False,
            "ipAddress": ip_address,
            "userAgent": user_agent,
        }
    )
    application = await crud.create(repository.TABLE, repository.ENTITY, fields)
    logger.info("career_application_submitted application_id=%s role=%s", application["id"], application["role"])
    return repository.public_summary(application)


def stamp_review(
    existing: dict[str, Any],
    patch: dict[str, Any],
    updated: dict[str, Any],
    *,
    now: datetime,
) -> dict[str, Any]:
    """
    Set `reviewedAt` when the patch moves the application to "reviewing" and
    no review time exists yet (neither sent nor stored).
    """
    if patch.get("status") != "reviewing":
        return updated
    if patch.get("reviewedAt") or existing.get("reviewedAt"):
        return updated
    return {**updated, "reviewedAt": now.isoformat()}


async def update(application_id: str, payload: schemas.CareerApplicationUpdate) -> dict[str, Any]:
    existing = await crud.get_or_404(repository.TABLE, repository.ENTITY, application_id)

    patch = payload.to_changes()
    updated = apply_allowed_updates(existing, patch, UPDATABLE_FIELDS)
    updated = stamp_review(existing, patch, updated, now=datetime.now(timezone.utc))

    changes = changed_fields(existing, updated)
    if not changes:
        return existing
    return await crud.update_or_404(repository.TABLE, repository.ENTITY, application_id, changes)


async def archive(application_id: str) -> dict[str, Any]:
    application = await crud.update_or_404(
        repository.TABLE,
        repository.ENTITY,
        application_id,
        {"isArchived": True, "status": "archived"},
    )
    logger.info("career_application_archived application_id=%s", application_id)
    return application
