"""
Contact form intake and admin follow-up.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import BackgroundTasks

from core import crud, mailer
from core.updates import apply_allowed_updates, changed_fields

from . import repository, schemas

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("status", "priority", "notes", "followUpDate")


async def submit(payload: schemas.ContactCreate, background_tasks: BackgroundTasks) -> dict:
    fields = payload.to_fields()
    fields.update({"status": "new", "priority": "medium"})
    contact = await crud.create(repository.TABLE, repository.ENTITY, fields)

    background_tasks.add_task(mailer.send_contact_form_emails_background, contact)
    logger.info("contact_submitted contact_id=%s event_type=%s", contact["id"], contact["eventType"])

    return {
        "id": contact["id"],
        "name": contact["name"],
        "email": contact["email"],
        "eventType": contact["eventType"],
        "createdAt": contact["createdAt"],
    }


def _with_contacted_at(existing: dict, updated: dict, *, now: datetime) -> dict:
    # First move away from "new" records when the client was contacted.
    if existing.get("status") == "new" and updated.get("status") not in (None, "new"):
        updated = {**updated, "contactedAt": now.isoformat()}
    return updated


async def update(contact_id: str, payload: schemas.ContactUpdate) -> dict:
    existing = await crud.get_or_404(repository.TABLE, repository.ENTITY, contact_id)

    updated = apply_allowed_updates(existing, payload.to_changes(), UPDATABLE_FIELDS)
    updated = _with_contacted_at(existing, updated, now=datetime.now(timezone.utc))

    changes = changed_fields(existing, updated)
    if not changes:
        return existing
    return await crud.update_or_404(repository.TABLE, repository.ENTITY, contact_id, changes)
