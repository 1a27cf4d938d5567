"""
Contact API endpoints.
"""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from auth import dependencies as auth_dependencies
from core import crud, documents
from core.responses import Page, clamp_limit, list_response, ok, sort_direction

from . import repository, schemas, service

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_contact(request: schemas.ContactCreate, background_tasks: BackgroundTasks) -> dict:
    data = await service.submit(request, background_tasks)
    return ok(data, message="Contact form submitted successfully")


@router.get("")
async def list_contacts(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1),
    status_: schemas.ContactStatus | None = Query(default=None, alias="status"),
    event_type: schemas.EventType | None = Query(default=None, alias="eventType"),
    sort_by: schemas.SortField = Query(default="createdAt", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query(default="desc", alias="sortOrder"),
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    filters = repository.ContactFilter(status=status_, event_type=event_type)
    return await list_response(
        repository.TABLE,
        filters.predicates(),
        sort=[(sort_by, sort_direction(sort_order, documents.DESC))],
        page=Page(number=page, limit=clamp_limit(limit)),
    )


@router.get("/stats")
async def contact_stats(_: dict = Depends(auth_dependencies.require_admin)) -> dict:
    return ok(await repository.stats())


@router.get("/{contact_id}")
async def get_contact(contact_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    return ok(await crud.get_or_404(repository.TABLE, repository.ENTITY, contact_id))


@router.put("/{contact_id}")
async def update_contact(
    contact_id: str,
    request: schemas.ContactUpdate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    contact = await service.update(contact_id, request)
    return ok(contact, message="Contact updated successfully")


@router.delete("/{contact_id}")
async def delete_contact(contact_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    await crud.delete_or_404(repository.TABLE, repository.ENTITY, contact_id)
    return ok(message="Contact deleted successfully")
