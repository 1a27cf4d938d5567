"""
Career application API endpoints.
"""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, Query, Request, status

from auth import dependencies as auth_dependencies
from core import crud, documents
from core.responses import Page, clamp_limit, list_response, ok, parse_flag, sort_direction

from . import repository, schemas, service

router = APIRouter()


@router.get("")
async def list_applications(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1),
    status_: str | None = Query(default=None, alias="status"),
    role: str | None = Query(default=None, max_length=100),
    archived: str = Query(default="false"),
    sort_by: schemas.SortField = Query(default="createdAt", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query(default="desc", alias="sortOrder"),
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    filters = repository.CareerFilter(archived=bool(parse_flag(archived)), status=status_, role=role)
    return await list_response(
        repository.TABLE,
        filters.predicates(),
        sort=[(sort_by, sort_direction(sort_order, documents.DESC))],
        page=Page(number=page, limit=clamp_limit(limit)),
        serialize=repository.serialize,
    )


@router.get("/stats")
async def application_stats(_: dict = Depends(auth_dependencies.require_admin)) -> dict:
    return ok(await repository.stats())


@router.get("/{application_id}")
async def get_application(application_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    application = await crud.get_or_404(repository.TABLE, repository.ENTITY, application_id)
    return ok(repository.serialize(application))


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_application(request: Request, payload: schemas.CareerApplicationCreate) -> dict:
    data = await service.submit(
        payload,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    return ok(data, message="Career application submitted successfully")


@router.put("/{application_id}")
async def update_application(
    application_id: str,
    payload: schemas.CareerApplicationUpdate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    application = await service.update(application_id, payload)
    return ok(repository.serialize(application), message="Career application updated successfully")


@router.delete("/{application_id}")
async def delete_application(application_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    await crud.delete_or_404(repository.TABLE, repository.ENTITY, application_id)
    return ok(message="Career application deleted successfully")


@router.post("/{application_id}/archive")
async def archive_application(application_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    application = await service.archive(application_id)
    return ok(repository.serialize(application), message="Career application archived successfully")
