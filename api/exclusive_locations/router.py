"""
Exclusive location API endpoints.
"""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from core import crud, documents
from core.responses import list_response, ok, page_or_none, parse_active, parse_flag, sort_direction
from core.schemas import ReorderRequest

from . import repository, schemas, service

router = APIRouter()


@router.get("")
async def list_locations(
    active: str = Query(default="true"),
    featured: str | None = Query(default=None),
    sort_by: schemas.SortField = Query(default="displayOrder", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query(default="asc", alias="sortOrder"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=0, ge=0),
) -> dict:
    filters = repository.LocationFilter(active=parse_active(active), featured=parse_flag(featured))
    return await list_response(
        repository.TABLE,
        filters.predicates(),
        sort=[(sort_by, sort_direction(sort_order, documents.ASC))],
        page=page_or_none(page, limit),
        serialize=repository.serialize,
    )


@router.get("/featured")
async def featured_locations() -> dict:
    rows = await repository.featured()
    return ok(rows, count=len(rows))


@router.get("/slug/{slug}")
async def get_location_by_slug(slug: str) -> dict:
    location = await crud.get_by_slug_or_404(
        repository.TABLE, repository.ENTITY, slug, [documents.eq("isActive", True)]
    )
    return ok(repository.serialize(location))


@router.get("/{location_id}")
async def get_location(location_id: str) -> dict:
    location = await crud.get_or_404(repository.TABLE, repository.ENTITY, location_id)
    return ok(repository.serialize(location))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_location(
    request: schemas.ExclusiveLocationCreate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    location = await service.create(request)
    return ok(repository.serialize(location), message="Exclusive location created successfully")


@router.put("/{location_id}")
async def update_location(
    location_id: str,
    request: schemas.ExclusiveLocationUpdate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    location = await service.update(location_id, request)
    return ok(repository.serialize(location), message="Exclusive location updated successfully")


@router.delete("/{location_id}")
async def delete_location(location_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    await crud.delete_or_404(repository.TABLE, repository.ENTITY, location_id)
    return ok(message="Exclusive location deleted successfully")


@router.put("/{location_id}/reorder")
async def reorder_location(
    location_id: str,
    request: ReorderRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    location = await crud.reorder(repository.TABLE, repository.ENTITY, location_id, request.displayOrder)
    return ok(repository.serialize(location), message="Display order updated successfully")
