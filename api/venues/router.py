"""
Venue API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from core import crud, documents
from core.responses import list_response, ok, page_or_none, parse_active, parse_flag
from core.schemas import ReorderRequest

from . import repository, schemas, service

router = APIRouter()


@router.get("")
async def list_venues(
    active: str = Query(default="true"),
    category: str | None = Query(default=None),
    featured: str | None = Query(default=None),
    exclusive: str | None = Query(default=None),
    location: str | None = Query(default=None, max_length=200),
    venue_type: str | None = Query(default=None, alias="venueType"),
    min_capacity: int | None = Query(default=None, alias="minCapacity", ge=0),
    max_capacity: int | None = Query(default=None, alias="maxCapacity", ge=0),
    has_outdoor_space: str | None = Query(default=None, alias="hasOutdoorSpace"),
    has_indoor_space: str | None = Query(default=None, alias="hasIndoorSpace"),
    price_range: str | None = Query(default=None, alias="priceRange"),
    style: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=0, ge=0),
) -> dict:
    filters = repository.VenueFilter(
        active=parse_active(active),
        category=category,
        featured=parse_flag(featured),
        exclusive=parse_flag(exclusive),
        location=location,
        venue_type=venue_type,
        min_capacity=min_capacity,
        max_capacity=max_capacity,
        has_outdoor_space=parse_flag(has_outdoor_space),
        has_indoor_space=parse_flag(has_indoor_space),
        price_range=price_range,
        style=style,
    )
    return await list_response(
        repository.TABLE,
        filters.predicates(),
        sort=repository.SORT,
        page=page_or_none(page, limit),
        serialize=repository.serialize,
    )


@router.get("/categories")
async def venue_categories() -> dict:
    return ok(await repository.categories())


@router.get("/slug/{slug}")
async def get_venue_by_slug(slug: str) -> dict:
    venue = await crud.get_by_slug_or_404(
        repository.TABLE, repository.ENTITY, slug, [documents.eq("isActive", True)]
    )
    return ok(repository.serialize(venue))


@router.get("/{venue_id}")
async def get_venue(venue_id: str) -> dict:
    venue = await crud.get_or_404(repository.TABLE, repository.ENTITY, venue_id)
    return ok(repository.serialize(venue))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_venue(
    request: schemas.VenueCreate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    venue = await service.create(request)
    return ok(repository.serialize(venue), message="Venue created successfully")


@router.put("/{venue_id}")
async def update_venue(
    venue_id: str,
    request: schemas.VenueUpdate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    venue = await service.update(venue_id, request)
    return ok(repository.serialize(venue), message="Venue updated successfully")


@router.delete("/{venue_id}")
async def delete_venue(venue_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    await crud.delete_or_404(repository.TABLE, repository.ENTITY, venue_id)
    return ok(message="Venue deleted successfully")


@router.put("/{venue_id}/reorder")
async def reorder_venue(
    venue_id: str,
    request: ReorderRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    venue = await crud.reorder(repository.TABLE, repository.ENTITY, venue_id, request.displayOrder)
    return ok(repository.serialize(venue), message="Venue order updated successfully")
