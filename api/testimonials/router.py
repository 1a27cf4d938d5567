"""
Testimonial API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from core import crud
from core.responses import list_response, ok, page_or_none, parse_active, parse_flag

from . import repository, schemas

router = APIRouter()


@router.get("")
async def list_testimonials(
    active: str = Query(default="true"),
    service_type: str | None = Query(default=None, alias="serviceType"),
    featured: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=0, ge=0),
) -> dict:
    filters = repository.TestimonialFilter(
        active=parse_active(active),
        service_type=service_type,
        featured=parse_flag(featured),
    )
    return await list_response(
        repository.TABLE,
        filters.predicates(),
        sort=repository.SORT,
        page=page_or_none(page, limit),
    )


@router.get("/{testimonial_id}")
async def get_testimonial(testimonial_id: str) -> dict:
    return ok(await crud.get_or_404(repository.TABLE, repository.ENTITY, testimonial_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_testimonial(
    request: schemas.TestimonialCreate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    record = await crud.create(repository.TABLE, repository.ENTITY, request.to_fields())
    return ok(record, message="Testimonial created successfully")


@router.put("/{testimonial_id}")
async def update_testimonial(
    testimonial_id: str,
    request: schemas.TestimonialUpdate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    record = await crud.update_or_404(repository.TABLE, repository.ENTITY, testimonial_id, request.to_changes())
    return ok(record, message="Testimonial updated successfully")


@router.delete("/{testimonial_id}")
async def delete_testimonial(testimonial_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    await crud.delete_or_404(repository.TABLE, repository.ENTITY, testimonial_id)
    return ok(message="Testimonial deleted successfully")
