"""
Service page API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from core import crud, documents
from core.responses import list_response, ok, parse_active

from . import repository, schemas, service

router = APIRouter()


@router.get("")
async def list_services(
    active: str = Query(default="true"),
    service_type: str | None = Query(default=None, alias="serviceType"),
) -> dict:
    filters = repository.ServiceFilter(active=parse_active(active), service_type=service_type)
    return await list_response(repository.TABLE, filters.predicates(), sort=repository.SORT, page=None)


@router.get("/slug/{slug}")
async def get_service_by_slug(slug: str) -> dict:
    record = await crud.get_by_slug_or_404(
        repository.TABLE, repository.ENTITY, slug, [documents.eq("isActive", True)]
    )
    return ok(record)


@router.get("/{service_id}")
async def get_service(service_id: str) -> dict:
    return ok(await crud.get_or_404(repository.TABLE, repository.ENTITY, service_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_service(
    request: schemas.ServiceCreate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    record = await service.create(request)
    return ok(record, message="Service created successfully")


@router.put("/{service_id}")
async def update_service(
    service_id: str,
    request: schemas.ServiceUpdate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    record = await service.update(service_id, request)
    return ok(record, message="Service updated successfully")


@router.delete("/{service_id}")
async def delete_service(service_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    await crud.delete_or_404(repository.TABLE, repository.ENTITY, service_id)
    return ok(message="Service deleted successfully")
