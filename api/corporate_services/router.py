"""
Corporate service API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from core import crud
from core.responses import list_response, ok, parse_active

from . import repository, schemas

router = APIRouter()


@router.get("")
async def list_corporate_services(
    active: str = Query(default="true"),
    service_type: str = Query(default="corporate", alias="serviceType"),
) -> dict:
    filters = repository.CorporateServiceFilter(active=parse_active(active), service_type=service_type)
    return await list_response(repository.TABLE, filters.predicates(), sort=repository.SORT, page=None)


@router.get("/{service_id}")
async def get_corporate_service(service_id: str) -> dict:
    return ok(await crud.get_or_404(repository.TABLE, repository.ENTITY, service_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_corporate_service(
    request: schemas.CorporateServiceCreate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    record = await crud.create(repository.TABLE, repository.ENTITY, request.to_fields())
    return ok(record, message="Corporate service created successfully")


@router.put("/{service_id}")
async def update_corporate_service(
    service_id: str,
    request: schemas.CorporateServiceUpdate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    record = await crud.update_or_404(repository.TABLE, repository.ENTITY, service_id, request.to_changes())
    return ok(record, message="Corporate service updated successfully")


@router.delete("/{service_id}")
async def delete_corporate_service(service_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    await crud.delete_or_404(repository.TABLE, repository.ENTITY, service_id)
    return ok(message="Corporate service deleted successfully")
