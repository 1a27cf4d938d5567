"""
Menu item API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from core import crud
from core.responses import list_response, ok, page_or_none, parse_active, parse_flag

from . import repository, schemas

router = APIRouter()


@router.get("")
async def list_menu_items(
    active: str = Query(default="true"),
    category: str | None = Query(default=None),
    service_type: str = Query(default="corporate", alias="serviceType"),
    featured: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=0, ge=0),
) -> dict:
    filters = repository.MenuItemFilter(
        active=parse_active(active),
        category=category,
        service_type=service_type,
        featured=parse_flag(featured),
    )
    return await list_response(
        repository.TABLE,
        filters.predicates(),
        sort=repository.SORT,
        page=page_or_none(page, limit),
    )


@router.get("/{item_id}")
async def get_menu_item(item_id: str) -> dict:
    return ok(await crud.get_or_404(repository.TABLE, repository.ENTITY, item_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_menu_item(
    request: schemas.MenuItemCreate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    item = await crud.create(repository.TABLE, repository.ENTITY, request.to_fields())
    return ok(item, message="Menu item created successfully")


@router.put("/{item_id}")
async def update_menu_item(
    item_id: str,
    request: schemas.MenuItemUpdate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    item = await crud.update_or_404(repository.TABLE, repository.ENTITY, item_id, request.to_changes())
    return ok(item, message="Menu item updated successfully")


@router.delete("/{item_id}")
async def delete_menu_item(item_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    await crud.delete_or_404(repository.TABLE, repository.ENTITY, item_id)
    return ok(message="Menu item deleted successfully")
