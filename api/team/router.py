"""
Team member API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from core import crud
from core.responses import list_response, ok, parse_active, parse_flag
from core.schemas import ReorderRequest

from . import repository, schemas, service

router = APIRouter()


async def _list(filters: repository.TeamFilter) -> dict:
    return await list_response(repository.TABLE, filters.predicates(), sort=repository.SORT, page=None)


@router.get("")
async def list_team(
    active: str = Query(default="true"),
    has_photo: str | None = Query(default=None, alias="hasPhoto"),
) -> dict:
    return await _list(repository.TeamFilter(active=parse_active(active), has_photo=parse_flag(has_photo)))


@router.get("/with-photos")
async def list_team_with_photos() -> dict:
    return await _list(repository.TeamFilter(active=True, has_photo=True))


@router.get("/without-photos")
async def list_team_without_photos() -> dict:
    return await _list(repository.TeamFilter(active=True, has_photo=False))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_member(
    request: schemas.TeamMemberCreate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    member = await service.create(request)
    return ok(member, message="Team member created successfully")


@router.get("/{member_id}")
async def get_member(member_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    return ok(await crud.get_or_404(repository.TABLE, repository.ENTITY, member_id))


@router.put("/{member_id}")
async def update_member(
    member_id: str,
    request: schemas.TeamMemberUpdate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    member = await service.update(member_id, request)
    return ok(member, message="Team member updated successfully")


@router.delete("/{member_id}")
async def delete_member(member_id: str, _: dict = Depends(auth_dependencies.require_admin)) -> dict:
    await crud.delete_or_404(repository.TABLE, repository.ENTITY, member_id)
    return ok(message="Team member deleted successfully")


@router.put("/{member_id}/reorder")
async def reorder_member(
    member_id: str,
    request: ReorderRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    member = await crud.reorder(repository.TABLE, repository.ENTITY, member_id, request.displayOrder)
    return ok(member, message="Display order updated successfully")
