"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.responses import ok

from . import dependencies, schemas, service

router = APIRouter()


@router.post("/login")
async def login(request: schemas.LoginRequest) -> dict:
    result = service.login(request)
    return ok(result.model_dump(), message="Login successful")


@router.post("/verify")
async def verify(current_user: dict = Depends(dependencies.get_current_user)) -> dict:
    return ok({"user": current_user}, message="Token is valid")
