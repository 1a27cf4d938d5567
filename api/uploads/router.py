"""
Admin upload proxy endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile

from auth import dependencies as auth_dependencies
from core.responses import ok

from . import schemas, service

router = APIRouter()


@router.post("/upload")
async def upload(
    file: UploadFile = File(...),
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    data = await service.upload_file(file)
    return ok(data)


@router.post("/delete")
async def delete(
    request: schemas.DeleteFileRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    data = await service.delete_file(request.fileKey)
    return ok(data)
