"""
Upload-session endpoints used by the browser upload widgets.

`GET` describes the available file routes, `POST ?slug=<route>` uploads one
file through a route and answers with the upload-complete metadata.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, Query, Request, Response, UploadFile, status

from auth import dependencies as auth_dependencies

from . import service

router = APIRouter()

RESUME_UPLOADER = "career-applicant"


def cors_headers(request: Request) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": request.headers.get("origin") or "*",
        "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
        "Access-Control-Allow-Headers": "*",
        "Access-Control-Allow-Credentials": "true",
    }


@router.options("")
async def preflight(request: Request) -> Response:
    return Response(status_code=status.HTTP_200_OK, headers=cors_headers(request))


@router.get("")
async def file_routes() -> list[dict]:
    return service.route_config()


@router.post("")
async def upload_through_route(
    slug: str = Query(...),
    file: UploadFile = File(...),
    current_user: dict | None = Depends(auth_dependencies.get_optional_user),
) -> dict:
    route = service.FILE_ROUTES.get(slug)
    if route is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown file route '{slug}'")

    if route.public:
        uploaded_by = RESUME_UPLOADER
    else:
        uploaded_by = str(current_user["id"]) if current_user else "anonymous"

    return await service.upload_to_route(route, file, uploaded_by=uploaded_by)
