"""
Upload proxy logic.

This file is independent of the routing layer:
- read upload bytes with a size limit
- enforce per-route file type/size rules for the upload-session endpoints
- forward to the upload service and map its answers onto HTTP errors
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException, UploadFile, status

from core import settings, uploadthing

logger = logging.getLogger(__name__)

MB = 1024 * 1024
DEFAULT_MAX_UPLOAD_BYTES = 10 * MB


@dataclass(frozen=True)
class FileRule:
    # Exact MIME type, or a "family/*" wildcard.
    mime: str
    config_key: str
    max_bytes: int

    def accepts(self, content_type: str) -> bool:
        if self.mime.endswith("/*"):
            return content_type.startswith(self.mime[:-1])
        return content_type == self.mime


@dataclass(frozen=True)
class FileRoute:
    slug: str
    rules: tuple[FileRule, ...]
    source: str
    public: bool = False
    max_file_count: int = 1

    def rule_for(self, content_type: str) -> FileRule | None:
        for rule in self.rules:
            if rule.accepts(content_type):
                return rule
        return None

    def config(self) -> dict[str, Any]:
        return {
            rule.config_key: {
                "maxFileSize": f"{rule.max_bytes // MB}MB",
                "maxFileCount": self.max_file_count,
            }
            for rule in self.rules
        }


FILE_ROUTES: dict[str, FileRoute] = {
    route.slug: route
    for route in (
        FileRoute(
            slug="imageUploader",
            rules=(FileRule("image/*", "image", 8 * MB),),
            source="team",
        ),
        FileRoute(
            slug="resumeUploader",
            rules=(
                FileRule("application/pdf", "application/pdf", 10 * MB),
                FileRule("application/msword", "application/msword", 10 * MB),
                FileRule(
                    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                    10 * MB,
                ),
                FileRule("text/csv", "text/csv", 5 * MB),
                FileRule("text/plain", "text/plain", 5 * MB),
            ),
            source="career",
            public=True,
        ),
    )
}


def route_config() -> list[dict[str, Any]]:
    return [{"slug": route.slug, "config": route.config()} for route in FILE_ROUTES.values()]


def max_upload_bytes() -> int:
    value = settings.env_int("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES)
    if value <= 0:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Invalid MAX_UPLOAD_BYTES. It must be > 0.",
        )
    return value


async def read_upload_bytes(file: UploadFile, max_bytes: int) -> bytes:
    """
    Read the upload into memory, enforcing a maximum size.
    """
    chunk_size = 1024 * 1024  # 1 MiB
    buf = bytearray()

    while True:
        chunk = await file.read(chunk_size)
        if not chunk:
            break
        buf.extend(chunk)
        if len(buf) > max_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Max is {max_bytes} bytes.",
            )

    return bytes(buf)


def _require_configured() -> None:
    try:
        uploadthing.require_api_key()
    except uploadthing.UploadThingNotConfigured as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc


def _relay(resp: uploadthing.UpstreamResponse, failure_message: str) -> Any:
    """
    Non-2xx answers are passed through with their status and body text.
    """
    if not resp.ok:
        raise HTTPException(status_code=resp.status_code, detail=resp.text)
    try:
        return resp.json()
    except ValueError as exc:
        logger.exception("uploadthing_bad_response status=%s", resp.status_code)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure_message) from exc


async def forward_upload(
    *,
    filename: str,
    content: bytes,
    content_type: str | None,
) -> Any:
    _require_configured()
    try:
        resp = await uploadthing.upload_files(
            filename=filename,
            content=content,
            content_type=content_type,
        )
    except uploadthing.UploadThingError as exc:
        logger.exception("upload_failed filename=%s", filename)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Upload failed") from exc
    return _relay(resp, "Upload failed")


async def upload_file(file: UploadFile) -> Any:
    content = await read_upload_bytes(file, max_bytes=max_upload_bytes())
    return await forward_upload(
        filename=file.filename or "upload",
        content=content,
        content_type=file.content_type,
    )


async def delete_file(file_key: str) -> Any:
    _require_configured()
    try:
        resp = await uploadthing.delete_file(file_key=file_key)
    except uploadthing.UploadThingError as exc:
        logger.exception("delete_failed file_key=%s", file_key)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Delete failed") from exc
    return _relay(resp, "Delete failed")


def _first_file(data: Any) -> dict[str, Any]:
    # The service answers with a list of files, optionally under "data".
    if isinstance(data, dict) and "data" in data:
        data = data["data"]
    if isinstance(data, list):
        data = data[0] if data else {}
    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        data = data["data"]
    return data if isinstance(data, dict) else {}


async def upload_to_route(
    route: FileRoute,
    file: UploadFile,
    *,
    uploaded_by: str,
) -> dict[str, Any]:
    """
    Upload one file through a named file route and return the
    upload-complete metadata.
    """
    content_type = (file.content_type or "").split(";")[0].strip().lower()
    rule = route.rule_for(content_type)
    if rule is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File type '{content_type or 'unknown'}' is not allowed for {route.slug}",
        )

    content = await read_upload_bytes(file, max_bytes=rule.max_bytes)
    data = await forward_upload(
        filename=file.filename or "upload",
        content=content,
        content_type=content_type,
    )
    uploaded = _first_file(data)

    result: dict[str, Any] = {
        "uploadedBy": uploaded_by,
        "url": uploaded.get("url") or uploaded.get("ufsUrl"),
        "key": uploaded.get("key"),
        "name": uploaded.get("name") or file.filename,
        "size": uploaded.get("size") or len(content),
    }
    if route.public:
        result["type"] = uploaded.get("type") or content_type
        result["source"] = route.source
    logger.info("file_route_upload slug=%s key=%s size=%s", route.slug, result["key"], result["size"])
    return result
