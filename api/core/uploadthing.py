"""
UploadThing HTTP client helpers.

Used endpoints:
- POST /v6/uploadFiles  (multipart "files")  -> upload result JSON
- POST /v6/deleteFile   {"fileKey": "..."}   -> delete result JSON

Remote failures are not retried: a non-2xx answer is surfaced to the caller
with its original status code and body.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from . import settings

DEFAULT_API_URL = "https://api.uploadthing.com"
DEFAULT_REGIONS = ["sea1"]
API_KEY_HEADER = "X-Uploadthing-Api-Key"

logger = logging.getLogger(__name__)


# Upload-service failures are explicit and separable from other runtime errors.
class UploadThingError(RuntimeError):
    pass


class UploadThingNotConfigured(UploadThingError):
    pass


@dataclass(frozen=True)
class UpstreamResponse:
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.text) if self.text else None


def api_url() -> str:
    return settings.env_str("UPLOADTHING_API_URL", DEFAULT_API_URL).rstrip("/")


def regions() -> list[str]:
    return settings.env_list("UPLOADTHING_REGIONS", DEFAULT_REGIONS)


def build_token(api_key: str, app_id: str, region_list: list[str]) -> str:
    payload = {"apiKey": api_key, "appId": app_id, "regions": region_list}
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


def service_token() -> str:
    """
    Prefer UPLOADTHING_TOKEN; otherwise build one from the key, app id and
    regions. Empty when the parts are missing.
    """
    token = settings.env_str("UPLOADTHING_TOKEN")
    if token:
        return token

    key = settings.env_str("UPLOADTHING_API_KEY")
    app_id = settings.env_str("UPLOADTHING_APP_ID")
    if not key or not app_id:
        return ""
    return build_token(key, app_id, regions())


def _api_key_from_token(token: str) -> str:
    try:
        payload = json.loads(base64.b64decode(token, validate=True))
    except (binascii.Error, ValueError):
        return ""
    if not isinstance(payload, dict):
        return ""
    return str(payload.get("apiKey") or "").strip()


def api_key() -> str:
    key = settings.env_str("UPLOADTHING_API_KEY")
    if key:
        return key
    token = settings.env_str("UPLOADTHING_TOKEN")
    return _api_key_from_token(token) if token else ""


def require_api_key() -> str:
    key = api_key()
    if not key:
        raise UploadThingNotConfigured("UploadThing not configured (missing UPLOADTHING_API_KEY)")
    return key


def log_config() -> None:
    key = api_key()
    logger.info(
        "uploadthing_config api_key=%s app_id=%s regions=%s token=%s",
        f"{key[:10]}..." if key else "missing",
        settings.env_str("UPLOADTHING_APP_ID") or "missing",
        ",".join(regions()),
        "present" if service_token() else "missing",
    )


async def upload_files(
    *,
    filename: str,
    content: bytes,
    content_type: str | None,
    timeout_s: float = 60.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> UpstreamResponse:
    """
    Forward one file to the upload service.
    """
    key = require_api_key()
    files = {"files": (filename, content, content_type or "application/octet-stream")}

    try:
        async with httpx.AsyncClient(base_url=api_url(), timeout=timeout_s, transport=transport) as client:
            resp = await client.post("/v6/uploadFiles", files=files, headers={API_KEY_HEADER: key})
    except httpx.HTTPError as exc:
        raise UploadThingError(f"UploadThing upload request failed: {exc}") from exc

    logger.info("uploadthing_upload status=%s filename=%s size=%s", resp.status_code, filename, len(content))
    return UpstreamResponse(status_code=resp.status_code, text=resp.text)


async def delete_file(
    *,
    file_key: str,
    timeout_s: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> UpstreamResponse:
    """
    Delete a stored object by its key.
    """
    key = require_api_key()
    file_key = (file_key or "").strip()
    if not file_key:
        raise UploadThingError("fileKey is empty.")

    try:
        async with httpx.AsyncClient(base_url=api_url(), timeout=timeout_s, transport=transport) as client:
            resp = await client.post("/v6/deleteFile", json={"fileKey": file_key}, headers={API_KEY_HEADER: key})
    except httpx.HTTPError as exc:
        raise UploadThingError(f"UploadThing delete request failed: {exc}") from exc

    logger.info("uploadthing_delete status=%s file_key=%s", resp.status_code, file_key)
    return UpstreamResponse(status_code=resp.status_code, text=resp.text)
