"""
Upload proxy schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DeleteFileRequest(BaseModel):
    fileKey: str = Field(..., min_length=1, max_length=500)
