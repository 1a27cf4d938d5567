"""
Auth business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=str(user_row["id"]),
        username=str(user_row["username"]),
        role=str(user_row["role"]),
    )


def login(payload: schemas.LoginRequest) -> schemas.LoginResponse:
    user_row = repository.get_user_by_username(payload.username)

    # Same answer for unknown user and wrong password.
    is_valid = user_row is not None and security.verify_password(
        payload.password, str(user_row.get("password_hash") or "")
    )
    if not is_valid:
        logger.info("login_failed username=%s", payload.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    user = _to_user_response(user_row)
    token = security.build_access_token(user_id=user.id, username=user.username, role=user.role)
    logger.info("login_succeeded username=%s", user.username)
    return schemas.LoginResponse(token=token, user=user)


def get_user_from_access_token(access_token: str) -> dict:
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    subject = str(payload.get("sub") or "").strip()
    if not subject:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token subject.",
        )

    return {
        "id": subject,
        "username": str(payload.get("username") or ""),
        "role": str(payload.get("role") or ""),
    }
