"""
Admin credential lookup.

There is no users table: the admin account is configured through the
environment. `ADMIN_PASSWORD_HASH` (bcrypt) wins over `ADMIN_PASSWORD`, which
is hashed on first use so comparisons always go through bcrypt.
"""

from __future__ import annotations

from functools import lru_cache

from core import settings

from . import security

ADMIN_ROLE = "admin"
ADMIN_USER_ID = "admin-1"


def normalize_username(username: str) -> str:
    return (username or "").strip().lower()


@lru_cache(maxsize=8)
def _hash_plain(password: str) -> str:
    return security.hash_password(password)


def _admin_password_hash() -> str:
    hashed = settings.env_str("ADMIN_PASSWORD_HASH")
    if hashed:
        return hashed
    plain = settings.env_str("ADMIN_PASSWORD")
    return _hash_plain(plain) if plain else ""


def get_user_by_username(username: str) -> dict | None:
    admin_username = normalize_username(settings.env_str("ADMIN_USERNAME", "admin"))
    if not admin_username or normalize_username(username) != admin_username:
        return None

    password_hash = _admin_password_hash()
    if not password_hash:
        return None

    return {
        "id": ADMIN_USER_ID,
        "username": admin_username,
        "role": ADMIN_ROLE,
        "password_hash": password_hash,
    }
