"""
Allow-listed partial updates.
"""

from __future__ import annotations

from typing import Any, Iterable

_MISSING = object()


def apply_allowed_updates(
    existing: dict[str, Any],
    patch: dict[str, Any],
    allowed_fields: Iterable[str],
) -> dict[str, Any]:
    """
    Return a copy of `existing` with the keys of `patch` that appear in
    `allowed_fields` applied. Neither input is modified.
    """
    allowed = set(allowed_fields)
    updated = dict(existing)
    for key, value in patch.items():
        if key in allowed:
            updated[key] = value
    return updated


def changed_fields(existing: dict[str, Any], updated: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in updated.items() if existing.get(k, _MISSING) != v}
