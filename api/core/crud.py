"""
Single-record operations shared by the entity repositories.

Each helper wraps one `core.documents` call and maps "missing" and "duplicate
slug" onto the HTTP errors every route group reports the same way.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from . import documents
from .responses import duplicate_slug, not_found

logger = logging.getLogger(__name__)


async def get_or_404(table: str, entity: str, record_id: str) -> dict[str, Any]:
    record = await documents.get(table, record_id)
    if record is None:
        raise not_found(entity)
    return record


async def get_by_slug_or_404(
    table: str,
    entity: str,
    slug: str,
    predicates: Sequence[documents.Predicate] = (),
) -> dict[str, Any]:
    record = await documents.get_by_slug(table, slug, predicates)
    if record is None:
        raise not_found(entity)
    return record


async def create(table: str, entity: str, fields: dict[str, Any], *, slug: str | None = None) -> dict[str, Any]:
    try:
        record = await documents.insert(table, fields, slug=slug)
    except documents.DuplicateKeyError as exc:
        logger.info("duplicate_slug table=%s slug=%s", table, slug)
        raise duplicate_slug(entity) from exc
    logger.info("record_created table=%s id=%s", table, record["id"])
    return record


async def update_or_404(
    table: str,
    entity: str,
    record_id: str,
    changes: dict[str, Any],
    *,
    slug: str | None = None,
) -> dict[str, Any]:
    try:
        record = await documents.update(table, record_id, changes, slug=slug)
    except documents.DuplicateKeyError as exc:
        logger.info("duplicate_slug table=%s slug=%s", table, slug)
        raise duplicate_slug(entity) from exc
    if record is None:
        raise not_found(entity)
    logger.info("record_updated table=%s id=%s fields=%s", table, record_id, ",".join(sorted(changes)))
    return record


async def delete_or_404(table: str, entity: str, record_id: str) -> None:
    deleted = await documents.delete(table, record_id)
    if not deleted:
        raise not_found(entity)
    logger.info("record_deleted table=%s id=%s", table, record_id)


async def reorder(table: str, entity: str, record_id: str, display_order: int) -> dict[str, Any]:
    return await update_or_404(table, entity, record_id, {"displayOrder": display_order})
