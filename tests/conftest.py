"""
Shared fixtures.

The PostgreSQL-backed document store is swapped for `InMemoryDocuments`,
which evaluates the same predicates and sort keys over plain dicts so route
tests run without a database.
"""

from __future__ import annotations

import copy
import os
import re
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Sequence

import pytest

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "s3cret-pass")
os.environ.setdefault("APP_ENV", "test")

from fastapi.testclient import TestClient  # noqa: E402

from auth import security  # noqa: E402
from core import documents  # noqa: E402
from main import app  # noqa: E402

ADMIN_PASSWORD = "s3cret-pass"

_MISSING = object()


def _to_text(value: Any) -> str | None:
    # Mirrors `data #>> path` (jsonb value as text).
    if value is _MISSING or value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _rank(value: Any) -> int:
    # jsonb ordering across types: string < number < boolean < array < object.
    if isinstance(value, bool):
        return 2
    if isinstance(value, (int, float)):
        return 1
    if isinstance(value, list):
        return 3
    if isinstance(value, dict):
        return 4
    return 0


class InMemoryDocuments:
    def __init__(self) -> None:
        self.tables: dict[str, dict[str, dict[str, Any]]] = {}
        self._clock = datetime.now(timezone.utc) - timedelta(hours=1)

    # helpers

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def _rows(self, table: str) -> dict[str, dict[str, Any]]:
        return self.tables.setdefault(table, {})

    def _value(self, row: dict[str, Any], path: str) -> Any:
        column = documents._COLUMNS.get(path)
        if column is not None:
            value = row.get(column)
            return str(value) if column == "id" else value
        current: Any = row["data"]
        for part in path.split("."):
            if not isinstance(current, dict) or part not in current:
                return _MISSING
            current = current[part]
        return current

    def _matches(self, row: dict[str, Any], pred: documents.Predicate) -> bool:
        if pred.op == "since":
            return row["created_at"] >= pred.value

        value = self._value(row, pred.path)
        if pred.op == "eq":
            return value is not _MISSING and type(value) is type(pred.value) and value == pred.value
        if pred.op == "has":
            return isinstance(value, list) and pred.value in value

        text = _to_text(value)
        if text is None:
            return False
        if pred.op == "one_of":
            return text in {str(v) for v in pred.value}
        if pred.op == "matches":
            return re.search(str(pred.value), text, re.IGNORECASE) is not None
        if pred.op == "gte":
            return float(text) >= float(pred.value)
        if pred.op == "lte":
            return float(text) <= float(pred.value)
        raise ValueError(f"Unknown predicate operator: {pred.op!r}")

    def _check_slug(self, table: str, slug: str | None, *, exclude: str | None = None) -> None:
        if slug is None:
            return
        for row_id, row in self._rows(table).items():
            if row_id != exclude and row.get("slug") == slug:
                raise documents.DuplicateKeyError(f"Duplicate slug in {table}: {slug!r}")

    def add(self, table: str, fields: dict[str, Any], *, slug: str | None = None, **overrides: Any) -> dict[str, Any]:
        """Synchronous seed helper; `created_at` may be overridden."""
        self._check_slug(table, slug)
        now = self._tick()
        row = {
            "id": uuid.uuid4(),
            "slug": slug,
            "data": copy.deepcopy(documents._strip_reserved(fields)),
            "created_at": overrides.get("created_at", now),
            "updated_at": now,
        }
        self._rows(table)[str(row["id"])] = row
        return documents._row_to_record(copy.deepcopy(row))

    def record(self, table: str, record_id: str) -> dict[str, Any] | None:
        row = self._rows(table).get(record_id)
        return documents._row_to_record(copy.deepcopy(row)) if row else None

    def all(self, table: str) -> list[dict[str, Any]]:
        return [documents._row_to_record(copy.deepcopy(row)) for row in self._rows(table).values()]

    # documents API

    async def insert(self, table: str, fields: dict[str, Any], *, slug: str | None = None) -> dict[str, Any]:
        return self.add(table, fields, slug=slug)

    async def get(self, table: str, record_id: str) -> dict[str, Any] | None:
        parsed = documents._parse_id(record_id)
        return self.record(table, str(parsed)) if parsed else None

    async def find(
        self,
        table: str,
        predicates: Sequence[documents.Predicate] = (),
        *,
        sort: Sequence[documents.SortKey] = (),
        skip: int = 0,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        rows = [row for row in self._rows(table).values() if all(self._matches(row, p) for p in predicates)]

        # Stable sorts applied from the least significant key.
        for path, direction in reversed(list(sort)):
            def key(row: dict[str, Any], path: str = path) -> tuple:
                value = self._value(row, path)
                missing = value is _MISSING or value is None
                if missing:
                    return (1, 0, "")
                return (0, _rank(value), value if _rank(value) < 3 else str(value))

            rows.sort(key=key, reverse=direction == documents.DESC)

        rows = rows[skip:]
        if limit:
            rows = rows[:limit]
        return [documents._row_to_record(copy.deepcopy(row)) for row in rows]

    async def find_one(self, table: str, predicates: Sequence[documents.Predicate]) -> dict[str, Any] | None:
        rows = await self.find(table, predicates, limit=1)
        return rows[0] if rows else None

    async def count(self, table: str, predicates: Sequence[documents.Predicate] = ()) -> int:
        return len(await self.find(table, predicates))

    async def update(
        self,
        table: str,
        record_id: str,
        changes: dict[str, Any],
        *,
        slug: str | None = None,
    ) -> dict[str, Any] | None:
        parsed = documents._parse_id(record_id)
        row = self._rows(table).get(str(parsed)) if parsed else None
        if row is None:
            return None
        self._check_slug(table, slug, exclude=str(parsed))
        row["data"].update(copy.deepcopy(documents._strip_reserved(changes)))
        if slug is not None:
            row["slug"] = slug
        row["updated_at"] = self._tick()
        return documents._row_to_record(copy.deepcopy(row))

    async def delete(self, table: str, record_id: str) -> bool:
        parsed = documents._parse_id(record_id)
        if parsed is None:
            return False
        return self._rows(table).pop(str(parsed), None) is not None

    async def count_by(
        self,
        table: str,
        path: str,
        predicates: Sequence[documents.Predicate] = (),
        *,
        unwind: bool = False,
        by_count: bool = False,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        counts: dict[str | None, int] = {}
        rows = [row for row in self._rows(table).values() if all(self._matches(row, p) for p in predicates)]
        for row in rows:
            value = self._value(row, path)
            values = (value if isinstance(value, list) else []) if unwind else [value]
            for item in values:
                text = _to_text(item)
                counts[text] = counts.get(text, 0) + 1

        def by_value(item: tuple[str | None, int]) -> tuple:
            return (item[0] is None, item[0] or "")

        ordered = sorted(counts.items(), key=by_value)
        if by_count:
            ordered.sort(key=lambda item: -item[1])
        if limit:
            ordered = ordered[:limit]
        return [{"value": value, "count": n} for value, n in ordered]


@pytest.fixture(autouse=True)
def store(monkeypatch) -> InMemoryDocuments:
    fake = InMemoryDocuments()
    for name in ("insert", "get", "find", "find_one", "count", "update", "delete", "count_by"):
        monkeypatch.setattr(documents, name, getattr(fake, name))
    monkeypatch.delenv("SMTP_HOST", raising=False)
    return fake


@pytest.fixture
def client() -> TestClient:
    # No context manager: lifespan (DB pool) is not started.
    return TestClient(app)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return bearer(security.build_access_token(user_id="admin-1", username="admin", role="admin"))


@pytest.fixture
def editor_headers() -> dict[str, str]:
    return bearer(security.build_access_token(user_id="editor-1", username="editor", role="editor"))


@pytest.fixture
def missing_id() -> str:
    return "00000000-0000-4000-8000-000000000000"
