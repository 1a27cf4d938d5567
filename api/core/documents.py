"""
Document-style persistence on top of PostgreSQL JSONB (raw SQL via asyncpg).

Every content table has the same shape (see `db/migrations`):

    id uuid, slug text UNIQUE NULL, data jsonb, created_at, updated_at

`data` holds the record fields with their wire (camelCase) names. Entity
repositories describe what they want with `Predicate` values and sort keys;
this module turns those into parameterized SQL so no caller-supplied text is
ever interpolated into a statement.
"""

from __future__ import annotations

import json
import re
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Sequence

import asyncpg

from . import db

ASC = 1
DESC = -1

# Record keys backed by real columns instead of `data`.
_COLUMNS = {
    "id": "id",
    "slug": "slug",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}

_RESERVED_KEYS = frozenset(_COLUMNS)

_TABLE_RE = re.compile(r"^[a-z_][a-z0-9_]*$")


class DuplicateKeyError(RuntimeError):
    pass


@dataclass(frozen=True)
class Predicate:
    path: str
    op: str
    value: Any


def eq(path: str, value: Any) -> Predicate:
    return Predicate(path, "eq", value)


def one_of(path: str, values: Iterable[Any]) -> Predicate:
    return Predicate(path, "one_of", tuple(values))


def has(path: str, value: Any) -> Predicate:
    """Array field at `path` contains `value`."""
    return Predicate(path, "has", value)


def matches(path: str, pattern: str) -> Predicate:
    """Case-insensitive regex match."""
    return Predicate(path, "matches", pattern)


def gte(path: str, value: float) -> Predicate:
    return Predicate(path, "gte", value)


def lte(path: str, value: float) -> Predicate:
    return Predicate(path, "lte", value)


def since(moment: datetime) -> Predicate:
    return Predicate("createdAt", "since", moment)


SortKey = tuple[str, int]


class _Params:
    def __init__(self) -> None:
        self.values: list[Any] = []

    def add(self, value: Any) -> str:
        self.values.append(value)
        return f"${len(self.values)}"


def _table(name: str) -> str:
    if not _TABLE_RE.match(name):
        raise ValueError(f"Invalid table name: {name!r}")
    return name


def _path(path: str) -> list[str]:
    return path.split(".")


def _nested(path: str, value: Any) -> dict[str, Any]:
    doc: Any = value
    for part in reversed(_path(path)):
        doc = {part: doc}
    return doc


def _json_arg(value: dict[str, Any]) -> str:
    """
    asyncpg does not automatically encode Python dicts for jsonb parameters.
    We pass JSON as a string and cast to jsonb in SQL.
    """
    return json.dumps(value, ensure_ascii=True, default=str)


def _compile_predicate(pred: Predicate, params: _Params) -> str:
    column = _COLUMNS.get(pred.path)

    if pred.op == "since":
        return f"created_at >= {params.add(pred.value)}"

    if column is not None:
        if pred.op == "eq":
            return f"{column} = {params.add(pred.value)}"
        raise ValueError(f"Unsupported operator {pred.op!r} on column {pred.path!r}")

    if pred.op == "eq":
        return f"data @> {params.add(_json_arg(_nested(pred.path, pred.value)))}::jsonb"
    if pred.op == "has":
        return f"data @> {params.add(_json_arg(_nested(pred.path, [pred.value])))}::jsonb"

    text_expr = f"(data #>> {params.add(_path(pred.path))}::text[])"
    if pred.op == "one_of":
        return f"{text_expr} = ANY({params.add([str(v) for v in pred.value])}::text[])"
    if pred.op == "matches":
        return f"{text_expr} ~* {params.add(str(pred.value))}"
    if pred.op == "gte":
        return f"{text_expr}::float8 >= {params.add(float(pred.value))}"
    if pred.op == "lte":
        return f"{text_expr}::float8 <= {params.add(float(pred.value))}"

    raise ValueError(f"Unknown predicate operator: {pred.op!r}")


def compile_where(predicates: Sequence[Predicate], params: _Params | None = None) -> tuple[str, list[Any]]:
    params = params or _Params()
    clauses = [_compile_predicate(p, params) for p in predicates]
    return (" AND ".join(clauses) if clauses else "TRUE"), params.values


def compile_order(sort: Sequence[SortKey], params: _Params) -> str:
    parts: list[str] = []
    for path, direction in sort:
        expr = _COLUMNS.get(path) or f"(data #> {params.add(_path(path))}::text[])"
        parts.append(f"{expr} {'DESC' if direction == DESC else 'ASC'}")
    return ", ".join(parts)


def _parse_id(record_id: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(record_id))
    except ValueError:
        return None


def _row_to_record(row: dict[str, Any]) -> dict[str, Any]:
    data = row["data"]
    if isinstance(data, str):
        data = json.loads(data)

    record: dict[str, Any] = {"id": str(row["id"]), **(data or {})}
    if row.get("slug") is not None:
        record["slug"] = row["slug"]
    record["createdAt"] = row["created_at"]
    record["updatedAt"] = row["updated_at"]
    return record


def _strip_reserved(fields: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in _RESERVED_KEYS}


_RETURNING = "RETURNING id, slug, data, created_at, updated_at"


async def insert(table: str, fields: dict[str, Any], *, slug: str | None = None) -> dict[str, Any]:
    try:
        row = await db.fetch_one(
            f"""
            INSERT INTO {_table(table)} (slug, data)
            VALUES ($1, $2::jsonb)
            {_RETURNING}
            """,
            slug,
            _json_arg(_strip_reserved(fields)),
        )
    except asyncpg.UniqueViolationError as exc:
        raise DuplicateKeyError(f"Duplicate slug in {table}: {slug!r}") from exc
    if row is None:
        raise RuntimeError(f"Failed to insert into {table}.")
    return _row_to_record(row)


async def get(table: str, record_id: str) -> dict[str, Any] | None:
    parsed = _parse_id(record_id)
    if parsed is None:
        return None
    row = await db.fetch_one(
        f"SELECT id, slug, data, created_at, updated_at FROM {_table(table)} WHERE id = $1",
        parsed,
    )
    return _row_to_record(row) if row is not None else None


async def find(
    table: str,
    predicates: Sequence[Predicate] = (),
    *,
    sort: Sequence[SortKey] = (),
    skip: int = 0,
    limit: int | None = None,
) -> list[dict[str, Any]]:
    params = _Params()
    where, _ = compile_where(predicates, params)
    sql = f"SELECT id, slug, data, created_at, updated_at FROM {_table(table)} WHERE {where}"

    order = compile_order(sort, params)
    if order:
        sql += f" ORDER BY {order}"
    if limit:
        sql += f" LIMIT {params.add(int(limit))}"
    if skip:
        sql += f" OFFSET {params.add(int(skip))}"

    rows = await db.fetch_all(sql, *params.values)
    return [_row_to_record(r) for r in rows]


async def find_one(table: str, predicates: Sequence[Predicate]) -> dict[str, Any] | None:
    rows = await find(table, predicates, limit=1)
    return rows[0] if rows else None


async def get_by_slug(
    table: str,
    slug: str,
    predicates: Sequence[Predicate] = (),
) -> dict[str, Any] | None:
    return await find_one(table, [eq("slug", slug), *predicates])


async def count(table: str, predicates: Sequence[Predicate] = ()) -> int:
    where, args = compile_where(predicates)
    value = await db.fetch_value(f"SELECT count(*) FROM {_table(table)} WHERE {where}", *args)
    return int(value or 0)


async def update(
    table: str,
    record_id: str,
    changes: dict[str, Any],
    *,
    slug: str | None = None,
) -> dict[str, Any] | None:
    """
    Shallow merge `changes` into the stored record (top-level keys replace).
    Returns the updated record, or None when the id does not exist.
    """
    parsed = _parse_id(record_id)
    if parsed is None:
        return None
    try:
        row = await db.fetch_one(
            f"""
            UPDATE {_table(table)}
            SET data = data || $2::jsonb,
                slug = COALESCE($3, slug),
                updated_at = now()
            WHERE id = $1
            {_RETURNING}
            """,
            parsed,
            _json_arg(_strip_reserved(changes)),
            slug,
        )
    except asyncpg.UniqueViolationError as exc:
        raise DuplicateKeyError(f"Duplicate slug in {table}: {slug!r}") from exc
    return _row_to_record(row) if row is not None else None


async def delete(table: str, record_id: str) -> bool:
    parsed = _parse_id(record_id)
    if parsed is None:
        return False
    status = await db.execute(f"DELETE FROM {_table(table)} WHERE id = $1", parsed)
    return status == "DELETE 1"


async def count_by(
    table: str,
    path: str,
    predicates: Sequence[Predicate] = (),
    *,
    unwind: bool = False,
    by_count: bool = False,
    limit: int | None = None,
) -> list[dict[str, Any]]:
    """
    Grouped counts of the value at `path`: [{"value": ..., "count": n}, ...].

    `unwind` counts each element of an array field separately. Results are
    ordered by value, or by count (descending) when `by_count` is set.
    """
    params = _Params()
    path_arg = params.add(_path(path))
    where, _ = compile_where(predicates, params)

    if unwind:
        source = (
            f"{_table(table)}, "
            f"jsonb_array_elements_text(COALESCE(data #> {path_arg}::text[], '[]'::jsonb)) AS item"
        )
        value_expr = "item"
    else:
        source = _table(table)
        value_expr = f"data #>> {path_arg}::text[]"

    order = "count DESC, value ASC" if by_count else "value ASC"
    sql = (
        f"SELECT {value_expr} AS value, count(*) AS count FROM {source} "
        f"WHERE {where} GROUP BY 1 ORDER BY {order}"
    )
    if limit:
        sql += f" LIMIT {params.add(int(limit))}"

    rows = await db.fetch_all(sql, *params.values)
    return [{"value": r["value"], "count": int(r["count"])} for r in rows]
