from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core import db, documents

# Captured before the autouse fixture swaps in the in-memory store.
REAL_FIND = documents.find
REAL_GET = documents.get
REAL_COUNT_BY = documents.count_by
REAL_DELETE = documents.delete


def test_compile_where_without_predicates():
    assert documents.compile_where([]) == ("TRUE", [])


def test_compile_where_equality_uses_containment():
    sql, args = documents.compile_where([documents.eq("status", "new"), documents.eq("spaces.hasOutdoorSpace", True)])

    assert sql == "data @> $1::jsonb AND data @> $2::jsonb"
    assert args == ['{"status": "new"}', '{"spaces": {"hasOutdoorSpace": true}}']


def test_compile_where_column_predicates():
    moment = datetime(2026, 1, 1, tzinfo=timezone.utc)
    sql, args = documents.compile_where([documents.eq("slug", "barn"), documents.since(moment)])

    assert sql == "slug = $1 AND created_at >= $2"
    assert args == ["barn", moment]


def test_compile_where_text_operators():
    sql, args = documents.compile_where(
        [
            documents.one_of("serviceType", ["corporate", "all"]),
            documents.matches("location", "dayton"),
            documents.gte("capacity.seated", 100),
        ]
    )

    assert sql == (
        "(data #>> $1::text[]) = ANY($2::text[]) AND "
        "(data #>> $3::text[]) ~* $4 AND "
        "(data #>> $5::text[])::float8 >= $6"
    )
    assert args == [["serviceType"], ["corporate", "all"], ["location"], "dayton", ["capacity", "seated"], 100.0]


def test_compile_where_array_membership():
    sql, args = documents.compile_where([documents.has("venueType", "Barn")])

    assert sql == "data @> $1::jsonb"
    assert args == ['{"venueType": ["Barn"]}']


def test_compile_where_rejects_operator_on_column():
    with pytest.raises(ValueError):
        documents.compile_where([documents.matches("id", "abc")])


def test_compile_order_maps_timestamp_columns():
    params = documents._Params()
    order = documents.compile_order([("displayOrder", documents.ASC), ("createdAt", documents.DESC)], params)

    assert order == "(data #> $1::text[]) ASC, created_at DESC"
    assert params.values == [["displayOrder"]]


async def test_get_with_invalid_id_skips_database(monkeypatch):
    async def fail(*args, **kwargs):
        raise AssertionError("database should not be queried")

    monkeypatch.setattr(db, "fetch_one", fail)
    assert await REAL_GET("venues", "not-a-uuid") is None


async def test_find_builds_paged_query(monkeypatch):
    captured = {}

    async def fake_fetch_all(sql, *args):
        captured["sql"] = sql
        captured["args"] = args
        return [
            {
                "id": "6f1c1d8e-0000-4000-8000-000000000001",
                "slug": None,
                "data": '{"name": "Ada"}',
                "created_at": datetime(2026, 1, 1, tzinfo=timezone.utc),
                "updated_at": datetime(2026, 1, 2, tzinfo=timezone.utc),
            }
        ]

    monkeypatch.setattr(db, "fetch_all", fake_fetch_all)
    rows = await REAL_FIND(
        "contacts",
        [documents.eq("status", "new")],
        sort=[("createdAt", documents.DESC)],
        skip=10,
        limit=10,
    )

    assert captured["sql"] == (
        "SELECT id, slug, data, created_at, updated_at FROM contacts "
        "WHERE data @> $1::jsonb ORDER BY created_at DESC LIMIT $2 OFFSET $3"
    )
    assert captured["args"] == ('{"status": "new"}', 10, 10)
    assert rows[0]["name"] == "Ada"
    assert rows[0]["id"] == "6f1c1d8e-0000-4000-8000-000000000001"
    assert "slug" not in rows[0]


async def test_count_by_unwinds_arrays(monkeypatch):
    captured = {}

    async def fake_fetch_all(sql, *args):
        captured["sql"] = sql
        return [{"value": "Barn", "count": 2}]

    monkeypatch.setattr(db, "fetch_all", fake_fetch_all)
    rows = await REAL_COUNT_BY("venues", "venueType", [documents.eq("isActive", True)], unwind=True)

    assert "jsonb_array_elements_text" in captured["sql"]
    assert rows == [{"value": "Barn", "count": 2}]


def test_rejects_unsafe_table_names():
    with pytest.raises(ValueError):
        documents._table("venues; DROP TABLE venues")


async def test_delete_reports_whether_a_row_was_removed(monkeypatch):
    statements = []

    async def fake_execute(sql, *args):
        statements.append((sql, args))
        return "DELETE 1" if len(statements) == 1 else "DELETE 0"

    monkeypatch.setattr(db, "execute", fake_execute)
    record_id = "6f1c1d8e-0000-4000-8000-000000000001"

    assert await REAL_DELETE("venues", record_id) is True
    assert await REAL_DELETE("venues", record_id) is False
    assert await REAL_DELETE("venues", "not-a-uuid") is False

    sql, args = statements[0]
    assert sql == "DELETE FROM venues WHERE id = $1"
    assert str(args[0]) == record_id
    assert len(statements) == 2
