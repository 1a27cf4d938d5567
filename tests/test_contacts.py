from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from contacts import repository

VALID_CONTACT = {
    "name": "Jamie Rivera",
    "email": "Jamie.Rivera@Example.com",
    "phone": "555-123-4567",
    "eventType": "wedding",
    "message": "We are planning a wedding for 150 guests in June.",
}


def seed_contacts(store, count: int, **fields):
    for i in range(count):
        store.add(
            repository.TABLE,
            {
                **VALID_CONTACT,
                "name": f"Guest {i:02d}",
                "status": "new",
                "priority": "medium",
                **fields,
            },
        )


def test_submit_contact_persists_and_returns_summary(client, store):
    resp = client.post("/api/contacts", json=VALID_CONTACT)

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Contact form submitted successfully"
    assert set(body["data"]) == {"id", "name", "email", "eventType", "createdAt"}
    assert body["data"]["email"] == "jamie.rivera@example.com"

    stored = store.record(repository.TABLE, body["data"]["id"])
    assert stored["status"] == "new"
    assert stored["priority"] == "medium"


def test_malformed_email_is_rejected_without_persisting(client, store):
    resp = client.post("/api/contacts", json={**VALID_CONTACT, "email": "jamie.example.com"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["message"] == "Validation failed"
    assert [err["field"] for err in body["errors"]] == ["email"]
    assert store.all(repository.TABLE) == []


@pytest.mark.parametrize(
    ("field", "value"),
    [("name", "J"), ("phone", "12345"), ("eventType", "birthday"), ("message", "too short")],
)
def test_contact_field_rules(client, store, field, value):
    resp = client.post("/api/contacts", json={**VALID_CONTACT, field: value})

    assert resp.status_code == 400
    assert field in [err["field"] for err in resp.json()["errors"]]
    assert store.all(repository.TABLE) == []


def test_list_contacts_pagination(client, store, admin_headers):
    seed_contacts(store, 23)

    resp = client.get("/api/contacts", params={"page": 3, "limit": 10}, headers=admin_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert len(body["data"]) == 3
    assert body["pagination"] == {"current": 3, "total": 3, "count": 23, "hasNext": False, "hasPrev": True}


def test_list_contacts_default_page_size_and_order(client, store, admin_headers):
    seed_contacts(store, 12)

    body = client.get("/api/contacts", headers=admin_headers).json()

    assert len(body["data"]) == 10
    assert body["pagination"]["hasNext"] is True
    # Newest first by default.
    assert body["data"][0]["name"] == "Guest 11"


def test_list_contacts_filters_and_sort(client, store, admin_headers):
    seed_contacts(store, 2, eventType="corporate")
    seed_contacts(store, 3, eventType="social")

    body = client.get(
        "/api/contacts",
        params={"eventType": "corporate", "sortBy": "name", "sortOrder": "asc"},
        headers=admin_headers,
    ).json()

    assert [c["name"] for c in body["data"]] == ["Guest 00", "Guest 01"]
    assert all(c["eventType"] == "corporate" for c in body["data"])


def test_list_contacts_rejects_unknown_sort_field(client, admin_headers):
    resp = client.get("/api/contacts", params={"sortBy": "password"}, headers=admin_headers)
    assert resp.status_code == 400


def test_update_stamps_contacted_at_once(client, store, admin_headers):
    contact = store.add(repository.TABLE, {**VALID_CONTACT, "status": "new", "priority": "medium"})

    first = client.put(
        f"/api/contacts/{contact['id']}",
        json={"status": "contacted", "notes": "Called back", "email": "ignored@example.com"},
        headers=admin_headers,
    )
    assert first.status_code == 200
    data = first.json()["data"]
    assert data["status"] == "contacted"
    assert data["notes"] == "Called back"
    assert data["email"] == VALID_CONTACT["email"]
    contacted_at = data["contactedAt"]
    assert contacted_at

    second = client.put(f"/api/contacts/{contact['id']}", json={"status": "completed"}, headers=admin_headers)
    assert second.json()["data"]["contactedAt"] == contacted_at


def test_contact_stats(client, store, admin_headers):
    seed_contacts(store, 2, status="new", eventType="wedding")
    seed_contacts(store, 1, status="in_progress", eventType="corporate")
    seed_contacts(store, 1, status="completed", eventType="wedding")
    store.add(
        repository.TABLE,
        {**VALID_CONTACT, "status": "completed", "eventType": "social"},
        created_at=datetime.now(timezone.utc) - timedelta(days=30),
    )

    resp = client.get("/api/contacts/stats", headers=admin_headers)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["totalContacts"] == 5
    assert data["newContacts"] == 2
    assert data["inProgressContacts"] == 1
    assert data["completedContacts"] == 2
    assert data["recentContacts"] == 4
    assert data["eventTypeStats"] == [
        {"_id": "corporate", "count": 1},
        {"_id": "social", "count": 1},
        {"_id": "wedding", "count": 3},
    ]


def test_delete_contact(client, store, admin_headers, missing_id):
    contact = store.add(repository.TABLE, {**VALID_CONTACT, "status": "new"})

    resp = client.delete(f"/api/contacts/{contact['id']}", headers=admin_headers)
    assert resp.json() == {"success": True, "message": "Contact deleted successfully"}
    assert client.delete(f"/api/contacts/{missing_id}", headers=admin_headers).status_code == 404


def test_update_rejects_null_status_and_priority(client, store, admin_headers):
    contact = store.add(repository.TABLE, {**VALID_CONTACT, "status": "new", "priority": "medium"})

    resp = client.put(
        f"/api/contacts/{contact['id']}",
        json={"status": None, "priority": None},
        headers=admin_headers,
    )

    assert resp.status_code == 400
    assert {err["field"] for err in resp.json()["errors"]} == {"status", "priority"}
    stored = store.record(repository.TABLE, contact["id"])
    assert (stored["status"], stored["priority"]) == ("new", "medium")


def test_oversized_page_request_is_clamped(client, store, admin_headers):
    seed_contacts(store, 2)

    resp = client.get("/api/contacts", params={"limit": 500}, headers=admin_headers)

    assert resp.status_code == 200
    assert len(resp.json()["data"]) == 2
