from __future__ import annotations

import smtplib

from core import mailer

CONTACT = {
    "id": "c-1",
    "name": "Jamie Rivera",
    "email": "jamie@example.com",
    "phone": "555-123-4567",
    "eventType": "corporate",
    "message": "Lunch for forty people next Tuesday.",
}


def configure_smtp(monkeypatch):
    monkeypatch.setenv("SMTP_HOST", "smtp.example.com")
    monkeypatch.setenv("SMTP_USER", "hello@marigold.example")
    monkeypatch.setenv("SMTP_PASSWORD", "pw")
    monkeypatch.setenv("ADMIN_NOTIFICATION_EMAIL", "owner@marigold.example")


def test_emails_skipped_without_smtp_host():
    assert mailer.send_contact_form_emails(CONTACT) == {"adminNotification": False, "thankYou": False}


def test_sends_admin_notification_and_thank_you(monkeypatch):
    configure_smtp(monkeypatch)
    sent = []
    monkeypatch.setattr(mailer, "_send", lambda config, message: sent.append(message))

    results = mailer.send_contact_form_emails(CONTACT)

    assert results == {"adminNotification": True, "thankYou": True}
    admin, thanks = sent
    assert admin["To"] == "owner@marigold.example"
    assert admin["Reply-To"] == "jamie@example.com"
    assert admin["Subject"] == "New Corporate Event inquiry from Jamie Rivera"
    assert "Lunch for forty people" in admin.get_content()
    assert thanks["To"] == "jamie@example.com"
    assert thanks["From"] == "hello@marigold.example"


def test_one_failed_email_does_not_stop_the_other(monkeypatch):
    configure_smtp(monkeypatch)

    def send(config, message):
        if message["To"] == "owner@marigold.example":
            raise smtplib.SMTPException("mailbox unavailable")

    monkeypatch.setattr(mailer, "_send", send)

    assert mailer.send_contact_form_emails(CONTACT) == {"adminNotification": False, "thankYou": True}


def test_background_entrypoint_never_raises(monkeypatch):
    def explode(contact):
        raise RuntimeError("boom")

    monkeypatch.setattr(mailer, "send_contact_form_emails", explode)

    mailer.send_contact_form_emails_background(CONTACT)


def test_contact_submission_schedules_emails(client, monkeypatch):
    scheduled = []
    monkeypatch.setattr(mailer, "send_contact_form_emails_background", scheduled.append)

    resp = client.post(
        "/api/contacts",
        json={key: value for key, value in CONTACT.items() if key != "id"},
    )

    assert resp.status_code == 201
    [contact] = scheduled
    assert contact["id"] == resp.json()["data"]["id"]
    assert contact["status"] == "new"
