"""
SMTP notifications for contact-form submissions.

Sending is fire-and-forget: the request that triggered it has already been
answered, so failures are only logged.
"""

from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Any

from . import settings

logger = logging.getLogger(__name__)

EVENT_TYPE_LABELS = {
    "wedding": "Wedding",
    "corporate": "Corporate Event",
    "social": "Social Gathering",
    "other": "Other",
}


@dataclass(frozen=True)
class SmtpConfig:
    host: str
    port: int
    user: str
    password: str
    from_email: str
    admin_email: str


def smtp_config() -> SmtpConfig | None:
    host = settings.env_str("SMTP_HOST")
    if not host:
        return None
    user = settings.env_str("SMTP_USER")
    from_email = settings.env_str("SMTP_FROM_EMAIL", user)
    return SmtpConfig(
        host=host,
        port=settings.env_int("SMTP_PORT", 587),
        user=user,
        password=settings.env_str("SMTP_PASSWORD"),
        from_email=from_email,
        admin_email=settings.env_str("ADMIN_NOTIFICATION_EMAIL", from_email),
    )


def _send(config: SmtpConfig, message: EmailMessage) -> None:
    with smtplib.SMTP(config.host, config.port, timeout=30) as smtp:
        smtp.starttls()
        if config.user:
            smtp.login(config.user, config.password)
        smtp.send_message(message)


def build_admin_notification(contact: dict[str, Any], config: SmtpConfig) -> EmailMessage:
    event_label = EVENT_TYPE_LABELS.get(str(contact.get("eventType")), "Other")
    msg = EmailMessage()
    msg["From"] = config.from_email
    msg["To"] = config.admin_email
    msg["Reply-To"] = str(contact.get("email") or config.from_email)
    msg["Subject"] = f"New {event_label} inquiry from {contact.get('name')}"
    msg.set_content(
        "\n".join(
            [
                f"Name: {contact.get('name')}",
                f"Email: {contact.get('email')}",
                f"Phone: {contact.get('phone')}",
                f"Event type: {event_label}",
                "",
                str(contact.get("message") or ""),
            ]
        )
    )
    return msg


def build_thank_you(contact: dict[str, Any], config: SmtpConfig) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = config.from_email
    msg["To"] = str(contact.get("email"))
    msg["Subject"] = "Thank you for contacting Marigold Catering"
    msg.set_content(
        f"Hi {contact.get('name')},\n\n"
        "Thanks for reaching out! We received your message and will get back to you "
        "within one business day.\n\n"
        "Marigold Catering"
    )
    return msg


def send_contact_form_emails(contact: dict[str, Any]) -> dict[str, bool]:
    """
    Send the admin notification and the thank-you email. Each is attempted
    independently; the result reports which went out.
    """
    config = smtp_config()
    if config is None:
        logger.warning("contact_emails_skipped reason=smtp_not_configured contact_id=%s", contact.get("id"))
        return {"adminNotification": False, "thankYou": False}

    results: dict[str, bool] = {}
    for name, builder in (("adminNotification", build_admin_notification), ("thankYou", build_thank_you)):
        try:
            _send(config, builder(contact, config))
            results[name] = True
        except (smtplib.SMTPException, OSError):
            logger.exception("contact_email_failed kind=%s contact_id=%s", name, contact.get("id"))
            results[name] = False
    return results


def send_contact_form_emails_background(contact: dict[str, Any]) -> None:
    """
    BackgroundTasks entrypoint. This should never raise to the request path.
    """
    try:
        results = send_contact_form_emails(contact)
        logger.info("contact_emails_done contact_id=%s results=%s", contact.get("id"), results)
    except Exception:
        logger.exception("contact_emails_failed contact_id=%s", contact.get("id"))
