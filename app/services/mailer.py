"""Transactional email delivery."""

import logging
from abc import ABC, abstractmethod

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.config import get_settings

logger = logging.getLogger("roleplay")


class Mailer(ABC):
    """Delivers a single HTML email. Returns True on success, False on failure."""

    @abstractmethod
    def send(self, to: str, from_email: str, subject: str, html: str) -> bool:
        ...


class SendGridMailer(Mailer):
    """Sends email through the SendGrid API."""

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def send(self, to: str, from_email: str, subject: str, html: str) -> bool:
        message = Mail(
            from_email=from_email,
            to_emails=to,
            subject=subject,
            html_content=html,
        )

        try:
            sg = SendGridAPIClient(self.api_key)
            sg.send(message)
            return True
        except Exception as e:
            # Provider errors are not surfaced to API clients
            logger.exception("Email send failed: %s", e)
            return False


class LogMailer(Mailer):
    """Writes emails to the server log. Used when no mail provider is configured."""

    def send(self, to: str, from_email: str, subject: str, html: str) -> bool:
        logger.info("EMAIL to=%s from=%s subject=%r\n%s", to, from_email, subject, html)
        return True


_mailer: Mailer | None = None


def get_mailer() -> Mailer:
    """Get singleton mailer instance for the configured provider."""
    global _mailer
    if _mailer is None:
        settings = get_settings()
        if settings.SENDGRID_API_KEY:
            _mailer = SendGridMailer(settings.SENDGRID_API_KEY)
        else:
            _mailer = LogMailer()
    return _mailer
