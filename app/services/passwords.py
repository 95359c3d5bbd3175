"""Forgot/reset password service."""

import html
import logging
import secrets
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from app.config import get_settings
from app.exceptions import NotFoundError, TokenExpiredError
from app.models.reset_token import ResetToken
from app.models.user import User
from app.security import hash_password
from app.services.mailer import Mailer
from app.services.users import get_user_service

logger = logging.getLogger("roleplay")


def build_reset_link(reset_password_url: str, token: str) -> str:
    """Append the token as a query parameter to the client-supplied URL."""
    separator = "&" if "?" in reset_password_url else "?"
    return f"{reset_password_url}{separator}token={token}"


class PasswordService:
    """Issues and redeems password reset tokens."""

    def __init__(self) -> None:
        settings = get_settings()
        self.expiry = timedelta(minutes=settings.RESET_TOKEN_EXPIRY_MINUTES)
        self.from_email = settings.MAIL_FROM
        self.subject = settings.MAIL_RESET_SUBJECT

    def request_reset(
        self,
        db: Session,
        mailer: Mailer,
        email: str,
        reset_password_url: str,
    ) -> ResetToken | None:
        """Create a reset token and email the link to the user.

        Returns the token if the user exists, None otherwise.
        Caller should not reveal whether the user was found.
        """
        user = get_user_service().get_by_email(db, email)
        if not user:
            logger.info("Password reset requested for unknown email")
            return None

        reset_token = ResetToken(token=secrets.token_urlsafe(32), user_id=user.id)
        db.add(reset_token)
        db.commit()
        db.refresh(reset_token)
        logger.info("Reset token %d issued for user %d", reset_token.id, user.id)

        link = build_reset_link(reset_password_url, reset_token.token)
        sent = mailer.send(
            to=user.email,
            from_email=self.from_email,
            subject=self.subject,
            html=self._build_reset_email_html(username=user.username, reset_url=link),
        )
        if not sent:
            logger.warning("Reset email for user %d was not delivered", user.id)

        return reset_token

    def reset_password(self, db: Session, token: str, new_password: str) -> User:
        """Set a new password using a valid reset token and consume the token.

        Raises NotFoundError for unknown or already used tokens and
        TokenExpiredError for tokens older than the expiry window.
        """
        reset_token = db.query(ResetToken).filter(ResetToken.token == token).first()
        if not reset_token:
            raise NotFoundError("token not found")

        if reset_token.is_expired(self.expiry, now=datetime.utcnow()):
            logger.info("Expired reset token %d rejected", reset_token.id)
            raise TokenExpiredError()

        user = reset_token.user
        token_id = reset_token.id
        user.password = hash_password(new_password)

        # A concurrent reset may have consumed the token since it was read
        deleted = db.query(ResetToken).filter(ResetToken.id == token_id).delete()
        if deleted == 0:
            db.rollback()
            raise NotFoundError("token not found")

        db.commit()
        logger.info("Reset token %d consumed for user %d", token_id, user.id)
        return user

    def _build_reset_email_html(self, *, username: str, reset_url: str) -> str:
        """Build HTML content for the password reset email."""
        minutes = int(self.expiry.total_seconds() // 60)
        username = html.escape(username)
        reset_url = html.escape(reset_url, quote=True)
        return f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
            <h2>Recuperação de senha</h2>
            <p>Olá {username},</p>
            <p>Recebemos um pedido para redefinir a senha da sua conta.</p>
            <p>Use o link abaixo para escolher uma nova senha. O link expira em {minutes} minutos.</p>
            <p style="margin: 30px 0;">
                <a href="{reset_url}">{reset_url}</a>
            </p>
            <p>Se você não fez este pedido, ignore este email.</p>
        </div>
        """


_password_service: PasswordService | None = None


def get_password_service() -> PasswordService:
    """Get singleton password service instance."""
    global _password_service
    if _password_service is None:
        _password_service = PasswordService()
    return _password_service
