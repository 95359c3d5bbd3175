"""Password reset token model."""

from datetime import datetime, timedelta

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.database import Base


class ResetToken(Base):
    """Single-use token issued by a forgot-password request."""

    __tablename__ = "reset_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(String(256), unique=True, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    user = relationship("User", back_populates="tokens")

    def is_expired(self, expiry: timedelta, now: datetime | None = None) -> bool:
        """A token aged exactly ``expiry`` is still valid."""
        now = now or datetime.utcnow()
        return now - self.created_at > expiry
