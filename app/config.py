"""Configuration settings for the Roleplay API."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./roleplay.db")

    # Password reset
    RESET_TOKEN_EXPIRY_MINUTES: int = int(os.getenv("RESET_TOKEN_EXPIRY_MINUTES", "120"))

    # Mail
    MAIL_FROM: str = os.getenv("MAIL_FROM", "no-reply@roleplay.com")
    MAIL_RESET_SUBJECT: str = os.getenv("MAIL_RESET_SUBJECT", "Recuperação de senha")
    SENDGRID_API_KEY: str | None = os.getenv("SENDGRID_API_KEY")

    # Application
    APP_ENV: str = os.getenv("APP_ENV", "development")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    def validate(self) -> list[str]:
        """Validate settings and return list of warnings."""
        errors = []
        if not self.SENDGRID_API_KEY:
            errors.append("SENDGRID_API_KEY is not set - reset links are written to the log instead of emailed")
        if self.RESET_TOKEN_EXPIRY_MINUTES <= 0:
            errors.append("RESET_TOKEN_EXPIRY_MINUTES must be positive")
        return errors


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
