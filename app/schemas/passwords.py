"""Pydantic schemas for the forgot/reset password endpoints."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.schemas.user import Password


class ForgotPasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    reset_password_url: str = Field(alias="resetPasswordUrl", min_length=1, max_length=2048)


class ResetPasswordRequest(BaseModel):
    token: str = Field(min_length=1, max_length=256)
    password: Password
