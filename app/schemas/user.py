"""Pydantic schemas for user endpoints."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, HttpUrl, TypeAdapter, ValidationError

PASSWORD_MIN_LENGTH = 4
# bcrypt rejects input longer than 72 bytes
PASSWORD_MAX_BYTES = 72
USERNAME_PATTERN = r"^[A-Za-z0-9_.-]+$"

_http_url = TypeAdapter(HttpUrl)


def check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
    return value


def check_avatar_url(value: str) -> str:
    """Validate as an http(s) URL but keep the string exactly as sent."""
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("avatar must be an http(s) URL") from None
    return value


Password = Annotated[str, Field(min_length=PASSWORD_MIN_LENGTH), AfterValidator(check_password_bytes)]
Username = Annotated[str, Field(min_length=1, max_length=64, pattern=USERNAME_PATTERN)]
AvatarUrl = Annotated[str, Field(max_length=2048), AfterValidator(check_avatar_url)]


class UserCreate(BaseModel):
    email: EmailStr
    username: Username
    password: Password
    avatar: AvatarUrl | None = None


class UserUpdate(BaseModel):
    """Full replacement of the editable profile fields; username is optional."""

    email: EmailStr
    password: Password
    avatar: AvatarUrl | None = None
    username: Username | None = None


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    username: str
    avatar: str | None = None
    created_at: datetime
    updated_at: datetime


class UserResponse(BaseModel):
    user: UserOut
