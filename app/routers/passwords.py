"""Forgot/reset password API endpoints."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.passwords import ForgotPasswordRequest, ResetPasswordRequest
from app.services.mailer import Mailer, get_mailer
from app.services.passwords import get_password_service

router = APIRouter(tags=["Passwords"])


@router.post("/forgot-password", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def forgot_password(
    body: ForgotPasswordRequest,
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
) -> Response:
    """Email a reset link. Answers 204 whether or not the email is registered."""
    get_password_service().request_reset(db, mailer, body.email, body.reset_password_url)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/reset-password", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def reset_password(body: ResetPasswordRequest, db: Session = Depends(get_db)) -> Response:
    """Set a new password using a reset token."""
    get_password_service().reset_password(db, body.token, body.password)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
