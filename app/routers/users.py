"""User account API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.user import UserCreate, UserOut, UserResponse, UserUpdate
from app.services.users import get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(body: UserCreate, db: Session = Depends(get_db)) -> UserResponse:
    """Register a new user account."""
    user_service = get_user_service()
    user = user_service.create_user(
        db,
        email=body.email,
        username=body.username,
        password=body.password,
        avatar=body.avatar,
    )
    return UserResponse(user=UserOut.model_validate(user))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)) -> UserResponse:
    """Fetch a user by id."""
    user = get_user_service().get_user(db, user_id)
    return UserResponse(user=UserOut.model_validate(user))


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, body: UserUpdate, db: Session = Depends(get_db)) -> UserResponse:
    """Update a user's email, password and avatar."""
    user_service = get_user_service()
    user = user_service.update_user(
        db,
        user_id,
        email=body.email,
        password=body.password,
        avatar=body.avatar,
        username=body.username,
    )
    return UserResponse(user=UserOut.model_validate(user))
