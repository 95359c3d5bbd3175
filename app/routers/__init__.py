"""API routers."""

from app.routers.passwords import router as passwords_router
from app.routers.users import router as users_router

__all__ = ["users_router", "passwords_router"]
