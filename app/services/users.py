"""User account service."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError
from app.models.user import User
from app.security import hash_password

logger = logging.getLogger("roleplay")


def normalize_email(email: str) -> str:
    return email.lower().strip()


class UserService:
    """Handles registration and profile updates."""

    def get_user(self, db: Session, user_id: int) -> User:
        """Return the user or raise NotFoundError."""
        user = db.get(User, user_id)
        if not user:
            raise NotFoundError("user not found")
        return user

    def get_by_email(self, db: Session, email: str) -> User | None:
        return db.query(User).filter(User.email == normalize_email(email)).first()

    def create_user(
        self,
        db: Session,
        email: str,
        username: str,
        password: str,
        avatar: str | None = None,
    ) -> User:
        """Register a new user. Raises ConflictError if email or username is taken."""
        email = normalize_email(email)
        self._ensure_unique(db, email=email, username=username)

        user = User(
            email=email,
            username=username,
            password=hash_password(password),
            avatar=avatar,
        )
        db.add(user)
        self._commit(db)
        db.refresh(user)

        logger.info("User %d registered", user.id)
        return user

    def update_user(
        self,
        db: Session,
        user_id: int,
        email: str,
        password: str,
        avatar: str | None = None,
        username: str | None = None,
    ) -> User:
        """Replace a user's email, password and avatar, and optionally the username."""
        user = self.get_user(db, user_id)
        email = normalize_email(email)
        self._ensure_unique(db, email=email, username=username, exclude_id=user.id)

        user.email = email
        user.password = hash_password(password)
        user.avatar = avatar
        if username is not None:
            user.username = username
        self._commit(db)
        db.refresh(user)

        logger.info("User %d updated", user.id)
        return user

    def _ensure_unique(
        self,
        db: Session,
        email: str,
        username: str | None,
        exclude_id: int | None = None,
    ) -> None:
        query = db.query(User.id)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)

        if query.filter(User.email == email).first():
            raise ConflictError("email already in use")
        if username is not None and query.filter(User.username == username).first():
            raise ConflictError("username already in use")

    def _commit(self, db: Session) -> None:
        """Commit, mapping a unique-constraint race to ConflictError."""
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            field = "username" if "username" in str(e.orig) else "email"
            raise ConflictError(f"{field} already in use") from e


_user_service: UserService | None = None


def get_user_service() -> UserService:
    """Get singleton user service instance."""
    global _user_service
    if _user_service is None:
        _user_service = UserService()
    return _user_service
