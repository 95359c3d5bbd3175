"""Pytest configuration and fixtures."""

import os

# Must be set before the app modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("SENDGRID_API_KEY", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from app.models.reset_token import ResetToken  # noqa: E402, F401
from app.models.user import User  # noqa: E402, F401
from app.services.mailer import Mailer, get_mailer  # noqa: E402
from tests.factories import UserFactory  # noqa: E402


class FakeMailer(Mailer):
    """Records outgoing emails instead of sending them."""

    def __init__(self) -> None:
        self.messages: list[dict] = []
        self.fail = False

    def send(self, to: str, from_email: str, subject: str, html: str) -> bool:
        if self.fail:
            return False
        self.messages.append({"to": to, "from_email": from_email, "subject": subject, "html": html})
        return True


@pytest.fixture(name="db_session")
def db_session_fixture():
    """Create an in-memory SQLite database for tests."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(name="mailer")
def mailer_fixture() -> FakeMailer:
    return FakeMailer()


@pytest.fixture(name="client")
def client_fixture(db_session: Session, mailer: FakeMailer):
    """Create a test client with overridden DB and mailer dependencies."""
    from main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mailer] = lambda: mailer
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(name="user_factory")
def user_factory_fixture(db_session: Session) -> UserFactory:
    return UserFactory(db_session)


@pytest.fixture(name="test_user")
def test_user_fixture(user_factory: UserFactory) -> User:
    """Create a persisted user whose plain password is ``UserFactory.PASSWORD``."""
    return user_factory.create()
