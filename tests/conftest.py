import os

# Configure the process before anything imports crm_backend
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-only-do-not-use")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from crm_backend.main import app  # noqa: E402
from crm_backend.config import Settings, get_settings  # noqa: E402
from crm_backend.infrastructure.database import Base, get_db  # noqa: E402
from crm_backend.application.services.security import PasswordHasher  # noqa: E402
from crm_backend.application.services.token_service import TokenService  # noqa: E402
from crm_backend.infrastructure.repositories.user_repository import SQLAlchemyUserRepository  # noqa: E402

ADMIN_EMAIL = "admin@yitro.com"
ADMIN_PASSWORD = "admin123"
USER_EMAIL = "rep@yitro.com"
USER_PASSWORD = "rep-password"


@pytest.fixture
def engine():
    """Fresh in-memory database shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def settings():
    return Settings(
        SECRET_KEY="test-secret-key-for-testing-only-do-not-use",
        DATABASE_URL="sqlite://",
        BCRYPT_ROUNDS=4,
        ENVIRONMENT="test",
    )


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service(settings):
    return TokenService(secret=settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


@pytest.fixture
def client(session_factory, settings):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session, hasher):
    repo = SQLAlchemyUserRepository(db_session)

    def _make(email, password, role="user", display_name="Test User"):
        return repo.create(email, display_name, hasher.hash(password), role)

    return _make


@pytest.fixture
def admin_user(make_user):
    return make_user(ADMIN_EMAIL, ADMIN_PASSWORD, role="admin", display_name="Admin")


@pytest.fixture
def regular_user(make_user):
    return make_user(USER_EMAIL, USER_PASSWORD, role="user", display_name="Sales Rep")


def sign_in(client, email, password):
    response = client.post("/api/auth/signin", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_token(client, admin_user):
    return sign_in(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def user_token(client, regular_user):
    return sign_in(client, USER_EMAIL, USER_PASSWORD)
