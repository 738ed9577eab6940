"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_background_dispatcher, reset_container
from modules.auth.models import UserRecord
from modules.auth.service import AuthService
from modules.auth.tokens import CredentialCodec
from shared.background import BackgroundDispatcher
from tests.fakes import FakeUserRepository


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expires_in: timedelta = timedelta(days=7),
    issued_at: datetime | None = None,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a signed session token for tests.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expires_in: Lifetime relative to issued_at (negative for expired tokens)
        issued_at: Issue time, defaults to now
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = issued_at or datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_in).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def codec() -> CredentialCodec:
    """Credential codec signing with the test secret."""
    return CredentialCodec(secret=TEST_JWT_SECRET)


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def users(test_user_id: str, test_user_email: str) -> FakeUserRepository:
    """In-memory user store holding the account behind auth_token."""
    repository = FakeUserRepository()
    repository.users[test_user_id] = UserRecord(
        id=test_user_id,
        email=test_user_email,
        password_hash="not-a-bcrypt-hash",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    return repository


@pytest.fixture
def auth_service(codec: CredentialCodec, users: FakeUserRepository) -> AuthService:
    """Auth service over the in-memory user store."""
    return AuthService(codec=codec, users=users)


@pytest.fixture
def dispatcher() -> BackgroundDispatcher:
    return BackgroundDispatcher()


@pytest.fixture
def app(auth_service: AuthService, dispatcher: BackgroundDispatcher):
    """
    Create a fresh app for each test.

    The session guard runs against the test signing secret; route tests
    add overrides for the services they exercise.
    """
    application = create_app()
    application.dependency_overrides[get_auth_service] = lambda: auth_service
    application.dependency_overrides[get_background_dispatcher] = lambda: dispatcher
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
