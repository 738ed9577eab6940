"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and future extraction to a microservice.
"""

from datetime import datetime
from typing import Protocol, Optional, runtime_checkable

from .models import AccountSummary, AuthResult, SessionResult, UserRecord


@runtime_checkable
class IUserRepository(Protocol):
    """Persistence contract for user identity records."""

    def create_user(self, email: str, password_hash: str) -> UserRecord: ...

    def get_by_email(self, email: str) -> Optional[UserRecord]: ...

    def get_by_id(self, user_id: str) -> Optional[UserRecord]: ...

    def update_last_login(self, user_id: str, when: Optional[datetime] = None) -> None: ...

    def get_last_active(self, user_id: str) -> Optional[datetime]: ...

    def update_last_active(self, user_id: str, when: Optional[datetime] = None) -> None: ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, email: str, password: str) -> AuthResult:
        """
        Create an account and issue its first session token.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        ...

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Verify credentials and issue a session token.

        Raises:
            InvalidLoginError: For an unknown email or a wrong password
        """
        ...

    async def get_account(self, user_id: str) -> AccountSummary:
        """
        Look up the stored account behind a session.

        Raises:
            AccountNotFoundError: If the account was deleted after the token was issued
        """
        ...

    async def authenticate(self, token: str) -> SessionResult:
        """
        Validate a session token for an incoming request.

        Args:
            token: Bearer token from the Authorization header

        Returns:
            SessionResult with the user and, when the token is close to
            expiry, a freshly issued replacement

        Raises:
            MissingCredentialError: If the token is empty
            InvalidCredentialError: If the token is invalid or expired
        """
        ...

    async def record_activity(self, user_id: str) -> bool:
        """
        Update the user's last-activity time, at most once per throttle window.

        Returns:
            True if a write happened
        """
        ...
