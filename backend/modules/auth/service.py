"""
Authentication service implementation.

Registers and logs in users, validates session tokens, rotates tokens
that are close to expiry, and tracks last activity.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from shared.models import AuthenticatedUser

from .interfaces import IAuthService, IUserRepository
from .models import MAX_PASSWORD_BYTES, AuthResult, AccountSummary, SessionResult
from .passwords import hash_password, verify_password
from .tokens import CredentialCodec
from .exceptions import (
    AccountNotFoundError,
    EmailAlreadyRegisteredError,
    InvalidLoginError,
    MissingCredentialError,
    PasswordTooLongError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Session tokens are stateless: validation only needs the codec. The
    user repository is touched by register/login and by the throttled
    activity update.
    """

    def __init__(
        self,
        codec: CredentialCodec,
        users: IUserRepository,
        activity_throttle: timedelta = timedelta(hours=1),
    ):
        self._codec = codec
        self._users = users
        self._activity_throttle = activity_throttle

    async def register(self, email: str, password: str) -> AuthResult:
        """Create an account; the repository enforces email uniqueness."""
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise PasswordTooLongError(MAX_PASSWORD_BYTES)
        if self._users.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        user = self._users.create_user(email, hash_password(password))
        logger.info(f"Registered user {user.id}")
        return self._auth_result(user.id, user.email)

    async def login(self, email: str, password: str) -> AuthResult:
        """Verify credentials; unknown email and wrong password look the same."""
        user = self._users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise InvalidLoginError()

        self._users.update_last_login(user.id)
        return self._auth_result(user.id, user.email)

    async def get_account(self, user_id: str) -> AccountSummary:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise AccountNotFoundError(user_id)
        return AccountSummary(id=user.id, email=user.email)

    async def authenticate(self, token: str) -> SessionResult:
        """Validate a token and issue a rotated one when it is close to expiry."""
        if not token:
            raise MissingCredentialError()

        claims = self._codec.validate(token)
        user = AuthenticatedUser(id=claims.sub, email=claims.email)

        return SessionResult(user=user, rotated_token=self._maybe_rotate(token, user))

    def _maybe_rotate(self, token: str, user: AuthenticatedUser) -> Optional[str]:
        # Rotation is advisory; a failure here must not fail the request
        try:
            if self._codec.should_rotate(token):
                return self._codec.issue(user.id, user.email, extended=True)
        except Exception as e:
            logger.warning(f"Token rotation failed for user {user.id}: {e}")
        return None

    async def record_activity(self, user_id: str) -> bool:
        """Write last_active unless it was written within the throttle window."""
        now = datetime.now(timezone.utc)
        last_active = self._users.get_last_active(user_id)

        if last_active is not None and now - last_active <= self._activity_throttle:
            logger.debug(f"Skipping activity update for user {user_id}")
            return False

        self._users.update_last_active(user_id, now)
        return True

    def _auth_result(self, user_id: str, email: str) -> AuthResult:
        return AuthResult(
            token=self._codec.issue(user_id, email),
            user=AccountSummary(id=user_id, email=email),
        )
