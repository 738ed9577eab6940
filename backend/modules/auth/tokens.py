"""
Session token codec.

Issues and validates stateless HS256 session tokens. Validation needs no
store lookup; rotation is decided from the token's own expiry.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt

from shared.config import Settings, get_settings
from shared.exceptions import ConfigurationError

from .models import TokenClaims
from .exceptions import InvalidCredentialError

ALGORITHM = "HS256"


class CredentialCodec:
    """
    Creates and validates signed, time-bounded session tokens.

    Tokens carry the user ID (``sub``), the email, and the issue and
    expiry timestamps. Normal tokens live ``ttl`` long; tokens issued by
    rotation live ``extended_ttl`` long.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = timedelta(days=7),
        extended_ttl: timedelta = timedelta(days=30),
        rotation_window: timedelta = timedelta(minutes=2880),
    ):
        self._secret = secret
        self._ttl = ttl
        self._extended_ttl = extended_ttl
        self._rotation_window = rotation_window

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "CredentialCodec":
        settings = settings or get_settings()
        return cls(
            secret=settings.jwt_secret,
            ttl=timedelta(days=settings.token_ttl_days),
            extended_ttl=timedelta(days=settings.extended_token_ttl_days),
            rotation_window=timedelta(minutes=settings.token_rotation_window_minutes),
        )

    def _require_secret(self) -> str:
        if not self._secret:
            raise ConfigurationError("JWT_SECRET")
        return self._secret

    def issue(self, user_id: str, email: str, extended: bool = False) -> str:
        """
        Issue a signed session token.

        Args:
            user_id: Subject of the token
            email: Email claim
            extended: Use the longer lifetime (for rotated tokens)

        Returns:
            Encoded token string

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        secret = self._require_secret()
        now = datetime.now(timezone.utc)
        lifetime = self._extended_ttl if extended else self._ttl
        payload = {
            "sub": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + lifetime).timestamp()),
        }
        return jwt.encode(payload, secret, algorithm=ALGORITHM)

    def validate(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the claims.

        Raises:
            InvalidCredentialError: On any signature, format, or expiry failure
            ConfigurationError: If no signing secret is configured
        """
        secret = self._require_secret()
        if not token:
            raise InvalidCredentialError()

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )
            return TokenClaims(**payload)
        except (jwt.InvalidTokenError, ValueError, TypeError):
            # ExpiredSignatureError is an InvalidTokenError; callers see one outcome
            raise InvalidCredentialError()

    def time_until_expiry(
        self,
        token: str,
        now: Optional[datetime] = None,
    ) -> Optional[timedelta]:
        """
        Remaining validity of a token, read without verifying its signature.

        Only for rotation heuristics, never for authorization.

        Returns:
            Remaining time (negative if already expired), or None if the
            claims cannot be decoded
        """
        try:
            payload = jwt.decode(token, options={"verify_signature": False})
            exp = int(payload["exp"])
        except (jwt.InvalidTokenError, KeyError, TypeError, ValueError):
            return None

        now = now or datetime.now(timezone.utc)
        return datetime.fromtimestamp(exp, tz=timezone.utc) - now

    def should_rotate(
        self,
        token: str,
        window_minutes: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> bool:
        """Whether the token's remaining validity is within the rotation window."""
        window = (
            timedelta(minutes=window_minutes)
            if window_minutes is not None
            else self._rotation_window
        )
        remaining = self.time_until_expiry(token, now=now)
        if remaining is None:
            return False
        return remaining <= window
