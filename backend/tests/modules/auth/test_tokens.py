"""Tests for the session token codec."""

import pytest
from datetime import datetime, timedelta, timezone
import jwt

from modules.auth.exceptions import InvalidCredentialError
from modules.auth.tokens import CredentialCodec
from shared.config import Settings
from shared.exceptions import ConfigurationError
from tests.conftest import TEST_JWT_SECRET, create_test_token


def _claims(token: str) -> dict:
    return jwt.decode(token, options={"verify_signature": False})


def _flip(char: str) -> str:
    return "A" if char != "A" else "B"


class TestIssueAndValidate:
    def test_round_trip(self, codec):
        """A freshly issued token validates back to the same identity."""
        token = codec.issue("user-1", "a@x.com")
        claims = codec.validate(token)
        assert claims.sub == "user-1"
        assert claims.email == "a@x.com"

    def test_normal_lifetime_is_seven_days(self, codec):
        claims = _claims(codec.issue("user-1", "a@x.com"))
        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())

    def test_extended_lifetime_is_thirty_days(self, codec):
        claims = _claims(codec.issue("user-1", "a@x.com", extended=True))
        assert claims["exp"] - claims["iat"] == int(timedelta(days=30).total_seconds())

    def test_single_character_signature_tampering_is_rejected(self, codec):
        """Changing any fully-significant signature character invalidates the token."""
        token = codec.issue("user-1", "a@x.com")
        header, payload, signature = token.split(".")

        # The last base64url character carries padding bits, so skip it
        for i in range(len(signature) - 1):
            tampered = signature[:i] + _flip(signature[i]) + signature[i + 1:]
            with pytest.raises(InvalidCredentialError):
                codec.validate(f"{header}.{payload}.{tampered}")

    def test_payload_tampering_is_rejected(self, codec):
        token = codec.issue("user-1", "a@x.com")
        forged = create_test_token(user_id="someone-else", secret=TEST_JWT_SECRET)
        header, _, signature = token.split(".")
        _, forged_payload, _ = forged.split(".")
        with pytest.raises(InvalidCredentialError):
            codec.validate(f"{header}.{forged_payload}.{signature}")

    def test_wrong_secret_is_rejected(self, codec):
        token = create_test_token(secret="another-secret")
        with pytest.raises(InvalidCredentialError):
            codec.validate(token)

    def test_expired_token_is_rejected(self, codec):
        token = create_test_token(expires_in=timedelta(seconds=-5))
        with pytest.raises(InvalidCredentialError):
            codec.validate(token)

    @pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
    def test_malformed_token_is_rejected(self, codec, token):
        with pytest.raises(InvalidCredentialError):
            codec.validate(token)

    def test_missing_required_claim_is_rejected(self, codec):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "user-1", "email": "a@x.com", "exp": int((now + timedelta(days=1)).timestamp())},
            TEST_JWT_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidCredentialError):
            codec.validate(token)

    def test_alg_none_is_rejected(self, codec):
        token = jwt.encode(
            {"sub": "user-1", "email": "a@x.com", "iat": 0, "exp": 9999999999},
            key=None,
            algorithm="none",
        )
        with pytest.raises(InvalidCredentialError):
            codec.validate(token)


class TestMissingSecret:
    def test_issue_requires_secret(self):
        with pytest.raises(ConfigurationError) as exc_info:
            CredentialCodec(secret="").issue("user-1", "a@x.com")
        assert exc_info.value.setting == "JWT_SECRET"

    def test_validate_requires_secret(self):
        with pytest.raises(ConfigurationError):
            CredentialCodec(secret="").validate(create_test_token())


class TestRotation:
    def test_rotates_exactly_at_window(self, codec):
        """remaining == window rotates; one second more does not."""
        token = codec.issue("user-1", "a@x.com")
        expires_at = datetime.fromtimestamp(_claims(token)["exp"], tz=timezone.utc)
        window = timedelta(minutes=2880)

        assert codec.should_rotate(token, now=expires_at - window) is True
        assert codec.should_rotate(token, now=expires_at - window - timedelta(seconds=1)) is False

    def test_fresh_token_is_not_rotated(self, codec):
        assert codec.should_rotate(codec.issue("user-1", "a@x.com")) is False

    def test_near_expiry_token_is_rotated(self, codec):
        token = create_test_token(expires_in=timedelta(hours=1))
        assert codec.should_rotate(token) is True

    def test_window_override(self, codec):
        token = create_test_token(expires_in=timedelta(hours=1))
        assert codec.should_rotate(token, window_minutes=30) is False
        assert codec.should_rotate(token, window_minutes=90) is True

    def test_undecodable_token_is_not_rotated(self, codec):
        assert codec.should_rotate("garbage") is False

    def test_time_until_expiry_of_expired_token_is_negative(self, codec):
        token = create_test_token(expires_in=timedelta(minutes=-10))
        remaining = codec.time_until_expiry(token)
        assert remaining is not None
        assert remaining < timedelta(0)

    def test_time_until_expiry_ignores_signature(self, codec):
        token = create_test_token(expires_in=timedelta(hours=2), secret="another-secret")
        remaining = codec.time_until_expiry(token)
        assert timedelta(hours=1) < remaining <= timedelta(hours=2)


class TestFromSettings:
    def test_uses_configured_lifetimes(self):
        settings = Settings(
            _env_file=None,
            jwt_secret="configured",
            token_ttl_days=1,
            extended_token_ttl_days=2,
            token_rotation_window_minutes=60,
        )
        codec = CredentialCodec.from_settings(settings)

        normal = _claims(codec.issue("u", "a@x.com"))
        extended = _claims(codec.issue("u", "a@x.com", extended=True))
        assert normal["exp"] - normal["iat"] == 86400
        assert extended["exp"] - extended["iat"] == 2 * 86400

        near = jwt.encode(
            {
                "sub": "u",
                "email": "a@x.com",
                "iat": normal["iat"],
                "exp": normal["iat"] + 3000,
            },
            "configured",
            algorithm="HS256",
        )
        assert codec.should_rotate(near) is True
