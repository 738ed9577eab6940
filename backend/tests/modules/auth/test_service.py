"""Tests for AuthService."""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import jwt

from modules.auth.exceptions import (
    AccountNotFoundError,
    EmailAlreadyRegisteredError,
    InvalidCredentialError,
    InvalidLoginError,
    MissingCredentialError,
    PasswordTooLongError,
)
from modules.auth.interfaces import IAuthService, IUserRepository
from modules.auth.service import AuthService
from tests.conftest import create_test_token
from tests.fakes import FakeUserRepository


class TestInterfaces:
    def test_service_satisfies_protocol(self, auth_service):
        assert isinstance(auth_service, IAuthService)

    def test_fake_repository_satisfies_protocol(self):
        assert isinstance(FakeUserRepository(), IUserRepository)


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_issues_token(self, auth_service, codec, users):
        result = await auth_service.register("a@x.com", "secret1")

        claims = codec.validate(result.token)
        assert result.success is True
        assert result.user.email == "a@x.com"
        assert claims.sub == result.user.id
        assert users.get_by_email("a@x.com") is not None

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self, auth_service, users):
        await auth_service.register("a@x.com", "secret1")
        assert users.get_by_email("a@x.com").password_hash != "secret1"

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, auth_service):
        await auth_service.register("a@x.com", "secret1")
        with pytest.raises(EmailAlreadyRegisteredError):
            await auth_service.register("a@x.com", "another1")

    @pytest.mark.asyncio
    async def test_password_over_72_bytes_is_rejected(self, auth_service, users):
        with pytest.raises(PasswordTooLongError):
            await auth_service.register("a@x.com", "\u00e9" * 40)
        assert users.get_by_email("a@x.com") is None


class TestGetAccount:
    @pytest.mark.asyncio
    async def test_returns_stored_account(self, auth_service):
        registered = await auth_service.register("a@x.com", "secret1")

        account = await auth_service.get_account(registered.user.id)

        assert account == registered.user

    @pytest.mark.asyncio
    async def test_unknown_account(self, auth_service):
        with pytest.raises(AccountNotFoundError):
            await auth_service.get_account("missing-user")


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_with_correct_password(self, auth_service, codec, users):
        registered = await auth_service.register("a@x.com", "secret1")

        result = await auth_service.login("a@x.com", "secret1")

        assert codec.validate(result.token).sub == registered.user.id
        assert users.get_by_email("a@x.com").last_login is not None

    @pytest.mark.asyncio
    async def test_wrong_password(self, auth_service):
        await auth_service.register("a@x.com", "secret1")
        with pytest.raises(InvalidLoginError) as exc_info:
            await auth_service.login("a@x.com", "wrong-password")
        assert exc_info.value.message == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_unknown_email_looks_like_wrong_password(self, auth_service):
        with pytest.raises(InvalidLoginError) as exc_info:
            await auth_service.login("nobody@x.com", "secret1")
        assert exc_info.value.message == "Invalid email or password"


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_valid_token(self, auth_service):
        session = await auth_service.authenticate(create_test_token())
        assert session.user.id == "test-user-123"
        assert session.user.email == "test@example.com"
        assert session.rotated_token is None

    @pytest.mark.asyncio
    async def test_empty_token(self, auth_service):
        with pytest.raises(MissingCredentialError):
            await auth_service.authenticate("")

    @pytest.mark.asyncio
    async def test_expired_token(self, auth_service):
        with pytest.raises(InvalidCredentialError):
            await auth_service.authenticate(create_test_token(expires_in=timedelta(minutes=-1)))

    @pytest.mark.asyncio
    async def test_near_expiry_token_is_rotated(self, auth_service, codec):
        """A token inside the rotation window yields an extended replacement."""
        session = await auth_service.authenticate(create_test_token(expires_in=timedelta(hours=1)))

        assert session.rotated_token is not None
        rotated = codec.validate(session.rotated_token)
        assert rotated.sub == "test-user-123"
        claims = jwt.decode(session.rotated_token, options={"verify_signature": False})
        assert claims["exp"] - claims["iat"] == int(timedelta(days=30).total_seconds())

    @pytest.mark.asyncio
    async def test_rotation_failure_does_not_fail_authentication(self, auth_service, codec):
        token = create_test_token(expires_in=timedelta(hours=1))
        with patch.object(codec, "issue", side_effect=RuntimeError("signing failed")):
            session = await auth_service.authenticate(token)
        assert session.user.id == "test-user-123"
        assert session.rotated_token is None


class TestRecordActivity:
    @pytest.mark.asyncio
    async def test_first_activity_is_written(self, auth_service, users):
        registered = await auth_service.register("a@x.com", "secret1")

        assert await auth_service.record_activity(registered.user.id) is True
        assert users.get_last_active(registered.user.id) is not None

    @pytest.mark.asyncio
    async def test_activity_within_throttle_is_skipped(self, auth_service, users):
        registered = await auth_service.register("a@x.com", "secret1")
        users.update_last_active(registered.user.id, datetime.now(timezone.utc) - timedelta(minutes=30))
        writes = users.last_active_writes

        assert await auth_service.record_activity(registered.user.id) is False
        assert users.last_active_writes == writes

    @pytest.mark.asyncio
    async def test_stale_activity_is_refreshed(self, auth_service, users):
        registered = await auth_service.register("a@x.com", "secret1")
        stale = datetime.now(timezone.utc) - timedelta(hours=2)
        users.update_last_active(registered.user.id, stale)

        assert await auth_service.record_activity(registered.user.id) is True
        assert users.get_last_active(registered.user.id) > stale

    @pytest.mark.asyncio
    async def test_custom_throttle(self, codec, users):
        service = AuthService(codec=codec, users=users, activity_throttle=timedelta(minutes=5))
        registered = await service.register("a@x.com", "secret1")
        users.update_last_active(registered.user.id, datetime.now(timezone.utc) - timedelta(minutes=10))

        assert await service.record_activity(registered.user.id) is True
