"""Tests for UserRepository."""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from modules.auth.exceptions import EmailAlreadyRegisteredError
from modules.auth.repository import UserRepository


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repository(mock_db):
    return UserRepository(mock_db)


def _user_row(**overrides):
    row = {
        "id": "user-1",
        "email": "a@x.com",
        "password_hash": "$2b$12$hash",
        "created_at": "2024-05-01T10:00:00+00:00",
        "last_login": None,
        "last_active": None,
    }
    row.update(overrides)
    return row


class TestCreateUser:
    def test_inserts_and_maps_row(self, repository, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [_user_row()]

        user = repository.create_user("a@x.com", "$2b$12$hash")

        mock_db.table.assert_called_with("users")
        inserted = mock_db.table.return_value.insert.call_args[0][0]
        assert inserted["email"] == "a@x.com"
        assert inserted["password_hash"] == "$2b$12$hash"
        assert user.id == "user-1"
        assert user.created_at == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)

    def test_unique_violation_becomes_conflict(self, repository, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "23505", "message": "duplicate key value", "details": "", "hint": ""}
        )
        with pytest.raises(EmailAlreadyRegisteredError):
            repository.create_user("a@x.com", "$2b$12$hash")

    def test_other_errors_propagate(self, repository, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "42P01", "message": "relation does not exist", "details": "", "hint": ""}
        )
        with pytest.raises(APIError):
            repository.create_user("a@x.com", "$2b$12$hash")


class TestQueries:
    def test_get_by_email_missing(self, repository, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = []

        assert repository.get_by_email("nobody@x.com") is None
        mock_db.table.return_value.select.return_value.eq.assert_called_with("email", "nobody@x.com")

    def test_get_by_id_maps_row(self, repository, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [_user_row(last_login="2024-05-02T08:00:00Z")]

        user = repository.get_by_id("user-1")

        mock_db.table.return_value.select.return_value.eq.assert_called_with("id", "user-1")
        assert user.email == "a@x.com"
        assert user.last_login == datetime(2024, 5, 2, 8, tzinfo=timezone.utc)

    def test_get_by_id_with_malformed_id(self, repository, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.side_effect = APIError(
            {"code": "22P02", "message": "invalid input syntax for type uuid", "details": "", "hint": ""}
        )
        assert repository.get_by_id("not-a-uuid") is None

    def test_get_last_active_parses_timestamp(self, repository, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [{"last_active": "2024-05-01T10:00:00Z"}]

        assert repository.get_last_active("user-1") == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)

    def test_update_last_active(self, repository, mock_db):
        when = datetime(2024, 5, 1, 10, tzinfo=timezone.utc)
        repository.update_last_active("user-1", when)

        mock_db.table.return_value.update.assert_called_once_with({"last_active": when.isoformat()})
        mock_db.table.return_value.update.return_value.eq.assert_called_once_with("id", "user-1")
