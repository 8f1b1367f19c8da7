"""Tests for AccountService."""

import pytest

from tickerfolio.models import Asset, User
from tickerfolio.services.account_service import INVALID_CREDENTIALS, AccountService
from tickerfolio.services.auth_service import AuthService
from tickerfolio.services.exceptions import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


class TestAccountService:
    def test_register_uses_email_as_username(self, db):
        result = AccountService(db).register("new@example.com", "secret1")

        assert result.user.username == "new@example.com"
        assert result.user.email == "new@example.com"
        assert AuthService.user_id_from_token(result.token) == result.user.id

    def test_register_hashes_password(self, db):
        result = AccountService(db).register("new@example.com", "secret1")

        assert result.user.password_hash != "secret1"
        assert AuthService.verify_password("secret1", result.user.password_hash)

    def test_register_duplicate(self, db):
        service = AccountService(db)
        service.register("new@example.com", "secret1")

        with pytest.raises(ConflictError):
            service.register("new@example.com", "secret2")
        assert db.query(User).count() == 1

    def test_register_short_password(self, db):
        with pytest.raises(ValidationError):
            AccountService(db).register("new@example.com", "12345")
        assert db.query(User).count() == 0

    def test_register_password_over_72_bytes(self, db):
        with pytest.raises(ValidationError):
            AccountService(db).register("new@example.com", "é" * 40)
        assert db.query(User).count() == 0

    def test_login(self, db):
        service = AccountService(db)
        registered = service.register("new@example.com", "secret1")

        result = service.login("new@example.com", "secret1")
        assert result.user.id == registered.user.id

    def test_login_failures_are_identical(self, db):
        service = AccountService(db)
        service.register("new@example.com", "secret1")

        with pytest.raises(UnauthorizedError) as wrong_password:
            service.login("new@example.com", "wrong-password")
        with pytest.raises(UnauthorizedError) as unknown_user:
            service.login("nobody@example.com", "wrong-password")

        assert wrong_password.value.message == unknown_user.value.message == INVALID_CREDENTIALS

    def test_change_password(self, db):
        service = AccountService(db)
        user = service.register("new@example.com", "secret1").user

        service.change_password(user.id, "secret1", "secret2")

        assert service.login("new@example.com", "secret2").user.id == user.id
        with pytest.raises(UnauthorizedError):
            service.login("new@example.com", "secret1")

    def test_change_password_wrong_old(self, db):
        service = AccountService(db)
        user = service.register("new@example.com", "secret1").user

        with pytest.raises(ValidationError):
            service.change_password(user.id, "nope", "secret2")

    def test_change_password_over_72_bytes(self, db):
        service = AccountService(db)
        user = service.register("new@example.com", "secret1").user

        with pytest.raises(ValidationError):
            service.change_password(user.id, "secret1", "x" * 73)
        assert service.login("new@example.com", "secret1").user.id == user.id

    def test_get_user_missing(self, db):
        with pytest.raises(NotFoundError):
            AccountService(db).get_user(9999)

    def test_delete_account(self, db, test_user, test_asset):
        service = AccountService(db)
        service.delete_account(test_user.id)

        assert db.query(User).count() == 0
        assert db.query(Asset).count() == 0

        with pytest.raises(NotFoundError):
            service.delete_account(test_user.id)
