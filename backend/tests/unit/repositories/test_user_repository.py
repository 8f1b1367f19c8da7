"""Tests for UserRepository."""

import pytest

from tickerfolio.models import Asset, User
from tickerfolio.services.repositories import DuplicateError
from tickerfolio.services.repositories.user_repository import UserRepository


class TestUserRepository:
    """Test cases for UserRepository."""

    def test_find_by_id_returns_user(self, db, test_user):
        """Should return user when ID exists."""
        repo = UserRepository(db)
        user = repo.find_by_id(test_user.id)
        assert user is not None
        assert user.id == test_user.id

    def test_find_by_id_returns_none_for_missing(self, db):
        """Should return None when ID does not exist."""
        repo = UserRepository(db)
        assert repo.find_by_id(9999) is None

    def test_find_by_username_returns_user(self, db, test_user):
        repo = UserRepository(db)
        user = repo.find_by_username("test@example.com")
        assert user is not None
        assert user.id == test_user.id

    def test_find_by_username_is_exact_match(self, db, test_user):
        """Usernames are compared as stored."""
        repo = UserRepository(db)
        assert repo.find_by_username("TEST@EXAMPLE.COM") is None

    def test_create_assigns_id(self, db):
        repo = UserRepository(db)
        user = repo.create(username="new@example.com", email="new@example.com", password_hash="hash")
        assert user.id is not None

    def test_create_duplicate_username_raises(self, db, test_user):
        """Should raise DuplicateError when the username is taken."""
        repo = UserRepository(db)
        with pytest.raises(DuplicateError) as exc_info:
            repo.create(username="test@example.com", email="test@example.com", password_hash="hash")
        assert exc_info.value.field == "username"

    def test_update_password_hash(self, db, test_user):
        repo = UserRepository(db)
        repo.update_password_hash(test_user, "new-hash")
        db.commit()

        assert repo.find_by_id(test_user.id).password_hash == "new-hash"

    def test_delete_cascades_to_assets(self, db, test_user, test_asset, other_user):
        """Deleting a user removes their assets but no one else's."""
        db.add(Asset(user_id=other_user.id, ticker="VALE3", quantity=1, average_price=1.0))
        db.commit()

        repo = UserRepository(db)
        repo.delete(test_user)
        db.commit()

        assert db.query(User).count() == 1
        remaining = db.query(Asset).all()
        assert [asset.ticker for asset in remaining] == ["VALE3"]
