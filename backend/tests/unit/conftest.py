"""Fixtures for repository and service unit tests."""

import pytest

from tickerfolio.models import Asset, User


@pytest.fixture
def test_user(db):
    """Create a test user."""
    user = User(username="test@example.com", email="test@example.com", password_hash="hash")
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def other_user(db):
    user = User(username="other@example.com", email="other@example.com", password_hash="hash")
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def test_asset(db, test_user):
    """Create an asset owned by test_user."""
    asset = Asset(
        user_id=test_user.id,
        ticker="PETR4",
        quantity=100,
        average_price=30.0,
        current_price=33.0,
    )
    db.add(asset)
    db.commit()
    return asset
