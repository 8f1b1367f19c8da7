"""SQLAlchemy ORM models."""

from tickerfolio.models.asset import Asset
from tickerfolio.models.user import User

__all__ = [
    "Asset",
    "User",
]
