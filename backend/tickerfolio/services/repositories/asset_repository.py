"""Asset data access layer."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from tickerfolio.models import Asset

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class AssetRepository:
    """Centralized asset data access.

    Naming conventions:
    - find_* : Query that may return None or empty list
    - create_* / update / delete : Write, flushed but not committed
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, asset_id: int) -> Asset | None:
        """Find asset by primary key, regardless of owner."""
        return self._db.query(Asset).filter(Asset.id == asset_id).first()

    def find_by_owner(self, user_id: int) -> "Sequence[Asset]":
        """Find all assets owned by a user, oldest first."""
        return (
            self._db.query(Asset)
            .filter(Asset.user_id == user_id)
            .order_by(Asset.id)
            .all()
        )

    def count_by_owner(self, user_id: int) -> int:
        return self._db.query(Asset).filter(Asset.user_id == user_id).count()

    def create(
        self,
        user_id: int,
        *,
        ticker: str,
        quantity: int,
        average_price: float,
        current_price: float | None = None,
    ) -> Asset:
        """Insert a new asset for the given owner."""
        asset = Asset(
            user_id=user_id,
            ticker=ticker,
            quantity=quantity,
            average_price=average_price,
            current_price=current_price,
        )
        self._db.add(asset)
        self._db.flush()
        logger.debug(f"Created asset {ticker} with ID {asset.id} for user {user_id}")
        return asset

    def update(
        self,
        asset: Asset,
        *,
        ticker: str,
        quantity: int,
        average_price: float,
        current_price: float | None,
    ) -> Asset:
        """Replace all mutable fields. ``current_price=None`` clears the quote."""
        asset.ticker = ticker
        asset.quantity = quantity
        asset.average_price = average_price
        asset.current_price = current_price
        self._db.flush()
        return asset

    def delete(self, asset: Asset) -> None:
        self._db.delete(asset)
        self._db.flush()

    def delete_by_owner(self, user_id: int) -> int:
        """Delete every asset owned by a user. Returns the number of rows removed."""
        deleted = self._db.query(Asset).filter(Asset.user_id == user_id).delete()
        self._db.flush()
        return deleted
