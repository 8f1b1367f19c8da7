"""Ownership-scoped asset lifecycle.

Every operation takes the caller's user id. Reads through ``get_asset_for_edit``
report another user's asset as not found; updates and deletes report it as
forbidden.
"""

import logging
import math

from sqlalchemy.orm import Session

from tickerfolio.constants import AssetLimits
from tickerfolio.models import Asset
from tickerfolio.services.exceptions import ForbiddenError, NotFoundError, ValidationError
from tickerfolio.services.portfolio import (
    AssetView,
    PortfolioSeries,
    build_portfolio_series,
    compute_metrics,
)
from tickerfolio.services.repositories import AssetRepository

logger = logging.getLogger(__name__)


def normalize_ticker(ticker: str) -> str:
    """Strip and uppercase a ticker symbol."""
    normalized = ticker.strip().upper()
    if not normalized:
        raise ValidationError("Ticker is required")
    if len(normalized) > AssetLimits.TICKER_MAX_LENGTH:
        raise ValidationError(f"Ticker must be at most {AssetLimits.TICKER_MAX_LENGTH} characters")
    return normalized


def _check_price(name: str, price: float) -> None:
    if not math.isfinite(price):
        raise ValidationError(f"{name} must be a finite number")
    if price < 0:
        raise ValidationError(f"{name} must be greater than or equal to 0")
    if price > AssetLimits.PRICE_MAX:
        raise ValidationError(f"{name} must be less than or equal to {AssetLimits.PRICE_MAX:g}")


def validate_asset_fields(
    quantity: int, average_price: float, current_price: float | None
) -> None:
    """Range checks shared by create and update."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError("Quantity must be an integer")
    if quantity < 0:
        raise ValidationError("Quantity must be greater than or equal to 0")
    if quantity > AssetLimits.QUANTITY_MAX:
        raise ValidationError(f"Quantity must be less than or equal to {AssetLimits.QUANTITY_MAX}")
    _check_price("Average price", average_price)
    if current_price is not None:
        _check_price("Current price", current_price)

    # Derived values must stay representable as floats
    highest_price = max(average_price, current_price or 0.0)
    if not math.isfinite(quantity * highest_price):
        raise ValidationError("Position value is too large")


class AssetService:
    """Asset operations for a single authenticated caller."""

    def __init__(self, db: Session) -> None:
        self._db = db
        self._assets = AssetRepository(db)

    def list_assets(self, user_id: int) -> list[AssetView]:
        return [compute_metrics(asset) for asset in self._assets.find_by_owner(user_id)]

    def get_portfolio_series(self, user_id: int) -> PortfolioSeries:
        return build_portfolio_series(self._assets.find_by_owner(user_id))

    def create_asset(
        self,
        user_id: int,
        ticker: str,
        quantity: int,
        average_price: float,
        current_price: float | None = None,
    ) -> AssetView:
        ticker = normalize_ticker(ticker)
        validate_asset_fields(quantity, average_price, current_price)

        asset = self._assets.create(
            user_id,
            ticker=ticker,
            quantity=quantity,
            average_price=average_price,
            current_price=current_price,
        )
        self._db.commit()
        logger.info(f"Asset {asset.id} ({ticker}) created for user {user_id}")
        return compute_metrics(asset)

    def get_asset_for_edit(self, user_id: int, asset_id: int) -> AssetView:
        asset = self._assets.find_by_id(asset_id)
        if asset is None or asset.user_id != user_id:
            raise NotFoundError("Asset not found")
        return compute_metrics(asset)

    def update_asset(
        self,
        user_id: int,
        asset_id: int,
        ticker: str,
        quantity: int,
        average_price: float,
        current_price: float | None = None,
    ) -> AssetView:
        """Full replace of ticker, quantity and prices; a missing current price is stored as null."""
        asset = self._get_owned_asset(user_id, asset_id)
        ticker = normalize_ticker(ticker)
        validate_asset_fields(quantity, average_price, current_price)

        self._assets.update(
            asset,
            ticker=ticker,
            quantity=quantity,
            average_price=average_price,
            current_price=current_price,
        )
        self._db.commit()
        logger.info(f"Asset {asset.id} updated by user {user_id}")
        return compute_metrics(asset)

    def delete_asset(self, user_id: int, asset_id: int) -> None:
        asset = self._get_owned_asset(user_id, asset_id)
        self._assets.delete(asset)
        self._db.commit()
        logger.info(f"Asset {asset_id} deleted by user {user_id}")

    def _get_owned_asset(self, user_id: int, asset_id: int) -> Asset:
        asset = self._assets.find_by_id(asset_id)
        if asset is None:
            raise NotFoundError("Asset not found")
        if asset.user_id != user_id:
            logger.warning(f"User {user_id} attempted to modify asset {asset_id} owned by another user")
            raise ForbiddenError("You do not have permission to modify this asset")
        return asset
