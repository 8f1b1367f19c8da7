"""Portfolio metrics engine - single source of truth for value calculations.

No rounding is applied anywhere; results are plain float arithmetic.
"""

from collections.abc import Iterable
from typing import Protocol

from .valuation_types import AssetView, PortfolioSeries


class AssetLike(Protocol):
    id: int
    user_id: int
    ticker: str
    quantity: int
    average_price: float
    current_price: float | None


def effective_price(asset: AssetLike) -> float:
    """Current price when a quote exists, otherwise the average price."""
    if asset.current_price is None:
        return asset.average_price
    return asset.current_price


def percent_change(average_price: float, current_price: float | None) -> float | None:
    """Percent move from average to current price.

    None when there is no quote or the average price is zero.
    """
    if current_price is None or average_price == 0:
        return None
    return ((current_price - average_price) / average_price) * 100


def compute_metrics(asset: AssetLike) -> AssetView:
    """Build the metric-augmented view of a single asset."""
    total_invested = asset.quantity * asset.average_price
    current_value = asset.quantity * effective_price(asset)

    return AssetView(
        id=asset.id,
        user_id=asset.user_id,
        ticker=asset.ticker,
        quantity=asset.quantity,
        average_price=asset.average_price,
        current_price=asset.current_price,
        percent_change=percent_change(asset.average_price, asset.current_price),
        total_invested=total_invested,
        current_value=current_value,
        result=current_value - total_invested,
    )


def build_portfolio_series(assets: Iterable[AssetLike]) -> PortfolioSeries:
    """Rank assets by current value, descending.

    The sort is stable, so equal values keep the order they were given in.
    """
    valued = [(asset.ticker, asset.quantity * effective_price(asset)) for asset in assets]
    valued.sort(key=lambda item: item[1], reverse=True)

    return PortfolioSeries(
        labels=[ticker for ticker, _ in valued],
        values=[value for _, value in valued],
    )
