"""Portfolio metrics.

Pure computations over stored asset fields: per-asset gain/loss and the
value-ranked series shown on the home page.
"""

from .metrics import build_portfolio_series, compute_metrics, effective_price
from .valuation_types import AssetView, PortfolioSeries

__all__ = [
    "AssetView",
    "PortfolioSeries",
    "build_portfolio_series",
    "compute_metrics",
    "effective_price",
]
