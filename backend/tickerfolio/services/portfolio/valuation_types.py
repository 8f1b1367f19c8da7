"""Value objects for portfolio valuation."""

from dataclasses import dataclass, field


@dataclass
class AssetView:
    """A stored asset plus its derived metrics."""

    id: int
    user_id: int
    ticker: str
    quantity: int
    average_price: float
    current_price: float | None

    # Derived, never persisted
    percent_change: float | None
    total_invested: float
    current_value: float
    result: float


@dataclass
class PortfolioSeries:
    """Tickers and values ranked by value, highest first.

    ``labels`` and ``values`` always have the same length.
    """

    labels: list[str] = field(default_factory=list)
    values: list[float] = field(default_factory=list)
