"""Pydantic schemas for assets."""

from pydantic import BaseModel, ConfigDict, Field

from tickerfolio.constants import AssetLimits


class AssetWrite(BaseModel):
    """Body for creating or updating an asset (update is a full replace)."""

    ticker: str = Field(
        ...,
        min_length=1,
        max_length=AssetLimits.TICKER_MAX_LENGTH,
        description="Ticker symbol, e.g. PETR4",
    )
    quantity: int = Field(
        ..., ge=0, le=AssetLimits.QUANTITY_MAX, strict=True, description="Number of units held"
    )
    average_price: float = Field(
        ...,
        ge=0,
        le=AssetLimits.PRICE_MAX,
        allow_inf_nan=False,
        description="Average purchase price per unit",
    )
    current_price: float | None = Field(
        None,
        ge=0,
        le=AssetLimits.PRICE_MAX,
        allow_inf_nan=False,
        description="Latest price, if known",
    )


class AssetView(BaseModel):
    """Asset with derived metrics."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    ticker: str
    quantity: int
    average_price: float
    current_price: float | None
    percent_change: float | None = Field(None, description="Percent change vs. average price")
    total_invested: float = Field(..., description="quantity x average price")
    current_value: float = Field(..., description="quantity x (current price or average price)")
    result: float = Field(..., description="Profit/loss")
