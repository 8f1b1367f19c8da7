"""Schemas for the portfolio summary."""

from pydantic import BaseModel, ConfigDict, Field


class PortfolioSeries(BaseModel):
    """Tickers and values sorted by value, descending."""

    model_config = ConfigDict(from_attributes=True)

    labels: list[str] = Field(..., description="Tickers ordered by value")
    values: list[float] = Field(..., description="Matching values")
