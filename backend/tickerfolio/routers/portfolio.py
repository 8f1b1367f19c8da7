"""Portfolio home router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tickerfolio.database import get_db
from tickerfolio.dependencies.auth import get_current_user
from tickerfolio.models.user import User
from tickerfolio.schemas.portfolio import PortfolioSeries
from tickerfolio.services.asset_service import AssetService

router = APIRouter(tags=["portfolio"])


@router.get("/", response_model=PortfolioSeries)
def portfolio_home(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Get the portfolio chart data.

    Returns tickers (labels) and their current values (values), highest value first.
    """
    return AssetService(db).get_portfolio_series(current_user.id)
