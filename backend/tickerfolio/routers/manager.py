"""Asset manager router (CRUD over the caller's assets)."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tickerfolio.database import get_db
from tickerfolio.dependencies.auth import get_current_user
from tickerfolio.models.user import User
from tickerfolio.schemas.asset import AssetView, AssetWrite
from tickerfolio.schemas.common import MessageResponse
from tickerfolio.services.asset_service import AssetService

router = APIRouter(prefix="/manager", tags=["assets"])


@router.get("/", response_model=list[AssetView])
def list_assets(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """List the current user's assets with metrics."""
    return AssetService(db).list_assets(current_user.id)


@router.post("/create/", response_model=AssetView, status_code=status.HTTP_201_CREATED)
def create_asset(
    data: AssetWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create an asset. The ticker is stored uppercase."""
    return AssetService(db).create_asset(
        current_user.id,
        ticker=data.ticker,
        quantity=data.quantity,
        average_price=data.average_price,
        current_price=data.current_price,
    )


@router.get("/edit/{asset_id}", response_model=AssetView)
def get_asset(
    asset_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get one asset for editing. Other users' assets are reported as not found."""
    return AssetService(db).get_asset_for_edit(current_user.id, asset_id)


@router.post("/edit/{asset_id}", response_model=AssetView)
def update_asset(
    asset_id: int,
    data: AssetWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Replace an asset's ticker, quantity and prices."""
    return AssetService(db).update_asset(
        current_user.id,
        asset_id,
        ticker=data.ticker,
        quantity=data.quantity,
        average_price=data.average_price,
        current_price=data.current_price,
    )


@router.post("/delete/{asset_id}", response_model=MessageResponse)
def delete_asset(
    asset_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    AssetService(db).delete_asset(current_user.id, asset_id)
    return {"message": "Asset deleted successfully"}
