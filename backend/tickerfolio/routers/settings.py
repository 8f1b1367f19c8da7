"""Account settings router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tickerfolio.database import get_db
from tickerfolio.dependencies.auth import get_current_user_id
from tickerfolio.schemas.settings import DeleteAccountResponse, UserSettings
from tickerfolio.services.account_service import AccountService

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/", response_model=UserSettings)
def get_settings(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Get the current user's account details."""
    return AccountService(db).get_user(user_id)


@router.post("/delete/", response_model=DeleteAccountResponse)
def delete_account(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> dict:
    """Delete the current user's account and all of their assets."""
    AccountService(db).delete_account(user_id)
    return {"message": "Account deleted successfully", "deleted": True}
