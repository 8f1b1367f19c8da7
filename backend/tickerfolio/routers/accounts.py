"""Account router: registration, login, logout and password change."""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from tickerfolio.config import settings
from tickerfolio.database import get_db
from tickerfolio.dependencies.auth import get_current_user_id
from tickerfolio.rate_limiter import limiter
from tickerfolio.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    RegisterResponse,
    UserLogin,
    UserRegister,
)
from tickerfolio.schemas.common import MessageResponse
from tickerfolio.services.account_service import AccountService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("/register/", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.auth_rate_limit)
def register(request: Request, data: UserRegister, db: Session = Depends(get_db)) -> dict:
    """Register a new user and log them in."""
    result = AccountService(db).register(data.email, data.password)
    return {
        "message": "User created successfully",
        "token": result.token,
        "user": result.user,
    }


@router.post("/login/", response_model=AuthResponse)
@limiter.limit(settings.auth_rate_limit)
def login(request: Request, data: UserLogin, db: Session = Depends(get_db)) -> dict:
    """Login and get an access token."""
    result = AccountService(db).login(data.username, data.password)
    return {"token": result.token, "user": result.user}


@router.post("/logout/", response_model=MessageResponse)
def logout(user_id: int = Depends(get_current_user_id)) -> dict:
    """Tokens are stateless; the client discards its token."""
    logger.info(f"User {user_id} logged out")
    return {"message": "Logged out successfully"}


@router.post("/password_change/", response_model=MessageResponse)
def change_password(
    data: ChangePasswordRequest,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> dict:
    """Change password while logged in."""
    AccountService(db).change_password(user_id, data.old_password, data.new_password)
    return {"message": "Password changed successfully"}
