"""Pydantic schemas for API validation."""

from tickerfolio.schemas.asset import AssetView, AssetWrite
from tickerfolio.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    RegisterResponse,
    UserInfo,
    UserLogin,
    UserRegister,
)
from tickerfolio.schemas.common import MessageResponse
from tickerfolio.schemas.portfolio import PortfolioSeries
from tickerfolio.schemas.settings import DeleteAccountResponse, UserSettings

__all__ = [
    # Asset schemas
    "AssetView",
    "AssetWrite",
    # Auth schemas
    "AuthResponse",
    "ChangePasswordRequest",
    "RegisterResponse",
    "UserInfo",
    "UserLogin",
    "UserRegister",
    # Common schemas
    "MessageResponse",
    # Portfolio schemas
    "PortfolioSeries",
    # Settings schemas
    "DeleteAccountResponse",
    "UserSettings",
]
