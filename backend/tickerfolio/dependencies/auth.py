"""Authentication dependencies for protected routes."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tickerfolio.database import get_db
from tickerfolio.models.user import User
from tickerfolio.services.auth_service import AuthService
from tickerfolio.services.exceptions import UnauthorizedError
from tickerfolio.services.repositories import UserRepository

# auto_error=False so a missing header is a 401 from us, not a 403 from HTTPBearer
security = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> int:
    """
    Get the authenticated user id from the bearer token alone.

    The user row is not looked up; routes using this dependency check it themselves.

    Usage:
        @router.get("/settings/")
        def settings(user_id: int = Depends(get_current_user_id)):
            ...
    """
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    user_id = AuthService.user_id_from_token(credentials.credentials)
    if user_id is None:
        raise UnauthorizedError("Invalid or expired token")
    return user_id


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    """
    Get current authenticated user, rejecting tokens whose account is gone.

    Usage:
        @router.get("/manager/")
        def list_assets(user: User = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    user = UserRepository(db).find_by_id(user_id)
    if user is None:
        raise UnauthorizedError("User not found")
    return user
