"""Account management: registration, login, password change and deletion."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from tickerfolio.constants import PasswordLimits
from tickerfolio.models import User
from tickerfolio.services.auth_service import AuthService
from tickerfolio.services.exceptions import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from tickerfolio.services.repositories import DuplicateError, UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass
class AuthResult:
    """Token issued to a freshly authenticated user."""

    token: str
    user: User


class AccountService:
    """Credential and account lifecycle operations."""

    def __init__(self, db: Session) -> None:
        self._db = db
        self._users = UserRepository(db)

    def register(self, email: str, password: str) -> AuthResult:
        """Create an account (username = email) and log it in."""
        _check_password_length(password)

        if self._users.find_by_username(email) is not None:
            raise ConflictError("Email already registered")

        try:
            user = self._users.create(
                username=email,
                email=email,
                password_hash=AuthService.hash_password(password),
            )
        except DuplicateError:
            # Lost a race with a concurrent registration
            raise ConflictError("Email already registered")
        self._db.commit()

        logger.info(f"User registered: {user.username}")
        return AuthResult(token=AuthService.create_access_token(user.id), user=user)

    def login(self, username: str, password: str) -> AuthResult:
        """Verify credentials.

        Unknown usernames and wrong passwords fail identically.
        """
        user = self._users.find_by_username(username)
        if user is None:
            # Dummy verification keeps timing consistent with the wrong-password path
            AuthService.verify_password(password, AuthService.get_dummy_hash())
            logger.warning("Failed login attempt: unknown username")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not AuthService.verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for user {user.id}: invalid password")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        logger.info(f"User logged in: {user.username}")
        return AuthResult(token=AuthService.create_access_token(user.id), user=user)

    def change_password(self, user_id: int, old_password: str, new_password: str) -> None:
        user = self.get_user(user_id)

        if not AuthService.verify_password(old_password, user.password_hash):
            raise ValidationError("Current password is incorrect")
        _check_password_length(new_password)

        self._users.update_password_hash(user, AuthService.hash_password(new_password))
        self._db.commit()
        logger.info(f"Password changed for user {user.id}")

    def get_user(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def delete_account(self, user_id: int) -> None:
        """Delete the user together with every asset they own."""
        user = self.get_user(user_id)
        self._users.delete(user)
        self._db.commit()
        logger.info(f"Account {user_id} deleted")


def _check_password_length(password: str) -> None:
    if len(password) < PasswordLimits.MIN_LENGTH:
        raise ValidationError(f"Password must be at least {PasswordLimits.MIN_LENGTH} characters")
    if len(password.encode("utf-8")) > PasswordLimits.MAX_BYTES:
        raise ValidationError(f"Password must be at most {PasswordLimits.MAX_BYTES} bytes")
