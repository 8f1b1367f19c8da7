"""User data access layer."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tickerfolio.models import User

from .exceptions import DuplicateError

logger = logging.getLogger(__name__)


class UserRepository:
    """Centralized user data access.

    Naming conventions:
    - find_* : Query that may return None
    - create / update_* / delete : Write, flushed but not committed
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, user_id: int) -> User | None:
        """Find user by primary key."""
        return self._db.query(User).filter(User.id == user_id).first()

    def find_by_username(self, username: str) -> User | None:
        """Find user by username (exact match)."""
        return self._db.query(User).filter(User.username == username).first()

    def create(self, username: str, email: str, password_hash: str) -> User:
        """Insert a new user.

        Raises:
            DuplicateError: If the username is already taken.
        """
        user = User(username=username, email=email, password_hash=password_hash)
        self._db.add(user)
        try:
            self._db.flush()
        except IntegrityError:
            self._db.rollback()
            raise DuplicateError("User", "username", username)
        return user

    def update_password_hash(self, user: User, password_hash: str) -> User:
        user.password_hash = password_hash
        self._db.flush()
        return user

    def delete(self, user: User) -> None:
        """Delete a user; owned assets go with it."""
        self._db.delete(user)
        self._db.flush()
