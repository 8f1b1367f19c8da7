"""User model for authentication."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tickerfolio.database import Base

if TYPE_CHECKING:
    from tickerfolio.models.asset import Asset


class User(Base):
    """User model representing a registered account.

    ``username`` is unique and equals the email address given at registration.
    """

    __tablename__ = "users"
    # AUTOINCREMENT stops SQLite reusing the id of a deleted user
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255))
    password_hash: Mapped[str] = mapped_column("password", String(255))

    # Relationships
    assets: Mapped[list["Asset"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
