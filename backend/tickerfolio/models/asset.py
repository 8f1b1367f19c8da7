"""Asset model - a position held by a single user."""

from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tickerfolio.database import Base

if TYPE_CHECKING:
    from tickerfolio.models.user import User


class Asset(Base):
    """Asset owned by exactly one user.

    ``current_price`` is None until a quote has been entered.
    """

    __tablename__ = "assets"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    ticker: Mapped[str] = mapped_column(String(20))
    quantity: Mapped[int] = mapped_column(Integer)
    average_price: Mapped[float] = mapped_column(Float)
    current_price: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Relationships
    user: Mapped["User"] = relationship(back_populates="assets")

    def __repr__(self) -> str:
        return f"<Asset(id={self.id}, ticker='{self.ticker}', user_id={self.user_id})>"
