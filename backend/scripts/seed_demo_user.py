"""Seed a demo user with a sample portfolio."""

import logging

from sqlalchemy.orm import Session as DBSession

from tickerfolio.models.user import User
from tickerfolio.services.auth_service import AuthService
from tickerfolio.services.repositories import AssetRepository, UserRepository

logger = logging.getLogger(__name__)

DEMO_EMAIL = "carlos@email.com"
DEMO_PASSWORD = "123456"

# ticker, quantity, average_price, current_price
DEMO_ASSETS_DATA = [
    ("PETR4", 100, 31.24, 31.79),
    ("VALE3", 50, 53.45, 67.40),
    ("ITUB4", 200, 37.49, 41.64),
    ("BBDC4", 150, 16.08, 19.65),
    ("COCA34", 120, 67.29, 64.77),
    ("AFHI11", 80, 92.40, 94.67),
    ("SNAG11", 600, 9.67, 10.17),
]


def create_demo_user(db: DBSession) -> tuple[User, bool]:
    """
    Get or create the demo user.

    Returns:
        Tuple of (user, created) where created is True if new record.
    """
    users = UserRepository(db)
    user = users.find_by_username(DEMO_EMAIL)
    if user:
        logger.info(f"Demo user already exists: {user.id}")
        return user, False

    user = users.create(
        username=DEMO_EMAIL,
        email=DEMO_EMAIL,
        password_hash=AuthService.hash_password(DEMO_PASSWORD),
    )
    logger.info(f"Created demo user {user.email} with ID {user.id}")
    return user, True


def seed_demo_data(db: DBSession) -> dict:
    """
    Seed the demo user and replace their assets with the sample portfolio.

    Safe to run repeatedly: the user is reused and the asset list is reset.

    Returns:
        Dict with the user and stats
    """
    user, created = create_demo_user(db)

    assets = AssetRepository(db)
    removed = assets.delete_by_owner(user.id)
    if removed:
        logger.info(f"Removed {removed} existing demo assets")

    for ticker, quantity, average_price, current_price in DEMO_ASSETS_DATA:
        assets.create(
            user.id,
            ticker=ticker.upper(),
            quantity=quantity,
            average_price=average_price,
            current_price=current_price,
        )

    db.commit()
    logger.info(f"Seeded {len(DEMO_ASSETS_DATA)} assets for {user.email}")

    return {
        "user": user,
        "user_created": created,
        "assets_removed": removed,
        "assets": assets.count_by_owner(user.id),
    }


if __name__ == "__main__":
    """Run as standalone script."""
    logging.basicConfig(level=logging.INFO)

    from tickerfolio.database import SessionLocal, create_tables

    create_tables()
    db = SessionLocal()
    try:
        result = seed_demo_data(db)
        print("\nDemo data seeding complete:")
        print(f"  User: {result['user'].email} (created: {result['user_created']})")
        print(f"  Assets: {result['assets']}")
        print(f"  Login with: {DEMO_EMAIL} / {DEMO_PASSWORD}")
    finally:
        db.close()
