"""Database initialization script."""

import logging

from tickerfolio.database import create_tables

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_tables()
    logger.info("Tables created successfully")
