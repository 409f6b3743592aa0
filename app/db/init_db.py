"""
Database initialization.

Creates all tables.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

import app.db.base  # noqa: F401
from app.db.session import build_engine

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None) -> Engine:
    """
    Initialize database schema.

    Creates the leagues, games, league_slate_lines and picks tables
    if they do not exist.
    """
    engine = engine or build_engine()
    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")
    return engine


if __name__ == "__main__":
    init_db()
