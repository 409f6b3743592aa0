"""
Database session management.

Provides the SQLModel engine.
"""

from sqlalchemy.engine import Engine
from sqlmodel import create_engine

from app.core.config import settings


def build_engine(url: str = settings.DATABASE_URL) -> Engine:
    """Create an engine for *url* with the pool settings used in production."""
    if url.startswith("sqlite"):
        return create_engine(url, echo=settings.DEBUG, connect_args={ "check_same_thread": False })
    return create_engine(
        url,
        echo=settings.DEBUG,  # Log SQL queries in debug mode
        pool_pre_ping=True,   # Verify connections before using
        pool_size=5,          # Connection pool size
        max_overflow=10       # Max connections beyond pool_size
    )
