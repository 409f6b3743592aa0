"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.league import League  # noqa: F401
from app.models.game import Game, LeagueSlateLine  # noqa: F401
from app.models.pick import PickRecord  # noqa: F401
