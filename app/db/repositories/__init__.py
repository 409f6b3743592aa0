"""Database repositories."""

from app.db.repositories.league import LeagueRepository
from app.db.repositories.pick import PickRepository
from app.db.repositories.slate import SlateRepository

__all__ = [
    "LeagueRepository",
    "PickRepository",
    "SlateRepository",
]
