"""SQLModel database models."""

from app.models.league import League
from app.models.game import Game, LeagueSlateLine
from app.models.pick import PickRecord

__all__ = [
    "League",
    "Game",
    "LeagueSlateLine",
    "PickRecord",
]
