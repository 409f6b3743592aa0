"""
Game and slate-line database models.

``games`` is the shared schedule; ``league_slate_lines`` is the
per-league snapshot of games and spreads written by ``publish_week``.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


class Game(SQLModel, table=True):
    """A scheduled college-football game."""

    __tablename__ = "games"

    id: str = Field(primary_key=True, max_length=64)
    season: int = Field(nullable=False, index=True)
    week: int = Field(nullable=False, index=True)
    home: str = Field(nullable=False, max_length=100)
    away: str = Field(nullable=False, max_length=100)
    kickoff: datetime.datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    status: str = Field(default="scheduled", max_length=32)


class LeagueSlateLine(SQLModel, table=True):
    """Spreads published for one game in one league/week."""

    __tablename__ = "league_slate_lines"
    __table_args__ = (UniqueConstraint("league_id", "season", "week", "game_id", name="uq_slate_league_week_game"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    league_id: str = Field(foreign_key="leagues.id", nullable=False, index=True, max_length=36)
    season: int = Field(nullable=False)
    week: int = Field(nullable=False)
    game_id: str = Field(foreign_key="games.id", nullable=False, max_length=64)

    spread_home: Optional[float] = Field(default=None)
    spread_away: Optional[float] = Field(default=None)
    source: str = Field(default="", max_length=64)
    snapped_at: Optional[datetime.datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True)))

    # Windowing (nullable in storage; defaults applied by the data service)
    lines_available: Optional[bool] = Field(default=None)
    publish_window: Optional[str] = Field(default=None, max_length=16)
    lines_published_at: Optional[datetime.datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True)))
