"""
Pick database model.

One row per ``(league_id, user_id, season, week, game_id)``; the unique
constraint is the key submissions upsert on.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class PickRecord(SQLModel, table=True):
    """A submitted pick."""

    __tablename__ = "picks"
    __table_args__ = (
        UniqueConstraint("league_id", "user_id", "season", "week", "game_id", name="uq_pick_league_user_week_game"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    league_id: str = Field(foreign_key="leagues.id", nullable=False, index=True, max_length=36)
    user_id: str = Field(nullable=False, index=True, max_length=36)
    season: int = Field(nullable=False)
    week: int = Field(nullable=False)
    game_id: str = Field(foreign_key="games.id", nullable=False, max_length=64)

    side: str = Field(nullable=False, max_length=4)
    line_value: float = Field(nullable=False)
    locked: bool = Field(default=False, nullable=False)
    unlock_at: Optional[datetime.datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True)))

    # Written by grading
    result: Optional[str] = Field(default=None, max_length=4)
    points: Optional[float] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=_utcnow,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime.datetime = Field(default_factory=_utcnow,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
