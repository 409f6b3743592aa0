"""
Slate schemas.

A slate line is the snapshot of a game and its spreads published for one
league/week.  ``lines_available`` and ``publish_window`` are optional in
storage; their defaults are applied here, at the data-service boundary.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PublishWindow(str, Enum):
    """When the lines for a group of games are released."""
    EARLY = "EARLY"
    MAIN = "MAIN"
    LABORDAY = "LABORDAY"


class SlateLine(BaseModel):
    """One game on a league's weekly slate."""

    league_id: str
    season: int
    week: int
    game_id: str

    home: str
    away: str
    kickoff: datetime.datetime
    status: str = "scheduled"

    spread_home: Optional[float] = None
    spread_away: Optional[float] = None
    source: str = ""
    snapped_at: Optional[datetime.datetime] = None

    lines_available: bool = Field(True, description="False until the window's lines are published")
    publish_window: PublishWindow = PublishWindow.MAIN
    lines_published_at: Optional[datetime.datetime] = None

    class Config:
        from_attributes = True


class SlateBanner(BaseModel):
    """"Lines drop" notice for a slate whose lines are not out yet."""

    week: int
    window: PublishWindow
    drop_label: str
    message: str
    subtitle: str
    window_counts: dict[PublishWindow, int]
