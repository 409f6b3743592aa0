"""
Pick schemas.

A pick is identified by ``(league_id, user_id, season, week, game_id)``.
The same shape is used for temporary (in-session) picks and for durable
picks read back from storage; only the data service decides which is which.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Side(str, Enum):
    """Which side of the spread the user took."""
    HOME = "HOME"
    AWAY = "AWAY"


class PickResult(str, Enum):
    """Grading outcome, written by the external grading process."""
    WIN = "WIN"
    LOSS = "LOSS"
    PUSH = "PUSH"


class PickKey(BaseModel):
    """Composite identity of a pick."""

    league_id: str
    user_id: str
    season: int = Field(..., ge=1869)
    week: int = Field(..., ge=0, le=20)
    game_id: str


class Pick(PickKey):
    """A user's selection for one game in one league/week."""

    side: Side
    line_value: float = Field(..., description="Spread captured at selection time")
    locked: bool = False
    unlock_at: Optional[datetime.datetime] = Field(
        None, description="When the pick becomes visible to other members (UTC)"
    )
    result: Optional[PickResult] = None
    points: Optional[float] = None
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None

    class Config:
        from_attributes = True

    @property
    def key(self) -> PickKey:
        return PickKey(league_id=self.league_id, user_id=self.user_id, season=self.season, week=self.week,
                       game_id=self.game_id)


class PickWriteRequest(PickKey):
    """Row sent to ``upsert_picks``.

    Server-managed fields (result, points, timestamps) are omitted and
    ``locked`` is always written as ``False``: locking belongs to an
    external process, not to submission.
    """

    side: Side
    line_value: float
    unlock_at: Optional[datetime.datetime] = None

    @property
    def locked(self) -> bool:
        return False

    @classmethod
    def from_pick(cls, pick: Pick) -> "PickWriteRequest":
        return cls(league_id=pick.league_id, user_id=pick.user_id, season=pick.season, week=pick.week,
                   game_id=pick.game_id, side=pick.side, line_value=pick.line_value, unlock_at=pick.unlock_at)


class MemberPick(Pick):
    """Durable pick joined with the game it was made on."""

    home: str
    away: str
    kickoff: Optional[datetime.datetime] = None
    status: Optional[str] = None


class PickView(BaseModel):
    """Pick as shown to a particular viewer.

    When ``visible`` is ``False`` the selection details are ``None``; only
    existence, the teams and the unlock time are disclosed.
    """

    game_id: str
    season: int
    week: int
    home: Optional[str] = None
    away: Optional[str] = None
    kickoff: Optional[datetime.datetime] = None
    locked: bool
    unlock_at: Optional[datetime.datetime] = None
    visible: bool

    side: Optional[Side] = None
    line_value: Optional[float] = None
    result: Optional[PickResult] = None
    points: Optional[float] = None


class WeeklyPicks(BaseModel):
    """A member's picks for one season/week as seen by a viewer."""

    season: int
    week: int
    picks: list[PickView]
    hidden_count: int = Field(0, description="Picks still redacted for this viewer")


class SelectSideRequest(BaseModel):
    """Body of the select-side endpoint."""

    game_id: str = Field(..., min_length=1)
    side: Side
    line_value: float
