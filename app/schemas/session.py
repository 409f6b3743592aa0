"""
Pick-session schemas.

Results returned by :class:`app.pickem.session.PickSessionManager`.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.pick import Pick


class SessionScope(BaseModel):
    """The (league, user, season, week) a session belongs to."""

    league_id: str
    user_id: str
    season: int
    week: int

    class Config:
        frozen = True


class SubmissionState(str, Enum):
    """Outcome of the most recent submission attempt."""
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    FAILED = "failed"


class SessionPhase(str, Enum):
    """Where the session sits in its selection/submission cycle.

    * ``idle``       - no temporary picks
    * ``selecting``  - 1..pick_limit-1 picks
    * ``complete``   - picks == pick_limit
    * ``submitting`` - a submission is in flight
    * ``submitted``  - last batch persisted, nothing staged
    """
    IDLE = "idle"
    SELECTING = "selecting"
    COMPLETE = "complete"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class SessionUpdateResult(BaseModel):
    """Returned by ``select_side``."""

    pick: Pick
    count: int
    pick_limit: int
    capacity: int = Field(..., description="Weekly limit minus picks already submitted this week")
    is_complete: bool
    prompt_submit: bool = Field(..., description="Caller should offer submission now")
    replaced: bool = Field(False, description="An existing temporary pick for the game was overwritten")


class SubmissionResult(BaseModel):
    """Returned by ``submit_all``."""

    submitted_count: int
    game_ids: list[str]


class SessionSnapshot(BaseModel):
    """Read-only view of a session."""

    scope: SessionScope
    phase: SessionPhase
    submission_state: SubmissionState
    picks: list[Pick]
    count: int
    pick_limit: Optional[int]
    capacity: Optional[int]
    submitted_game_ids: list[str]
