"""
League configuration schemas.

Only the parts of a league the pick session consumes.
"""

from pydantic import BaseModel, Field

DEFAULT_PICK_LIMIT = 5
DEFAULT_PUSH_POINTS = 0.5


class LeagueConfig(BaseModel):
    """Per-league rules read by the pick session."""

    league_id: str
    name: str = ""
    pick_limit: int = Field(DEFAULT_PICK_LIMIT, ge=1, le=50, description="Picks allowed per week")
    push_points: float = Field(DEFAULT_PUSH_POINTS, ge=0.0, description="Points awarded for a push")

    class Config:
        from_attributes = True
