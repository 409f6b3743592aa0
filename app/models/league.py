"""
League database model.

Only the league settings the pick session reads are modelled here;
membership and roles live with the data service.
"""

import datetime
import uuid

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class League(SQLModel, table=True):
    """A pick'em league and its weekly rules."""

    __tablename__ = "leagues"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    name: str = Field(nullable=False, max_length=255)
    invite_code: str = Field(default="", max_length=32, index=True)
    created_by: str = Field(default="", max_length=36)

    # Weekly rules
    pick_limit: int = Field(default=5, ge=1, le=50, nullable=False)
    push_points: float = Field(default=0.5, nullable=False)

    created_at: datetime.datetime = Field(default_factory=_utcnow)
