"""Pydantic schemas for request/response validation."""

from app.schemas.league import LeagueConfig
from app.schemas.pick import (
    MemberPick,
    Pick,
    PickKey,
    PickResult,
    PickView,
    PickWriteRequest,
    SelectSideRequest,
    Side,
    WeeklyPicks,
)
from app.schemas.session import (
    SessionPhase,
    SessionScope,
    SessionSnapshot,
    SessionUpdateResult,
    SubmissionResult,
    SubmissionState,
)
from app.schemas.slate import PublishWindow, SlateBanner, SlateLine

__all__ = [
    "LeagueConfig",
    "MemberPick",
    "Pick",
    "PickKey",
    "PickResult",
    "PickView",
    "PickWriteRequest",
    "SelectSideRequest",
    "Side",
    "WeeklyPicks",
    "SessionPhase",
    "SessionScope",
    "SessionSnapshot",
    "SessionUpdateResult",
    "SubmissionResult",
    "SubmissionState",
    "PublishWindow",
    "SlateBanner",
    "SlateLine",
]
