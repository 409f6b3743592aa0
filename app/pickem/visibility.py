"""
Pick visibility policy.

Decides whether a pick's selection details may be shown to a viewer:

1. the owner always sees their own pick,
2. a pick without ``unlock_at`` has no restriction,
3. anyone else sees it once ``now >= unlock_at``.

The policy is pure; ``now`` is always passed in.
"""

from __future__ import annotations

import datetime
from typing import Optional, Protocol

from app.pickem.unlock import as_utc
from app.schemas.pick import MemberPick, Pick, PickView


class VisibilitySubject(Protocol):
    user_id: str
    unlock_at: Optional[datetime.datetime]


def is_visible(pick: VisibilitySubject, viewer_user_id: Optional[str], now: datetime.datetime) -> bool:
    """Whether *viewer_user_id* may see the side/line/result of *pick* at *now*."""
    if viewer_user_id is not None and viewer_user_id == pick.user_id:
        return True
    if pick.unlock_at is None:
        return True
    return as_utc(now) >= as_utc(pick.unlock_at)


def redact_pick(pick: Pick, viewer_user_id: Optional[str], now: datetime.datetime) -> PickView:
    """Build the :class:`PickView` *viewer_user_id* is allowed to see."""
    visible = is_visible(pick, viewer_user_id, now)
    view = PickView(game_id=pick.game_id, season=pick.season, week=pick.week, locked=pick.locked,
                    unlock_at=pick.unlock_at, visible=visible, )

    if isinstance(pick, MemberPick):
        view.home = pick.home
        view.away = pick.away
        view.kickoff = pick.kickoff

    if visible:
        view.side = pick.side
        view.line_value = pick.line_value
        view.result = pick.result
        view.points = pick.points
    return view
