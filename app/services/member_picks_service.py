"""
Member picks service.

Builds the week-by-week list of a league member's picks as a given
viewer may see it, and deletes a viewer's own unlocked picks.
"""

import datetime
import logging

from app.pickem.data_service import PickDataService
from app.pickem.errors import PickLocked, PickNotFound
from app.pickem.visibility import redact_pick
from app.schemas.pick import PickKey, PickView, WeeklyPicks

logger = logging.getLogger(__name__)


class MemberPicksService:
    """Service for reading and deleting durable picks."""

    def __init__(self, data_service: PickDataService):
        self.data_service = data_service

    def weekly_picks(self, league_id: str, member_id: str, viewer_id: str,
                     now: datetime.datetime, ) -> list[WeeklyPicks]:
        """Member's picks grouped by season/week, newest first, redacted for *viewer_id*."""
        picks = self.data_service.fetch_member_picks(league_id, member_id)

        grouped: dict[tuple[int, int], list[PickView]] = {}
        for pick in picks:
            grouped.setdefault((pick.season, pick.week), []).append(redact_pick(pick, viewer_id, now))

        weeks = [WeeklyPicks(season=season, week=week, picks=views,
                             hidden_count=sum(1 for v in views if not v.visible), ) for (season, week), views in
                 grouped.items()]
        weeks.sort(key=lambda w: (w.season, w.week), reverse=True)
        return weeks

    def delete_pick(self, viewer_id: str, key: PickKey) -> None:
        """Delete one of the viewer's own picks, unless it is locked or already graded."""
        if key.user_id != viewer_id:
            raise PickNotFound()

        durable = self.data_service.fetch_durable_picks(key.league_id, key.user_id, key.season, key.week)
        pick = next((p for p in durable if p.game_id == key.game_id), None)
        if pick is None:
            raise PickNotFound()
        if pick.locked:
            raise PickLocked()
        if pick.result is not None:
            raise PickLocked("This pick has been graded and cannot be deleted.", result=pick.result.value)

        if not self.data_service.delete_pick(key.league_id, key.user_id, key.season, key.week, key.game_id):
            raise PickNotFound()
        logger.info("Deleted pick %s/%s week %d game %s", key.league_id, key.user_id, key.week, key.game_id)
