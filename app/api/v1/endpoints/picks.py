"""
Pick endpoints.

Member pick history (redacted for the viewer), slate banner, and
deletion of one's own unlocked picks.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_current_user_id, get_data_service, get_now, get_session_registry
from app.pickem.data_service import PickDataService
from app.pickem.windows import slate_banner
from app.schemas.pick import PickKey, WeeklyPicks
from app.schemas.session import SessionScope
from app.schemas.slate import SlateBanner
from app.services.member_picks_service import MemberPicksService
from app.services.pick_session_service import PickSessionRegistry

router = APIRouter()


@router.get("/{league_id}/members/{member_id}/picks", summary="List a member's picks by week.",
            response_model=list[WeeklyPicks], )
def member_picks(league_id: str, member_id: str, viewer_id: str = Depends(get_current_user_id),
                 data_service: PickDataService = Depends(get_data_service),
                 now: datetime.datetime = Depends(get_now), ):
    service = MemberPicksService(data_service)
    return service.weekly_picks(league_id, member_id, viewer_id, now)


@router.get("/{league_id}/slate/{season}/{week}/banner", summary="Lines-drop banner for a week.",
            response_model=Optional[SlateBanner], )
def get_slate_banner(league_id: str, season: int, week: int, _: str = Depends(get_current_user_id),
                     data_service: PickDataService = Depends(get_data_service), ):
    return slate_banner(data_service.fetch_slate(league_id, season, week), week)


@router.delete("/{league_id}/picks/{season}/{week}/{game_id}", summary="Delete one of your unlocked picks.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_pick(league_id: str, season: int, week: int, game_id: str, user_id: str = Depends(get_current_user_id),
                data_service: PickDataService = Depends(get_data_service),
                registry: PickSessionRegistry = Depends(get_session_registry), ):
    key = PickKey(league_id=league_id, user_id=user_id, season=season, week=week, game_id=game_id)
    MemberPicksService(data_service).delete_pick(user_id, key)
    # The week's session must re-read its submitted picks
    registry.discard(SessionScope(league_id=league_id, user_id=user_id, season=season, week=week))
