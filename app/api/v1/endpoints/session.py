"""
Pick session endpoints.

Stage picks for a week, submit them, or clear the selection.
"""

from fastapi import APIRouter, Depends, Path, status

from app.api.dependencies import get_current_user_id, get_session_registry
from app.pickem.session import PickSessionManager
from app.schemas.pick import SelectSideRequest
from app.schemas.session import SessionScope, SessionSnapshot, SessionUpdateResult, SubmissionResult
from app.services.pick_session_service import PickSessionRegistry

router = APIRouter()


def get_manager(league_id: str, season: int = Path(..., ge=1869), week: int = Path(..., ge=0, le=20),
                user_id: str = Depends(get_current_user_id),
                registry: PickSessionRegistry = Depends(get_session_registry), ) -> PickSessionManager:
    scope = SessionScope(league_id=league_id, user_id=user_id, season=season, week=week)
    return registry.get(scope)


@router.get("", summary="Get the current pick session.", response_model=SessionSnapshot, )
def get_session(manager: PickSessionManager = Depends(get_manager)):
    return manager.snapshot()


@router.post("/picks", summary="Select a side for a game.", response_model=SessionUpdateResult, )
def select_side(data: SelectSideRequest, manager: PickSessionManager = Depends(get_manager)):
    return manager.select_side(data.game_id, data.side, data.line_value)


@router.post("/submit", summary="Submit all selected picks.", response_model=SubmissionResult, )
def submit_all(manager: PickSessionManager = Depends(get_manager)):
    return manager.submit_all()


@router.delete("", summary="Clear selected picks.", status_code=status.HTTP_204_NO_CONTENT, )
def clear_session(manager: PickSessionManager = Depends(get_manager)):
    manager.clear_session()
