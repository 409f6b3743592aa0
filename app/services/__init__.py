"""Business logic services."""

from app.services.member_picks_service import MemberPicksService
from app.services.pick_session_service import PickSessionRegistry
from app.services.sql_data_service import SQLPickDataService

__all__ = [
    "MemberPicksService",
    "PickSessionRegistry",
    "SQLPickDataService",
]
