"""
Abstract interface to the pick'em data service.

Storage of leagues, slates and picks is owned by the data service; the
pick session only talks to it through this interface.  Implementations
raise :class:`~app.pickem.errors.DataServiceError` (or
:class:`~app.pickem.errors.DataServiceTimeout`) on failure.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.schemas.league import LeagueConfig
from app.schemas.pick import MemberPick, Pick, PickWriteRequest
from app.schemas.slate import SlateLine


class PickDataService(ABC):
    """Operations the pick session consumes from the data service."""

    @abstractmethod
    def fetch_league_config(self, league_id: str) -> LeagueConfig:
        """Pick limit and scoring parameters of *league_id*."""
        ...

    @abstractmethod
    def fetch_durable_picks(self, league_id: str, user_id: str, season: int, week: int) -> list[Pick]:
        """Submitted picks of one user for one league/week."""
        ...

    @abstractmethod
    def fetch_slate(self, league_id: str, season: int, week: int) -> list[SlateLine]:
        """Published slate lines for one league/week."""
        ...

    @abstractmethod
    def upsert_picks(self, requests: list[PickWriteRequest], timeout: Optional[float] = None) -> int:
        """Write all *requests* or none of them.

        Rows are keyed on ``(league_id, user_id, season, week, game_id)``:
        an existing row for the key is overwritten, never duplicated.

        Returns:
            Number of rows written.
        """
        ...

    @abstractmethod
    def delete_pick(self, league_id: str, user_id: str, season: int, week: int, game_id: str) -> bool:
        """Delete one pick.  Returns ``False`` if there was nothing to delete."""
        ...

    @abstractmethod
    def fetch_member_picks(self, league_id: str, user_id: str) -> list[MemberPick]:
        """Every durable pick of *user_id* in *league_id*, joined with its game."""
        ...
