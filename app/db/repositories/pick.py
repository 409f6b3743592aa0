"""
Pick repository.

Handles database operations for :class:`PickRecord`.  ``upsert_many``
stages every row in the current transaction and leaves the commit to
the caller, so a batch is written all-or-nothing.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.game import Game
from app.models.pick import PickRecord


class PickRepository:
    """Repository for PickRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_key(self, league_id: str, user_id: str, season: int, week: int, game_id: str, ) -> Optional[PickRecord]:
        statement = select(PickRecord).where(PickRecord.league_id == league_id, PickRecord.user_id == user_id,
                                             PickRecord.season == season, PickRecord.week == week,
                                             PickRecord.game_id == game_id, )
        return self.session.exec(statement).first()

    def get_by_user_week(self, league_id: str, user_id: str, season: int, week: int) -> list[PickRecord]:
        statement = (select(PickRecord).where(PickRecord.league_id == league_id, PickRecord.user_id == user_id,
                                              PickRecord.season == season, PickRecord.week == week, ).order_by(
            PickRecord.created_at, PickRecord.id))
        return list(self.session.exec(statement).all())

    def get_by_member(self, league_id: str, user_id: str) -> list[tuple[PickRecord, Game]]:
        """All picks of a member with their games, newest week first."""
        statement = (select(PickRecord, Game).join(Game, Game.id == PickRecord.game_id).where(
            PickRecord.league_id == league_id, PickRecord.user_id == user_id, ).order_by(PickRecord.season.desc(),
                                                                                          PickRecord.week.desc(),
                                                                                          PickRecord.created_at.desc()))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def upsert_many(self, rows: list[dict]) -> int:
        """Insert or overwrite each row by its composite key.  Does not commit."""
        now = datetime.datetime.now(datetime.timezone.utc)
        for row in rows:
            existing = self.get_by_key(row["league_id"], row["user_id"], row["season"], row["week"], row["game_id"])
            if existing is None:
                self.session.add(PickRecord(**row, created_at=now, updated_at=now))
                continue
            for field in ("side", "line_value", "locked", "unlock_at"):
                setattr(existing, field, row[field])
            existing.updated_at = now
            self.session.add(existing)
        self.session.flush()
        return len(rows)

    def delete(self, league_id: str, user_id: str, season: int, week: int, game_id: str) -> bool:
        entry = self.get_by_key(league_id, user_id, season, week, game_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
