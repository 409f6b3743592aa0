"""
SQL-backed pick data service.

Implements :class:`~app.pickem.data_service.PickDataService` on top of the
SQLModel repositories.  Each call opens its own database session, so a
single instance can back long-lived pick sessions.  Rows are converted
to schemas here, which is where optional slate fields get their
defaults.
"""

import datetime
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlmodel import Session

from app.db.repositories.league import LeagueRepository
from app.db.repositories.pick import PickRepository
from app.db.repositories.slate import SlateRepository
from app.models.game import Game, LeagueSlateLine
from app.models.pick import PickRecord
from app.pickem.data_service import PickDataService
from app.pickem.errors import DataServiceError, DataServiceTimeout
from app.pickem.unlock import as_utc
from app.schemas.league import LeagueConfig
from app.schemas.pick import MemberPick, Pick, PickResult, PickWriteRequest, Side
from app.schemas.slate import PublishWindow, SlateLine

logger = logging.getLogger(__name__)

_PG_QUERY_CANCELED = "57014"


def _opt_utc(moment: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    return as_utc(moment) if moment is not None else None


class SQLPickDataService(PickDataService):
    """Pick data service over a SQLAlchemy engine."""

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with Session(self.engine) as session:
                yield session
        except OperationalError as e:
            if getattr(e.orig, "pgcode", None) == _PG_QUERY_CANCELED:
                raise DataServiceTimeout(f"Database statement timed out: {e}") from e
            raise DataServiceError(f"Database unavailable: {e}") from e
        except SQLAlchemyError as e:
            raise DataServiceError(f"Database error: {e}") from e

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch_league_config(self, league_id: str) -> LeagueConfig:
        with self._session() as session:
            league = LeagueRepository(session).get_by_id(league_id)
            if league is None:
                raise DataServiceError(f"League {league_id} not found")
            return LeagueConfig(league_id=league.id, name=league.name, pick_limit=league.pick_limit,
                                push_points=league.push_points, )

    def fetch_durable_picks(self, league_id: str, user_id: str, season: int, week: int) -> list[Pick]:
        with self._session() as session:
            records = PickRepository(session).get_by_user_week(league_id, user_id, season, week)
            return [self._to_pick(r) for r in records]

    def fetch_slate(self, league_id: str, season: int, week: int) -> list[SlateLine]:
        with self._session() as session:
            rows = SlateRepository(session).get_week(league_id, season, week)
            return [self._to_slate_line(line, game) for line, game in rows]

    def fetch_member_picks(self, league_id: str, user_id: str) -> list[MemberPick]:
        with self._session() as session:
            rows = PickRepository(session).get_by_member(league_id, user_id)
            return [self._to_member_pick(record, game) for record, game in rows]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def upsert_picks(self, requests: list[PickWriteRequest], timeout: Optional[float] = None) -> int:
        rows = [{ "league_id": r.league_id, "user_id": r.user_id, "season": r.season, "week": r.week,
                  "game_id": r.game_id, "side": r.side.value, "line_value": r.line_value, "locked": False,
                  "unlock_at": r.unlock_at, } for r in requests]

        with self._session() as session:
            if timeout and session.get_bind().dialect.name == "postgresql":
                session.connection().execute(text(f"SET LOCAL statement_timeout = {int(timeout * 1000)}"))
            try:
                written = PickRepository(session).upsert_many(rows)
                session.commit()
            except SQLAlchemyError:
                session.rollback()
                raise

        logger.debug("Upserted %d picks", written)
        return written

    def delete_pick(self, league_id: str, user_id: str, season: int, week: int, game_id: str) -> bool:
        with self._session() as session:
            return PickRepository(session).delete(league_id, user_id, season, week, game_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _pick_fields(record: PickRecord) -> dict:
        return { "league_id": record.league_id, "user_id": record.user_id, "season": record.season,
                 "week": record.week, "game_id": record.game_id, "side": Side(record.side),
                 "line_value": record.line_value, "locked": record.locked, "unlock_at": _opt_utc(record.unlock_at),
                 "result": PickResult(record.result) if record.result else None, "points": record.points,
                 "created_at": _opt_utc(record.created_at), "updated_at": _opt_utc(record.updated_at), }

    @classmethod
    def _to_pick(cls, record: PickRecord) -> Pick:
        return Pick(**cls._pick_fields(record))

    @classmethod
    def _to_member_pick(cls, record: PickRecord, game: Game) -> MemberPick:
        return MemberPick(**cls._pick_fields(record), home=game.home, away=game.away, kickoff=_opt_utc(game.kickoff),
                          status=game.status, )

    @staticmethod
    def _to_slate_line(line: LeagueSlateLine, game: Game) -> SlateLine:
        window = PublishWindow.MAIN
        if line.publish_window:
            try:
                window = PublishWindow(line.publish_window)
            except ValueError:
                logger.warning("Unknown publish window %r on game %s, using MAIN", line.publish_window, game.id)

        return SlateLine(league_id=line.league_id, season=line.season, week=line.week, game_id=line.game_id,
                         home=game.home, away=game.away, kickoff=as_utc(game.kickoff), status=game.status,
                         spread_home=line.spread_home, spread_away=line.spread_away, source=line.source,
                         snapped_at=_opt_utc(line.snapped_at),
                         lines_available=True if line.lines_available is None else line.lines_available,
                         publish_window=window, lines_published_at=_opt_utc(line.lines_published_at), )
