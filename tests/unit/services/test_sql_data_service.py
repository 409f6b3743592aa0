"""Tests for the SQL-backed pick data service on an in-memory SQLite database."""

import datetime

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

from app.db.init_db import init_db
from app.db.repositories import LeagueRepository, SlateRepository
from app.models.game import Game, LeagueSlateLine
from app.models.league import League
from app.pickem.errors import DataServiceError
from app.pickem.session import PickSessionManager
from app.schemas.pick import PickResult, PickWriteRequest, Side
from app.schemas.session import SessionScope
from app.schemas.slate import PublishWindow
from app.services.sql_data_service import SQLPickDataService

UTC = datetime.timezone.utc
TUESDAY = datetime.datetime(2025, 9, 9, 15, 0, tzinfo=UTC)
KICKOFF = datetime.datetime(2025, 9, 13, 19, 30, tzinfo=UTC)


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool)
    init_db(engine)
    with Session(engine) as session:
        LeagueRepository(session).create(League(id="L1", name="Big Ten Bros", pick_limit=3, push_points=0.5))
        slates = SlateRepository(session)
        for i in range(1, 5):
            slates.add_game(Game(id=f"g{i}", season=2025, week=3, home=f"Home {i}", away=f"Away {i}", kickoff=KICKOFF))
            slates.add_line(LeagueSlateLine(league_id="L1", season=2025, week=3, game_id=f"g{i}", spread_home=-3.5,
                                            spread_away=3.5, source="cfbd"))
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def service(engine):
    return SQLPickDataService(engine)


def _request(game_id, side=Side.HOME, line_value=-3.5, user_id="u1"):
    return PickWriteRequest(league_id="L1", user_id=user_id, season=2025, week=3, game_id=game_id, side=side,
                            line_value=line_value, unlock_at=datetime.datetime(2025, 9, 13, 17, 0, tzinfo=UTC))


class TestReads:
    def test_league_config(self, service):
        config = service.fetch_league_config("L1")
        assert config.pick_limit == 3
        assert config.push_points == 0.5
        assert config.name == "Big Ten Bros"

    def test_missing_league_raises(self, service):
        with pytest.raises(DataServiceError):
            service.fetch_league_config("nope")

    def test_slate_defaults_optional_fields(self, service):
        lines = service.fetch_slate("L1", 2025, 3)
        assert [line.game_id for line in lines] == ["g1", "g2", "g3", "g4"]
        assert all(line.lines_available for line in lines)
        assert all(line.publish_window == PublishWindow.MAIN for line in lines)
        assert lines[0].home == "Home 1"
        assert lines[0].kickoff == KICKOFF

    def test_slate_window_stored(self, engine, service):
        with Session(engine) as session:
            session.add(Game(id="g9", season=2025, week=3, home="H", away="A", kickoff=KICKOFF))
            session.commit()
            session.add(LeagueSlateLine(league_id="L1", season=2025, week=3, game_id="g9", lines_available=False,
                                        publish_window="EARLY"))
            session.commit()
        line = next(line for line in service.fetch_slate("L1", 2025, 3) if line.game_id == "g9")
        assert line.lines_available is False
        assert line.publish_window == PublishWindow.EARLY

    def test_other_week_slate_empty(self, service):
        assert service.fetch_slate("L1", 2025, 4) == []


class TestUpsert:
    def test_insert_then_read_back(self, service):
        assert service.upsert_picks([_request("g1"), _request("g2", Side.AWAY, 3.5)]) == 2

        picks = service.fetch_durable_picks("L1", "u1", 2025, 3)
        assert sorted(p.game_id for p in picks) == ["g1", "g2"]
        g2 = next(p for p in picks if p.game_id == "g2")
        assert g2.side == Side.AWAY
        assert g2.line_value == 3.5
        assert g2.locked is False
        assert g2.unlock_at == datetime.datetime(2025, 9, 13, 17, 0, tzinfo=UTC)

    def test_same_key_overwritten_not_duplicated(self, service):
        service.upsert_picks([_request("g1", Side.HOME, -3.5)])
        service.upsert_picks([_request("g1", Side.AWAY, 3.5)])

        picks = service.fetch_durable_picks("L1", "u1", 2025, 3)
        assert len(picks) == 1
        assert picks[0].side == Side.AWAY

    def test_users_are_separate_keys(self, service):
        service.upsert_picks([_request("g1"), _request("g1", user_id="u2")])
        assert len(service.fetch_durable_picks("L1", "u1", 2025, 3)) == 1
        assert len(service.fetch_durable_picks("L1", "u2", 2025, 3)) == 1

    def test_failed_batch_writes_nothing(self, service):
        # NULL in a non-nullable column fails the flush
        bad = _request("g2").model_copy(update={ "line_value": None })
        with pytest.raises(DataServiceError):
            service.upsert_picks([_request("g1"), bad])
        assert service.fetch_durable_picks("L1", "u1", 2025, 3) == []

    def test_delete(self, service):
        service.upsert_picks([_request("g1")])
        assert service.delete_pick("L1", "u1", 2025, 3, "g1") is True
        assert service.delete_pick("L1", "u1", 2025, 3, "g1") is False


class TestMemberPicks:
    def test_joined_with_games_newest_first(self, engine, service):
        with Session(engine) as session:
            session.add(Game(id="g10", season=2025, week=4, home="Home 10", away="Away 10", kickoff=KICKOFF))
            session.commit()
        service.upsert_picks([_request("g1")])
        service.upsert_picks([_request("g10").model_copy(update={ "week": 4 })])

        picks = service.fetch_member_picks("L1", "u1")
        assert [(p.week, p.game_id) for p in picks] == [(4, "g10"), (3, "g1")]
        assert picks[1].home == "Home 1"
        assert picks[1].result is None

    def test_graded_fields_read_back(self, engine, service):
        from app.models.pick import PickRecord

        service.upsert_picks([_request("g1")])
        with Session(engine) as session:
            record = session.exec(select(PickRecord)).one()
            record.result = "WIN"
            record.points = 1.0
            record.locked = True
            session.add(record)
            session.commit()

        pick = service.fetch_member_picks("L1", "u1")[0]
        assert pick.result == PickResult.WIN
        assert pick.points == 1.0
        assert pick.locked is True


class TestSessionAgainstDatabase:
    def test_full_week_round(self, service):
        scope = SessionScope(league_id="L1", user_id="u1", season=2025, week=3)
        manager = PickSessionManager(service, scope, clock=lambda: TUESDAY)
        manager.load()
        for game_id in ("g1", "g2", "g3"):
            manager.select_side(game_id, Side.HOME, -3.5)

        assert manager.submit_all().submitted_count == 3
        assert len(service.fetch_durable_picks("L1", "u1", 2025, 3)) == 3

        reopened = PickSessionManager(service, scope, clock=lambda: TUESDAY)
        reopened.load()
        assert reopened.session.capacity == 0
        assert sorted(reopened.session.submitted_game_ids) == ["g1", "g2", "g3"]
