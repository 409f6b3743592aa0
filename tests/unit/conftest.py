"""Shared fixtures."""

import pytest

from app.schemas.session import SessionScope
from tests.unit.fakes import LEAGUE, SEASON, USER, WEEK, FakePickDataService, make_line


@pytest.fixture
def scope() -> SessionScope:
    return SessionScope(league_id=LEAGUE, user_id=USER, season=SEASON, week=WEEK)


@pytest.fixture
def data_service() -> FakePickDataService:
    service = FakePickDataService()
    service.slates[(LEAGUE, SEASON, WEEK)] = [make_line(f"g{i}") for i in range(1, 9)]
    return service
