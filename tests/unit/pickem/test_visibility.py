"""Tests for the pick visibility policy and redaction."""

import datetime

import pytest

from app.pickem.unlock import compute_unlock_at
from app.pickem.visibility import is_visible, redact_pick
from app.schemas.pick import MemberPick, Pick, PickResult, Side
from tests.unit.fakes import LEAGUE, SEASON, TUESDAY, UTC, WEEK

OWNER = "owner"
OTHER = "other"
UNLOCK = datetime.datetime(2025, 9, 13, 17, 0, tzinfo=UTC)


def _pick(unlock_at=UNLOCK, **fields) -> Pick:
    values = dict(league_id=LEAGUE, user_id=OWNER, season=SEASON, week=WEEK, game_id="g1", side=Side.AWAY,
                  line_value=3.5, locked=True, unlock_at=unlock_at, result=PickResult.WIN, points=1.0)
    values.update(fields)
    return Pick(**values)


# ======================================================================
# is_visible
# ======================================================================


class TestIsVisible:
    def test_owner_always_sees_own_pick(self):
        pick = _pick()
        for now in (TUESDAY, UNLOCK - datetime.timedelta(seconds=1), UNLOCK, UNLOCK + datetime.timedelta(days=30)):
            assert is_visible(pick, OWNER, now) is True

    def test_no_unlock_time_means_no_restriction(self):
        assert is_visible(_pick(unlock_at=None), OTHER, TUESDAY) is True

    @pytest.mark.parametrize(
        "offset, expected",
        [
            (datetime.timedelta(days=-4), False),
            (datetime.timedelta(hours=-1), False),
            (datetime.timedelta(microseconds=-1), False),
            (datetime.timedelta(0), True),
            (datetime.timedelta(microseconds=1), True),
            (datetime.timedelta(days=10), True),
        ],
    )
    def test_monotonic_around_unlock(self, offset, expected):
        assert is_visible(_pick(), OTHER, UNLOCK + offset) is expected

    def test_anonymous_viewer_treated_as_non_owner(self):
        assert is_visible(_pick(), None, TUESDAY) is False

    def test_naive_times_read_as_utc(self):
        pick = _pick(unlock_at=UNLOCK.replace(tzinfo=None))
        assert is_visible(pick, OTHER, datetime.datetime(2025, 9, 13, 16, 59)) is False
        assert is_visible(pick, OTHER, datetime.datetime(2025, 9, 13, 17, 0)) is True

    def test_other_zone_compares_by_instant(self):
        eastern_noon = datetime.datetime(2025, 9, 13, 12, 0, tzinfo=datetime.timezone(datetime.timedelta(hours=-5)))
        assert is_visible(_pick(), OTHER, eastern_noon) is True

    def test_scenario_d_tuesday_pick(self):
        unlock_at = compute_unlock_at(TUESDAY)
        pick = _pick(unlock_at=unlock_at)
        wednesday = datetime.datetime(2025, 9, 10, 18, 0, tzinfo=UTC)
        saturday_1pm = datetime.datetime(2025, 9, 13, 18, 0, tzinfo=UTC)  # 13:00 at UTC-5

        assert is_visible(pick, OTHER, wednesday) is False
        assert is_visible(pick, OTHER, saturday_1pm) is True


# ======================================================================
# redact_pick
# ======================================================================


class TestRedactPick:
    def test_hidden_fields_removed(self):
        view = redact_pick(_pick(), OTHER, TUESDAY)
        assert view.visible is False
        assert view.side is None
        assert view.line_value is None
        assert view.result is None
        assert view.points is None
        assert view.unlock_at == UNLOCK
        assert view.locked is True
        assert view.game_id == "g1"

    def test_visible_fields_kept(self):
        view = redact_pick(_pick(), OTHER, UNLOCK)
        assert view.visible is True
        assert view.side == Side.AWAY
        assert view.line_value == 3.5
        assert view.result == PickResult.WIN
        assert view.points == 1.0

    def test_member_pick_keeps_teams_when_hidden(self):
        kickoff = datetime.datetime(2025, 9, 13, 19, 30, tzinfo=UTC)
        pick = MemberPick(**_pick().model_dump(), home="Michigan", away="Ohio State", kickoff=kickoff)
        view = redact_pick(pick, OTHER, TUESDAY)
        assert (view.home, view.away, view.kickoff) == ("Michigan", "Ohio State", kickoff)
        assert view.side is None
