"""API tests: pick session routes, member picks, banner and deletion."""

import datetime

import pytest
from fastapi.testclient import TestClient

from app.core.security import StaticTokenIdentityProvider
from app.main import create_app
from app.pickem.errors import DataServiceError
from app.schemas.slate import PublishWindow
from tests.unit.fakes import LEAGUE, SEASON, TUESDAY, USER, UTC, WEEK, make_line

OTHER = "user-2"
TOKENS = { "token-1": USER, "token-2": OTHER }
SESSION_URL = f"/api/v1/leagues/{LEAGUE}/seasons/{SEASON}/weeks/{WEEK}/session"


def _auth(token="token-1"):
    return { "Authorization": f"Bearer {token}" }


def _pick(game_id="g1", side="HOME", line_value=-3.5):
    return { "game_id": game_id, "side": side, "line_value": line_value }


@pytest.fixture
def client(data_service):
    app = create_app(data_service=data_service, identity_provider=StaticTokenIdentityProvider(TOKENS),
                     clock=lambda: TUESDAY)
    with TestClient(app) as client:
        yield client


class TestHealth:
    def test_root_and_health(self, client):
        assert client.get("/").json()["status"] == "healthy"
        assert client.get("/health").json()["service"] == "pickem-api"


class TestAuth:
    def test_missing_token(self, client):
        response = client.get(SESSION_URL)
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_unknown_token(self, client):
        assert client.get(SESSION_URL, headers=_auth("nope")).status_code == 401


class TestSessionRoutes:
    def test_empty_session(self, client):
        body = client.get(SESSION_URL, headers=_auth()).json()
        assert body["phase"] == "idle"
        assert body["pick_limit"] == 5
        assert body["capacity"] == 5
        assert body["picks"] == []

    def test_select_side(self, client):
        response = client.post(f"{SESSION_URL}/picks", json=_pick(), headers=_auth())
        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["replaced"] is False
        assert body["pick"]["locked"] is False
        unlock_at = datetime.datetime.fromisoformat(body["pick"]["unlock_at"].replace("Z", "+00:00"))
        assert unlock_at == datetime.datetime(2025, 9, 13, 17, 0, tzinfo=UTC)

    def test_invalid_side_rejected(self, client):
        response = client.post(f"{SESSION_URL}/picks", json=_pick(side="OVER"), headers=_auth())
        assert response.status_code == 422

    def test_game_not_on_slate(self, client):
        response = client.post(f"{SESSION_URL}/picks", json=_pick("g99"), headers=_auth())
        assert response.status_code == 422
        assert response.json()["code"] == "game_not_on_slate"

    def test_limit_reached(self, client, data_service):
        data_service.configs[LEAGUE] = data_service.configs[LEAGUE].model_copy(update={ "pick_limit": 2 })
        client.post(f"{SESSION_URL}/picks", json=_pick("g1"), headers=_auth())
        second = client.post(f"{SESSION_URL}/picks", json=_pick("g2"), headers=_auth()).json()
        assert second["is_complete"] is True
        assert second["prompt_submit"] is True

        response = client.post(f"{SESSION_URL}/picks", json=_pick("g3"), headers=_auth())
        assert response.status_code == 409
        assert response.json()["code"] == "limit_reached"
        assert response.json()["context"]["pick_limit"] == 2

    def test_submit_then_already_submitted(self, client, data_service):
        client.post(f"{SESSION_URL}/picks", json=_pick("g1"), headers=_auth())
        client.post(f"{SESSION_URL}/picks", json=_pick("g2", "AWAY", 3.5), headers=_auth())

        response = client.post(f"{SESSION_URL}/submit", headers=_auth())
        assert response.status_code == 200
        assert response.json() == { "submitted_count": 2, "game_ids": ["g1", "g2"] }
        assert len(data_service.picks) == 2

        snapshot = client.get(SESSION_URL, headers=_auth()).json()
        assert snapshot["phase"] == "submitted"
        assert snapshot["capacity"] == 3

        response = client.post(f"{SESSION_URL}/picks", json=_pick("g1", "AWAY", 3.5), headers=_auth())
        assert response.status_code == 409
        assert response.json()["code"] == "already_submitted"

    def test_submit_empty(self, client):
        response = client.post(f"{SESSION_URL}/submit", headers=_auth())
        assert response.status_code == 422
        assert response.json()["code"] == "empty_session"

    def test_failed_submit_keeps_picks(self, client, data_service):
        client.post(f"{SESSION_URL}/picks", json=_pick("g1"), headers=_auth())
        data_service.fail_upsert = DataServiceError("connection reset")

        response = client.post(f"{SESSION_URL}/submit", headers=_auth())
        assert response.status_code == 502
        assert response.json()["code"] == "submission_failed"

        snapshot = client.get(SESSION_URL, headers=_auth()).json()
        assert snapshot["submission_state"] == "failed"
        assert [p["game_id"] for p in snapshot["picks"]] == ["g1"]
        assert data_service.picks == {}

    def test_clear(self, client):
        client.post(f"{SESSION_URL}/picks", json=_pick("g1"), headers=_auth())
        assert client.delete(SESSION_URL, headers=_auth()).status_code == 204
        assert client.get(SESSION_URL, headers=_auth()).json()["count"] == 0

    def test_sessions_are_per_user(self, client):
        client.post(f"{SESSION_URL}/picks", json=_pick("g1"), headers=_auth())
        assert client.get(SESSION_URL, headers=_auth("token-2")).json()["count"] == 0

    def test_config_unavailable(self, client, data_service):
        data_service.fail_config = True
        response = client.post(f"{SESSION_URL}/picks", json=_pick("g1"), headers=_auth())
        assert response.status_code == 503
        assert response.json()["code"] == "config_unavailable"


class TestMemberPicks:
    URL = f"/api/v1/leagues/{LEAGUE}/members/{OTHER}/picks"

    def test_redacted_before_unlock(self, client, data_service):
        data_service.add_durable("g1", user_id=OTHER, unlock_at=datetime.datetime(2025, 9, 13, 17, 0, tzinfo=UTC))

        weeks = client.get(self.URL, headers=_auth()).json()
        assert len(weeks) == 1
        assert weeks[0]["hidden_count"] == 1
        pick = weeks[0]["picks"][0]
        assert pick["visible"] is False
        assert pick["side"] is None
        assert pick["line_value"] is None

    def test_owner_sees_own_picks(self, client, data_service):
        data_service.add_durable("g1", user_id=OTHER, unlock_at=datetime.datetime(2025, 9, 13, 17, 0, tzinfo=UTC))

        pick = client.get(self.URL, headers=_auth("token-2")).json()[0]["picks"][0]
        assert pick["visible"] is True
        assert pick["side"] == "HOME"


class TestSlateBanner:
    URL = f"/api/v1/leagues/{LEAGUE}/slate/{SEASON}/{WEEK}/banner"

    def test_no_banner_when_lines_are_out(self, client):
        response = client.get(self.URL, headers=_auth())
        assert response.status_code == 200
        assert response.json() is None

    def test_banner_while_lines_withheld(self, client, data_service):
        data_service.slates[(LEAGUE, SEASON, WEEK)] = [
            make_line("g1", lines_available=False, publish_window=PublishWindow.EARLY)]

        body = client.get(self.URL, headers=_auth()).json()
        assert body["window"] == "EARLY"
        assert body["message"] == f"Week {WEEK} MACtion lines drop Tue 10:00 AM ET"


class TestDeletePick:
    def _url(self, game_id):
        return f"/api/v1/leagues/{LEAGUE}/picks/{SEASON}/{WEEK}/{game_id}"

    def test_delete_own_pick_frees_capacity(self, client, data_service):
        client.post(f"{SESSION_URL}/picks", json=_pick("g1"), headers=_auth())
        client.post(f"{SESSION_URL}/submit", headers=_auth())
        assert client.get(SESSION_URL, headers=_auth()).json()["capacity"] == 4

        assert client.delete(self._url("g1"), headers=_auth()).status_code == 204
        assert data_service.picks == {}
        assert client.get(SESSION_URL, headers=_auth()).json()["capacity"] == 5

    def test_locked_pick(self, client, data_service):
        data_service.add_durable("g1", locked=True)
        response = client.delete(self._url("g1"), headers=_auth())
        assert response.status_code == 403
        assert response.json()["code"] == "pick_locked"

    def test_missing_pick(self, client):
        response = client.delete(self._url("g5"), headers=_auth())
        assert response.status_code == 404
