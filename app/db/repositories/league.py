"""League repository."""

from typing import Optional

from sqlmodel import Session

from app.models.league import League


class LeagueRepository:
    """Repository for League database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, league_id: str) -> Optional[League]:
        return self.session.get(League, league_id)

    def create(self, league: League) -> League:
        self.session.add(league)
        self.session.commit()
        self.session.refresh(league)
        return league
