"""
Slate repository.

Reads the per-league slate lines joined with their games.
"""

from sqlmodel import Session, select

from app.models.game import Game, LeagueSlateLine


class SlateRepository:
    """Repository for LeagueSlateLine database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_week(self, league_id: str, season: int, week: int) -> list[tuple[LeagueSlateLine, Game]]:
        statement = (select(LeagueSlateLine, Game).join(Game, Game.id == LeagueSlateLine.game_id).where(
            LeagueSlateLine.league_id == league_id, LeagueSlateLine.season == season,
            LeagueSlateLine.week == week, ).order_by(Game.kickoff, Game.id))
        return list(self.session.exec(statement).all())

    def add_game(self, game: Game) -> Game:
        self.session.add(game)
        self.session.commit()
        self.session.refresh(game)
        return game

    def add_line(self, line: LeagueSlateLine) -> LeagueSlateLine:
        self.session.add(line)
        self.session.commit()
        self.session.refresh(line)
        return line
