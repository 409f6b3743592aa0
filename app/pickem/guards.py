"""
Slate guard: may this game be picked right now?

A game can be picked only if it is on the week's slate, its lines are
published with a spread for the chosen side, and it has not kicked off.
"""

from __future__ import annotations

import datetime
from typing import Optional

from app.pickem.errors import GameNotOnSlate, GameStarted, LinesUnavailable
from app.pickem.unlock import as_utc
from app.schemas.pick import Side
from app.schemas.slate import SlateLine


def spread_for(line: SlateLine, side: Side) -> Optional[float]:
    return line.spread_home if side == Side.HOME else line.spread_away


def lines_available(line: SlateLine) -> bool:
    """Lines are pickable unless explicitly withheld or both spreads are missing."""
    return line.lines_available and (line.spread_home is not None or line.spread_away is not None)


def has_started(line: SlateLine, now: datetime.datetime) -> bool:
    return as_utc(line.kickoff) <= as_utc(now)


def check_pickable(line: Optional[SlateLine], side: Side, now: datetime.datetime, game_id: str = "") -> SlateLine:
    """Raise if *side* of the game described by *line* cannot be picked at *now*."""
    if line is None:
        raise GameNotOnSlate(f"Game {game_id} is not on this week's slate", game_id=game_id)

    if not lines_available(line) or spread_for(line, side) is None:
        raise LinesUnavailable(f"Lines for {line.away} at {line.home} are not available yet", game_id=line.game_id)

    if has_started(line, now):
        raise GameStarted(f"{line.away} at {line.home} has already kicked off", game_id=line.game_id)

    return line
