"""
Pick session: staging a user's weekly picks before submission.

A :class:`PickSession` holds the *temporary* picks of one user for one
league/season/week.  Nothing is persisted until :meth:`PickSessionManager.submit_all`
writes the whole session in a single all-or-nothing call.

Rules
-----

1. **Submitted picks are final.**  A game with a durable pick cannot be
   picked again (``AlreadySubmitted``).
2. **Pick limit.**  A session holds at most ``pick_limit`` temporary
   picks; a *new* game beyond it is refused (``LimitReached``) and the
   session is complete when it holds exactly ``pick_limit`` picks.
   Re-picking a staged game is always an in-place replacement.
   ``capacity`` (limit minus picks already submitted this week) is
   reported for display only.
3. **Slate guard.**  The game must be on the slate, have lines for the
   chosen side, and not have kicked off.
4. **Fresh unlock time.**  Every selection stamps ``unlock_at`` from the
   clock at that moment (see :mod:`app.pickem.unlock`).
5. **Fail closed on config.**  Without a known pick limit no selection is
   accepted (``ConfigUnavailable``); falling back to a default limit is
   the caller's explicit choice.
6. **No mutation while submitting.**  During an in-flight submission
   ``select_side``, ``clear_session`` and ``submit_all`` all raise
   ``SubmissionInProgress``.  State changes happen under the manager's
   lock; the storage write itself runs outside it.
"""

from __future__ import annotations

import datetime
import logging
import threading
from typing import Callable, Optional

from app.pickem.data_service import PickDataService
from app.pickem.errors import (AlreadySubmitted, ConfigUnavailable, DataServiceError, EmptySession, InvalidSide,
                               LimitReached, SubmissionFailed, SubmissionInProgress, )
from app.pickem.guards import check_pickable
from app.pickem.unlock import DEFAULT_UNLOCK_CONFIG, UnlockConfig, as_utc, compute_unlock_at, utc_now
from app.schemas.pick import Pick, PickWriteRequest, Side
from app.schemas.session import (SessionPhase, SessionScope, SessionSnapshot, SessionUpdateResult, SubmissionResult,
                                 SubmissionState, )
from app.schemas.slate import SlateLine

logger = logging.getLogger(__name__)


# ======================================================================
# Session state
# ======================================================================


class PickSession:
    """Temporary picks for one (league, user, season, week).

    Picks are kept in first-selection order, one per game.
    """

    def __init__(self, scope: SessionScope, pick_limit: Optional[int] = None):
        self.scope = scope
        self.pick_limit = pick_limit
        self.submitted_game_ids: list[str] = []
        self.state = SubmissionState.IDLE
        self._picks: dict[str, Pick] = {}

    @property
    def picks(self) -> list[Pick]:
        return list(self._picks.values())

    @property
    def count(self) -> int:
        return len(self._picks)

    @property
    def capacity(self) -> Optional[int]:
        """Weekly picks left after those already submitted, ``None`` while the limit is unknown."""
        if self.pick_limit is None:
            return None
        return max(self.pick_limit - len(self.submitted_game_ids), 0)

    @property
    def is_full(self) -> bool:
        return self.pick_limit is not None and self.count >= self.pick_limit

    @property
    def is_complete(self) -> bool:
        return self.count > 0 and self.count == self.pick_limit

    @property
    def phase(self) -> SessionPhase:
        if self.state == SubmissionState.SUBMITTING:
            return SessionPhase.SUBMITTING
        if not self._picks:
            return SessionPhase.SUBMITTED if self.state == SubmissionState.SUBMITTED else SessionPhase.IDLE
        return SessionPhase.COMPLETE if self.is_complete else SessionPhase.SELECTING

    def get(self, game_id: str) -> Optional[Pick]:
        return self._picks.get(game_id)

    def is_submitted(self, game_id: str) -> bool:
        return game_id in self.submitted_game_ids

    def put(self, pick: Pick) -> None:
        self._picks[pick.game_id] = pick

    def clear(self) -> None:
        self._picks.clear()

    def mark_submitted(self, game_ids: list[str]) -> None:
        for game_id in game_ids:
            self._picks.pop(game_id, None)
            if game_id not in self.submitted_game_ids:
                self.submitted_game_ids.append(game_id)
        self.state = SubmissionState.SUBMITTED

    def set_durable(self, game_ids: list[str]) -> list[str]:
        """Replace the durable set; drop staged picks it now covers.

        Returns the game ids of the dropped picks.
        """
        self.submitted_game_ids = list(dict.fromkeys(game_ids))
        dropped = [g for g in self._picks if g in self.submitted_game_ids]
        for game_id in dropped:
            del self._picks[game_id]
        return dropped

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(scope=self.scope, phase=self.phase, submission_state=self.state, picks=self.picks,
                               count=self.count, pick_limit=self.pick_limit, capacity=self.capacity,
                               submitted_game_ids=list(self.submitted_game_ids), )


# ======================================================================
# Manager
# ======================================================================


class PickSessionManager:
    """Mediates every change to a :class:`PickSession` and commits it.

    Args:
        data_service: Storage the session reads from and submits to.
        scope: League/user/season/week of the session.
        unlock_config: Rule used to stamp ``unlock_at``.
        clock: Returns the current time; injected for tests.
        submit_timeout: Seconds allowed for the submission write.
    """

    def __init__(self, data_service: PickDataService, scope: SessionScope, *,
                 unlock_config: UnlockConfig = DEFAULT_UNLOCK_CONFIG,
                 clock: Callable[[], datetime.datetime] = utc_now, submit_timeout: Optional[float] = None, ):
        self.data_service = data_service
        self.session = PickSession(scope)
        self.unlock_config = unlock_config
        self.clock = clock
        self.submit_timeout = submit_timeout
        self.slate: dict[str, SlateLine] = {}
        self._lock = threading.Lock()
        self._submissions = 0

    @property
    def scope(self) -> SessionScope:
        return self.session.scope

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, fallback_pick_limit: Optional[int] = None) -> PickSession:
        """Fetch league config, submitted picks and the slate.

        If the league config cannot be read the session stays without a
        limit (no selections accepted) unless *fallback_pick_limit* is
        given.  Failures reading picks or the slate propagate.
        """
        scope = self.scope
        try:
            pick_limit = self.data_service.fetch_league_config(scope.league_id).pick_limit
        except DataServiceError as e:
            if fallback_pick_limit is None:
                logger.error("League config unavailable for %s: %s", scope.league_id, e)
            else:
                logger.warning("League config unavailable for %s, using fallback limit %d: %s", scope.league_id,
                               fallback_pick_limit, e)
            pick_limit = fallback_pick_limit

        with self._lock:
            self.session.pick_limit = pick_limit
        return self.refresh()

    def refresh(self) -> PickSession:
        """Re-read submitted picks and the slate, keeping the staged picks.

        Staged picks that are now durable are dropped.  The submitted set
        is left alone if a submission ran while the reads were in flight.
        """
        scope = self.scope
        submissions = self._submissions
        durable = self.data_service.fetch_durable_picks(scope.league_id, scope.user_id, scope.season, scope.week)
        lines = self.data_service.fetch_slate(scope.league_id, scope.season, scope.week)

        with self._lock:
            self.slate = {line.game_id: line for line in lines}
            if self.session.state == SubmissionState.SUBMITTING or self._submissions != submissions:
                return self.session
            dropped = self.session.set_durable([p.game_id for p in durable])
        if dropped:
            logger.info("Dropped staged picks already submitted elsewhere: %s", dropped)
        return self.session

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def select_side(self, game_id: str, side: Side | str, line_value: float) -> SessionUpdateResult:
        """Stage (or replace) the pick for *game_id*."""
        with self._lock:
            return self._select_side(game_id, side, line_value)

    def _select_side(self, game_id: str, side: Side | str, line_value: float) -> SessionUpdateResult:
        session = self.session
        if session.state == SubmissionState.SUBMITTING:
            raise SubmissionInProgress()
        if session.pick_limit is None:
            raise ConfigUnavailable()

        try:
            side = Side(side)
        except ValueError:
            raise InvalidSide(f"Side must be HOME or AWAY, not {side!r}", game_id=game_id) from None

        if session.is_submitted(game_id):
            raise AlreadySubmitted("You have already submitted a pick for this game. "
                                   "Picks cannot be changed after submission.", game_id=game_id)

        existing = session.get(game_id)
        if existing is None and session.is_full:
            raise LimitReached(f"You can only make {session.pick_limit} picks per week.", game_id=game_id,
                               pick_limit=session.pick_limit)

        now = as_utc(self.clock())
        check_pickable(self.slate.get(game_id), side, now, game_id)

        scope = self.scope
        pick = Pick(league_id=scope.league_id, user_id=scope.user_id, season=scope.season, week=scope.week,
                    game_id=game_id, side=side, line_value=float(line_value), locked=False,
                    unlock_at=compute_unlock_at(now, self.unlock_config), created_at=now, updated_at=now, )
        session.put(pick)

        logger.debug("Selected %s %+g on %s (%d/%d)", side.value, pick.line_value, game_id, session.count,
                     session.pick_limit)
        if session.is_complete:
            logger.info("Session %s/%s week %d complete with %d picks", scope.league_id, scope.user_id, scope.week,
                        session.count)

        return SessionUpdateResult(pick=pick, count=session.count, pick_limit=session.pick_limit,
                                   capacity=session.capacity, is_complete=session.is_complete,
                                   prompt_submit=session.is_complete, replaced=existing is not None, )

    def submit_all(self) -> SubmissionResult:
        """Persist every staged pick in one all-or-nothing write.

        On failure (including timeout) the staged picks are left exactly
        as they were so the user can retry.
        """
        session = self.session
        scope = self.scope
        with self._lock:
            if session.state == SubmissionState.SUBMITTING:
                raise SubmissionInProgress()
            picks = session.picks
            if not picks:
                raise EmptySession()
            session.state = SubmissionState.SUBMITTING

        game_ids = [p.game_id for p in picks]
        written = False
        try:
            requests = [PickWriteRequest.from_pick(p) for p in picks]
            logger.info("Submitting %d picks for league %s user %s week %d", len(requests), scope.league_id,
                        scope.user_id, scope.week)
            self.data_service.upsert_picks(requests, timeout=self.submit_timeout)
            written = True
        except (DataServiceError, TimeoutError) as e:
            logger.warning("Submission failed for league %s user %s week %d: %s", scope.league_id, scope.user_id,
                           scope.week, e)
            raise SubmissionFailed("Failed to submit picks. Please try again.", cause=str(e)) from e
        finally:
            with self._lock:
                if written:
                    session.mark_submitted(game_ids)
                    self._submissions += 1
                else:
                    session.state = SubmissionState.FAILED

        logger.info("Submitted %d picks for league %s user %s week %d", len(game_ids), scope.league_id,
                    scope.user_id, scope.week)
        return SubmissionResult(submitted_count=len(game_ids), game_ids=game_ids)

    def clear_session(self) -> None:
        """Discard all staged picks.  Submitted picks are untouched."""
        with self._lock:
            session = self.session
            if session.state == SubmissionState.SUBMITTING:
                raise SubmissionInProgress()
            session.clear()
            session.state = SubmissionState.IDLE

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self.session.snapshot()
