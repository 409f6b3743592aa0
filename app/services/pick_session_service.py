"""
Pick session registry.

Keeps one :class:`PickSessionManager` per (league, user, season, week).
The registry instance is owned by the application (``app.state``), not
by this module.  Every lookup re-reads the slate and the submitted picks,
so lines published or picks submitted since the last request are seen.
Sessions left untouched for ``idle_timeout`` seconds are evicted.
"""

import datetime
import logging
import threading
from typing import Callable, Optional

from app.pickem.data_service import PickDataService
from app.pickem.session import PickSessionManager
from app.pickem.unlock import DEFAULT_UNLOCK_CONFIG, UnlockConfig, as_utc, utc_now
from app.schemas.session import SessionScope, SubmissionState

logger = logging.getLogger(__name__)

DEFAULT_IDLE_TIMEOUT = 24 * 60 * 60


class PickSessionRegistry:
    """Creates, refreshes and hands out session managers by scope."""

    def __init__(self, data_service: PickDataService, *, unlock_config: UnlockConfig = DEFAULT_UNLOCK_CONFIG,
                 clock: Callable[[], datetime.datetime] = utc_now, submit_timeout: Optional[float] = None,
                 fallback_pick_limit: Optional[int] = None, idle_timeout: float = DEFAULT_IDLE_TIMEOUT, ):
        self.data_service = data_service
        self.unlock_config = unlock_config
        self.clock = clock
        self.submit_timeout = submit_timeout
        self.fallback_pick_limit = fallback_pick_limit
        self.idle_timeout = datetime.timedelta(seconds=idle_timeout)
        self._managers: dict[SessionScope, PickSessionManager] = {}
        self._last_used: dict[SessionScope, datetime.datetime] = {}
        self._lock = threading.Lock()

    def get(self, scope: SessionScope) -> PickSessionManager:
        """Return the manager for *scope*, up to date with storage.

        A new manager is fully loaded.  An existing one re-reads the slate
        and submitted picks, keeping its staged picks; if its league config
        could not be read earlier, it is loaded again instead.
        """
        now = as_utc(self.clock())
        with self._lock:
            self._evict_idle(now)
            manager = self._managers.get(scope)
            if manager is None:
                manager = PickSessionManager(self.data_service, scope, unlock_config=self.unlock_config,
                                             clock=self.clock, submit_timeout=self.submit_timeout, )
                self._managers[scope] = manager
                fresh = True
                logger.debug("Opened pick session %s", scope)
            else:
                fresh = False
            self._last_used[scope] = now

        if fresh or manager.session.pick_limit is None:
            manager.load(fallback_pick_limit=self.fallback_pick_limit)
        else:
            manager.refresh()
        return manager

    def discard(self, scope: SessionScope) -> None:
        with self._lock:
            self._managers.pop(scope, None)
            self._last_used.pop(scope, None)

    def _evict_idle(self, now: datetime.datetime) -> None:
        expired = [scope for scope, used in self._last_used.items() if now - used > self.idle_timeout and
                   self._managers[scope].session.state != SubmissionState.SUBMITTING]
        for scope in expired:
            del self._managers[scope]
            del self._last_used[scope]
        if expired:
            logger.debug("Evicted %d idle pick sessions", len(expired))

    def __len__(self) -> int:
        return len(self._managers)
