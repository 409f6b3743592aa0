"""Pick'em core: pick session, visibility policy and unlock window."""

from app.pickem.session import PickSession, PickSessionManager
from app.pickem.unlock import UnlockConfig, compute_unlock_at
from app.pickem.visibility import is_visible, redact_pick

__all__ = ["PickSession", "PickSessionManager", "UnlockConfig", "compute_unlock_at", "is_visible", "redact_pick"]
