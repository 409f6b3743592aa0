"""
Pick unlock window.

A new pick stays hidden from other league members until the *unlock
time*: Saturday 12:00 of the calendar week (Sunday to Saturday) that
contains the moment the pick was made, expressed in a reference time
zone that approximates US Eastern Time.

Reference time zone
-------------------

Two modes are supported:

``fixed_offset`` (default)
    A constant ``UTC-5``.  This reproduces the long-standing behaviour
    of the mobile client: correct under Eastern *Standard* Time, one hour
    late during Eastern *Daylight* Time (September through early
    November, i.e. most of the season).

``zone``
    A named IANA zone (``America/New_York``) resolved with ``pytz``, so
    noon is noon on the local wall clock on both sides of the DST switch.

The result is always returned as an aware UTC datetime.
"""

from __future__ import annotations

import datetime

import pytz
from pydantic import BaseModel, Field

from app.core.config import settings

FIXED_OFFSET = "fixed_offset"
ZONE = "zone"

_SUNDAY_START_SHIFT = 1  # date.weekday(): Monday=0 .. Sunday=6


class UnlockConfig(BaseModel):
    """Parameters of the unlock-time rule."""

    mode: str = Field(FIXED_OFFSET, pattern=f"^({FIXED_OFFSET}|{ZONE})$")
    utc_offset_hours: int = Field(-5, ge=-12, le=14)
    timezone: str = "America/New_York"
    weekday: int = Field(5, ge=0, le=6, description="date.weekday() of the unlock day (5 = Saturday)")
    hour: int = Field(12, ge=0, le=23)

    def reference_tz(self) -> datetime.tzinfo:
        if self.mode == ZONE:
            return pytz.timezone(self.timezone)
        return pytz.FixedOffset(self.utc_offset_hours * 60)

    @classmethod
    def from_settings(cls) -> "UnlockConfig":
        return cls(mode=settings.UNLOCK_TZ_MODE, utc_offset_hours=settings.UNLOCK_UTC_OFFSET_HOURS,
                   timezone=settings.UNLOCK_TIMEZONE, weekday=settings.UNLOCK_WEEKDAY, hour=settings.UNLOCK_HOUR)


DEFAULT_UNLOCK_CONFIG = UnlockConfig()


def as_utc(moment: datetime.datetime) -> datetime.datetime:
    """Return *moment* as an aware UTC datetime.  Naive values are read as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=datetime.timezone.utc)
    return moment.astimezone(datetime.timezone.utc)


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def week_start(moment: datetime.datetime, config: UnlockConfig = DEFAULT_UNLOCK_CONFIG) -> datetime.date:
    """Sunday that starts the reference-zone week containing *moment*."""
    local = as_utc(moment).astimezone(config.reference_tz())
    days_since_sunday = (local.weekday() + _SUNDAY_START_SHIFT) % 7
    return local.date() - datetime.timedelta(days=days_since_sunday)


def compute_unlock_at(now: datetime.datetime, config: UnlockConfig = DEFAULT_UNLOCK_CONFIG) -> datetime.datetime:
    """Unlock time for a pick made at *now*.

    The unlock day is taken within the same Sunday-started week, so a
    pick made on Saturday afternoon is already past its unlock time and
    is visible at once.
    """
    tz = config.reference_tz()
    sunday = week_start(now, config)
    unlock_day = sunday + datetime.timedelta(days=(config.weekday + _SUNDAY_START_SHIFT) % 7)
    local_unlock = tz.localize(datetime.datetime.combine(unlock_day, datetime.time(config.hour)))
    return local_unlock.astimezone(datetime.timezone.utc)
