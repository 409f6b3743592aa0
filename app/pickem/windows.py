"""
Publish windows: when a slate's lines drop.

Lines are released per window (all times Eastern):

- ``LABORDAY`` - Monday 10:00 AM, for Labor Day games
- ``EARLY``    - Tuesday 10:00 AM, for Tuesday/Wednesday games
- ``MAIN``     - Thursday 10:00 AM, for Thursday-Sunday games
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from app.pickem.guards import lines_available
from app.schemas.slate import PublishWindow, SlateBanner, SlateLine

_DROP_LABELS: dict[PublishWindow, str] = {
    PublishWindow.LABORDAY: "Mon 10:00 AM ET",
    PublishWindow.EARLY: "Tue 10:00 AM ET",
    PublishWindow.MAIN: "Thu 10:00 AM ET",
}

_SUBTITLES: dict[PublishWindow, str] = {
    PublishWindow.LABORDAY: "Monday games available soon",
    PublishWindow.EARLY: "Tuesday/Wednesday games available soon",
    PublishWindow.MAIN: "Main slate games available soon",
}


def lines_drop_label(window: PublishWindow) -> str:
    return _DROP_LABELS.get(window, _DROP_LABELS[PublishWindow.MAIN])


def window_counts(lines: Iterable[SlateLine]) -> dict[PublishWindow, int]:
    return dict(Counter(line.publish_window for line in lines))


def primary_window(lines: Iterable[SlateLine]) -> PublishWindow:
    """The window most games on the slate belong to.

    Ties keep the first window seen; an empty slate is ``MAIN``.
    """
    counts = window_counts(lines)
    best, best_count = PublishWindow.MAIN, 0
    for window, count in counts.items():
        if count > best_count:
            best, best_count = window, count
    return best


def _message(window: PublishWindow, week: int) -> str:
    label = lines_drop_label(window)
    if window == PublishWindow.LABORDAY:
        return f"Week {week} Labor Day lines drop {label}"
    if window == PublishWindow.EARLY:
        return f"Week {week} MACtion lines drop {label}"
    return f"Week {week} lines drop {label}"


def slate_banner(lines: list[SlateLine], week: int) -> Optional[SlateBanner]:
    """Banner for a slate still waiting on its lines, ``None`` once any are out."""
    if any(lines_available(line) for line in lines):
        return None

    window = primary_window(lines)
    return SlateBanner(week=week, window=window, drop_label=lines_drop_label(window), message=_message(window, week),
                       subtitle=_SUBTITLES[window], window_counts=window_counts(lines), )
