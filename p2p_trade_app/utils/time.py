"""
Clock and duration formatting utilities.

This module provides the default wall clock used for trade period
calculations and the human readable duration formatter.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from ..locale.localizer import Localizer

Clock = Callable[[], datetime]

_UNITS = (
    ("day", timedelta(days=1)),
    ("hour", timedelta(hours=1)),
    ("minute", timedelta(minutes=1)),
    ("second", timedelta(seconds=1)),
)


def utc_now() -> datetime:
    """Current wall-clock time as UTC datetime."""
    return datetime.now(timezone.utc)


def clamp_non_negative(duration: timedelta) -> timedelta:
    """Floor a duration at zero."""
    return max(timedelta(0), duration)


class DurationFormatter:
    """Formats durations as words, e.g. ``"1 day, 2 hours, 5 minutes"``."""

    def __init__(self, localizer: Optional[Localizer] = None,
                 show_seconds: bool = False, show_zero_values: bool = True) -> None:
        self.localizer = localizer or Localizer()
        self.show_seconds = show_seconds
        self.show_zero_values = show_zero_values

    def format(self, duration: timedelta) -> str:
        """
        Format a duration as words.

        Args:
            duration: Duration to format

        Returns:
            Comma separated unit counts, empty string for non-positive durations
        """
        if duration <= timedelta(0):
            return ""

        units = _UNITS if self.show_seconds else _UNITS[:-1]
        # Days are only listed once a full day is left
        if duration < timedelta(days=1):
            units = units[1:]
        remainder = duration
        parts = []
        for name, size in units:
            count, remainder = divmod(remainder, size)
            if count == 0 and not self.show_zero_values:
                continue
            label = self.localizer.get(f"time.{name}" if count == 1 else f"time.{name}s")
            parts.append(f"{count} {label}")

        return ", ".join(parts)
