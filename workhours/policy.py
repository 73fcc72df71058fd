from __future__ import annotations

from dataclasses import dataclass
from datetime import time, timedelta


@dataclass(frozen=True)
class WorkdayPolicy:
    short_break: timedelta = timedelta(minutes=30)
    large_break: timedelta = timedelta(minutes=45)
    long_day: timedelta = timedelta(hours=9)
    max_day: timedelta = timedelta(hours=10)
    earliest_start: time = time(6, 0)
    workdays_per_week: int = 5

    @property
    def default_break_threshold(self) -> timedelta:
        # Days at or above this length get the large break by default.
        return self.long_day + self.short_break


DEFAULT_POLICY = WorkdayPolicy()
