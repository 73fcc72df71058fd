from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
import logging

from .breaks import BreakSummary, accumulate_breaks
from .errors import ConfigError
from .parsing import parse_break, parse_duration, parse_time
from .policy import DEFAULT_POLICY, WorkdayPolicy

logger = logging.getLogger(__name__)

DEFAULT_WEEKLY_GOAL = "39:00"


def round_half_up(value: float, digits: int = 2) -> float:
    """Round like a pocket calculator: ties go away from zero, not to even."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class WorkdayRequest:
    start: str
    end: str | None = None
    daily_goal: str | None = None
    weekly_goal: str | None = DEFAULT_WEEKLY_GOAL
    breaks: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkdayReport:
    start: datetime
    end: datetime | None
    now: datetime
    daily_goal: timedelta
    total_time: timedelta
    break_time: timedelta
    longest_break: timedelta
    used_default_break: bool
    work_time: timedelta
    done: bool
    remainder: timedelta
    percent_complete: float
    goal_clock_out: datetime
    long_day_clock_out: datetime
    max_day_clock_out: datetime
    max_remaining: timedelta

    @property
    def remainder_label(self) -> str:
        return "more" if self.done else "remaining"


def resolve_daily_goal(
    daily: str | None,
    weekly: str | None,
    policy: WorkdayPolicy = DEFAULT_POLICY,
) -> timedelta:
    if daily is not None:
        goal = parse_duration(daily)
    elif weekly:
        goal = parse_duration(weekly) / policy.workdays_per_week
    else:
        raise ConfigError("Working-hour goal undefined")

    if goal <= timedelta(0):
        raise ConfigError(f"Working-hour goal must be positive, got {daily or weekly!r}")
    return goal


def resolve_start(
    text: str,
    reference: datetime,
    policy: WorkdayPolicy = DEFAULT_POLICY,
) -> datetime:
    given = parse_time(text, reference)
    floor = reference.replace(
        hour=policy.earliest_start.hour,
        minute=policy.earliest_start.minute,
        second=policy.earliest_start.second,
        microsecond=0,
    )
    if given < floor:
        logger.info(
            "Provided start time [%s] too small.  Defaulting to %s.",
            given.strftime("%H:%M:%S"),
            floor.strftime("%H:%M:%S"),
        )
        return floor
    return given


def compute_report(
    start: datetime,
    end: datetime | None,
    daily_goal: timedelta,
    breaks: BreakSummary,
    now: datetime,
    policy: WorkdayPolicy = DEFAULT_POLICY,
) -> WorkdayReport:
    total_time = (end or now) - start
    break_time = breaks.total
    work_time = total_time - break_time
    done = work_time > daily_goal
    if done:
        remainder = daily_goal + break_time - total_time
    else:
        remainder = total_time - (daily_goal + break_time)

    # Projections never count less than the large break.
    projected_break = max(policy.large_break, break_time)
    max_day_clock_out = start + policy.max_day + projected_break

    return WorkdayReport(
        start=start,
        end=end,
        now=now,
        daily_goal=daily_goal,
        total_time=total_time,
        break_time=break_time,
        longest_break=breaks.longest,
        used_default_break=breaks.used_default,
        work_time=work_time,
        done=done,
        remainder=remainder,
        percent_complete=round_half_up((100 * work_time) / daily_goal),
        goal_clock_out=start + daily_goal + break_time,
        long_day_clock_out=start + policy.long_day + projected_break,
        max_day_clock_out=max_day_clock_out,
        max_remaining=max_day_clock_out - now,
    )


def build_report(
    request: WorkdayRequest,
    now: datetime,
    policy: WorkdayPolicy = DEFAULT_POLICY,
) -> WorkdayReport:
    """Resolve every input of ``request`` against ``now`` and compute the report.

    Nothing is printed here; any malformed input raises before a report exists.
    """
    start = resolve_start(request.start, now, policy)
    end = parse_time(request.end, now) if request.end is not None else None
    daily_goal = resolve_daily_goal(request.daily_goal, request.weekly_goal, policy)

    elapsed = (end or now) - start
    intervals = [parse_break(item, now) for item in request.breaks]
    summary = accumulate_breaks(elapsed, intervals, policy)

    return compute_report(start, end, daily_goal, summary, now, policy)
