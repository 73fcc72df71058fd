from __future__ import annotations

from datetime import timedelta
from typing import Literal

from pydantic import BaseModel

from .calculator import WorkdayReport
from .reporting import duration_hours, format_clock, format_duration


RemainderLabel = Literal["more", "remaining"]


class DurationOut(BaseModel):
    text: str
    hours: float


class ClockOuts(BaseModel):
    goal: str
    nine_hours: str
    ten_hours: str


class ReportResponse(BaseModel):
    start: str
    end: str | None = None
    daily_goal: DurationOut
    clock_out: ClockOuts
    work_time: DurationOut
    percent_complete: float
    done: bool
    remainder: DurationOut
    remainder_label: RemainderLabel
    max_remaining: DurationOut
    break_time: DurationOut
    longest_break: DurationOut
    used_default_break: bool
    hours_worked: float | None = None


def _duration(value: timedelta) -> DurationOut:
    return DurationOut(text=format_duration(value), hours=duration_hours(value))


def to_response(report: WorkdayReport) -> ReportResponse:
    return ReportResponse(
        start=format_clock(report.start),
        end=format_clock(report.end) if report.end is not None else None,
        daily_goal=_duration(report.daily_goal),
        clock_out=ClockOuts(
            goal=format_clock(report.goal_clock_out),
            nine_hours=format_clock(report.long_day_clock_out),
            ten_hours=format_clock(report.max_day_clock_out),
        ),
        work_time=_duration(report.work_time),
        percent_complete=report.percent_complete,
        done=report.done,
        remainder=_duration(report.remainder),
        remainder_label=report.remainder_label,
        max_remaining=_duration(report.max_remaining),
        break_time=_duration(report.break_time),
        longest_break=_duration(report.longest_break or report.break_time),
        used_default_break=report.used_default_break,
        hours_worked=duration_hours(report.work_time) if report.end is not None else None,
    )
