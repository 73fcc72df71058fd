from __future__ import annotations

from datetime import datetime, timedelta

from .calculator import WorkdayReport, round_half_up

_SECOND = timedelta(seconds=1)


def format_duration(value: timedelta) -> str:
    """Render ``value`` as ``HH:MM:SS``.

    The sign is dropped; callers describe the direction in words
    ("more" / "remaining"). Fractions of a second are truncated.
    """
    total = abs(value) // _SECOND
    minutes, sec = divmod(total, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{sec:02d}"


def duration_hours(value: timedelta) -> float:
    total_minutes = abs(value) // timedelta(minutes=1)
    hours, minutes = divmod(total_minutes, 60)
    return round_half_up(hours + minutes / 60.0)


def format_hours(value: timedelta) -> str:
    return f"{duration_hours(value):.2f}"


def format_clock(value: datetime) -> str:
    return value.strftime("%H:%M:%S")


def render_report(report: WorkdayReport) -> list[str]:
    end_text = f"end: {format_clock(report.end)}; " if report.end is not None else ""

    lines = [
        (
            f"start: {format_clock(report.start)}; {end_text}"
            f"{format_hours(report.daily_goal)}h: {format_clock(report.goal_clock_out)}, "
            f"9h: {format_clock(report.long_day_clock_out)}, "
            f"10h: {format_clock(report.max_day_clock_out)}"
        ),
        (
            f"already done: {format_duration(report.work_time)} "
            f"[{format_hours(report.work_time)} -> {report.percent_complete:.2f} %]; "
            f"{format_duration(report.remainder)} [{format_hours(report.remainder)}] "
            f"{report.remainder_label}; "
            f"no longer than {format_duration(report.max_remaining)} "
            f"[{format_hours(report.max_remaining)}]"
        ),
        (
            f"total break time: {format_duration(report.break_time)}; "
            f"longest break: {format_duration(report.longest_break or report.break_time)}"
        ),
    ]
    if report.end is not None:
        lines.append(f"total hours worked: {format_hours(report.work_time)}")
    return lines
