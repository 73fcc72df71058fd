from __future__ import annotations

from datetime import datetime, timedelta, timezone
import unittest

from workhours.breaks import BreakSummary
from workhours.calculator import (
    WorkdayRequest,
    build_report,
    compute_report,
    round_half_up,
    resolve_daily_goal,
    resolve_start,
)
from workhours.errors import ConfigError, TimeFormatError


def at(hour: int, minute: int = 0, second: int = 0) -> datetime:
    return datetime(2026, 2, 13, hour, minute, second, tzinfo=timezone.utc)


class TestGoalResolution(unittest.TestCase):
    def test_weekly_goal_divided_by_workdays(self) -> None:
        self.assertEqual(resolve_daily_goal(None, "39:00"), timedelta(hours=7, minutes=48))

    def test_daily_goal_wins_over_weekly(self) -> None:
        self.assertEqual(resolve_daily_goal("8:00", "39:00"), timedelta(hours=8))

    def test_missing_goal_is_config_error(self) -> None:
        with self.assertRaises(ConfigError):
            resolve_daily_goal(None, None)

    def test_zero_goal_is_config_error(self) -> None:
        with self.assertRaises(ConfigError):
            resolve_daily_goal("0:00", None)

    def test_malformed_goal_is_format_error(self) -> None:
        with self.assertRaises(TimeFormatError):
            resolve_daily_goal(None, "39")

    def test_empty_daily_goal_is_not_a_fallback(self) -> None:
        with self.assertRaises(TimeFormatError):
            resolve_daily_goal("", "39:00")


class TestRounding(unittest.TestCase):
    def test_ties_round_away_from_zero(self) -> None:
        self.assertEqual(round_half_up(0.125), 0.13)
        self.assertEqual(round_half_up(0.375), 0.38)
        self.assertEqual(round_half_up(-0.125), -0.13)

    def test_other_values_round_to_nearest(self) -> None:
        self.assertEqual(round_half_up(96.153846), 96.15)
        self.assertEqual(round_half_up(108.974359), 108.97)
        self.assertEqual(round_half_up(7.8), 7.8)

    def test_percentage_tie_rounds_up(self) -> None:
        summary = BreakSummary(
            total=timedelta(minutes=30),
            longest=timedelta(minutes=30),
            used_default=False,
        )
        report = compute_report(at(8), at(8, 30, 36), timedelta(hours=8), summary, now=at(9))

        self.assertEqual(report.work_time, timedelta(seconds=36))
        self.assertEqual(report.percent_complete, 0.13)


class TestStartResolution(unittest.TestCase):
    def test_early_start_clamped_with_notice(self) -> None:
        with self.assertLogs("workhours.calculator", level="INFO") as logs:
            start = resolve_start("5:00", at(14))

        self.assertEqual(start, at(6))
        self.assertIn("Provided start time [05:00:00] too small.  Defaulting to 06:00:00.", logs.output[0])

    def test_start_at_floor_kept(self) -> None:
        self.assertEqual(resolve_start("6:00", at(14)), at(6))

    def test_regular_start_kept(self) -> None:
        self.assertEqual(resolve_start("8:15:30", at(14)), at(8, 15, 30))


class TestComputeReport(unittest.TestCase):
    def test_default_goal_end_to_end(self) -> None:
        report = build_report(WorkdayRequest(start="8:00"), now=at(16))

        self.assertEqual(report.total_time, timedelta(hours=8))
        self.assertEqual(report.break_time, timedelta(minutes=30))
        self.assertTrue(report.used_default_break)
        self.assertEqual(report.work_time, timedelta(hours=7, minutes=30))
        self.assertFalse(report.done)
        self.assertEqual(report.remainder, -timedelta(minutes=18))
        self.assertEqual(report.remainder_label, "remaining")
        self.assertAlmostEqual(report.percent_complete, 96.15)
        self.assertEqual(report.goal_clock_out, at(16, 18))
        self.assertEqual(report.long_day_clock_out, at(17, 45))
        self.assertEqual(report.max_day_clock_out, at(18, 45))
        self.assertEqual(report.max_remaining, timedelta(hours=2, minutes=45))

    def test_overtime_with_end_and_breaks(self) -> None:
        request = WorkdayRequest(start="8:00", end="17:00", breaks=("12:00-12:30",))
        report = build_report(request, now=at(19))

        self.assertEqual(report.end, at(17))
        self.assertEqual(report.total_time, timedelta(hours=9))
        self.assertFalse(report.used_default_break)
        self.assertEqual(report.work_time, timedelta(hours=8, minutes=30))
        self.assertTrue(report.done)
        self.assertEqual(report.remainder, -timedelta(minutes=42))
        self.assertEqual(report.remainder_label, "more")
        self.assertAlmostEqual(report.percent_complete, 108.97)
        self.assertEqual(report.max_remaining, -timedelta(minutes=15))

    def test_work_equal_to_goal_is_not_done(self) -> None:
        report = build_report(WorkdayRequest(start="8:00", daily_goal="7:30"), now=at(16))

        self.assertEqual(report.work_time, report.daily_goal)
        self.assertFalse(report.done)
        self.assertEqual(report.remainder, timedelta(0))
        self.assertEqual(report.remainder_label, "remaining")
        self.assertEqual(report.percent_complete, 100.0)

    def test_projection_uses_actual_break_when_longer(self) -> None:
        summary = BreakSummary(
            total=timedelta(hours=1),
            longest=timedelta(hours=1),
            used_default=False,
        )
        report = compute_report(at(8), None, timedelta(hours=8), summary, now=at(12))

        self.assertEqual(report.goal_clock_out, at(17))
        self.assertEqual(report.long_day_clock_out, at(18))
        self.assertEqual(report.max_day_clock_out, at(19))

    def test_projection_never_below_large_break(self) -> None:
        summary = BreakSummary(
            total=timedelta(minutes=10),
            longest=timedelta(minutes=10),
            used_default=False,
        )
        report = compute_report(at(8), None, timedelta(hours=8), summary, now=at(12))

        self.assertEqual(report.goal_clock_out, at(16, 10))
        self.assertEqual(report.long_day_clock_out, at(17, 45))
        self.assertEqual(report.max_day_clock_out, at(18, 45))

    def test_long_day_gets_large_default_break(self) -> None:
        report = build_report(WorkdayRequest(start="8:00"), now=at(17, 30))
        self.assertEqual(report.break_time, timedelta(minutes=45))

    def test_clamped_start_feeds_the_report(self) -> None:
        report = build_report(WorkdayRequest(start="5:00"), now=at(14))
        self.assertEqual(report.start, at(6))
        self.assertEqual(report.total_time, timedelta(hours=8))

    def test_malformed_break_aborts_report(self) -> None:
        with self.assertRaises(TimeFormatError):
            build_report(WorkdayRequest(start="8:00", breaks=("12:00",)), now=at(16))


if __name__ == "__main__":
    unittest.main()
