from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TextIO

from . import __version__
from .calculator import DEFAULT_WEEKLY_GOAL, WorkdayRequest, build_report
from .clock import Clock, RealClock
from .errors import ConfigError, WorkhoursError
from .logging_setup import configure_logging
from .reporting import render_report
from .schemas import to_response

logger = logging.getLogger(__name__)

WEEKLY_GOAL_ENV = "WORKHOURS_WEEKLY_GOAL"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workhours",
        description="Track today's work hours against a daily or weekly goal.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-s",
        "--start",
        default=None,
        help="Time when work started <HH:MM[:SS]> (prompted for when omitted)",
    )
    parser.add_argument("-e", "--end", default=None, help="Time when work ended <HH:MM[:SS]>")
    parser.add_argument("-d", "--daily-goal", default=None, help="Daily work goal <HH:MM[:SS]>")
    parser.add_argument(
        "-w",
        "--weekly-goal",
        default=os.environ.get(WEEKLY_GOAL_ENV, DEFAULT_WEEKLY_GOAL),
        help=f"Weekly work goal <HH:MM[:SS]> (default {DEFAULT_WEEKLY_GOAL}, env {WEEKLY_GOAL_ENV})",
    )
    parser.add_argument(
        "-b",
        "--break",
        dest="breaks",
        action="append",
        default=[],
        help="Break start and end <HH:MM[:SS]-HH:MM[:SS]>, repeatable",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    return parser


def main(
    argv: list[str] | None = None,
    clock: Clock | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    stdin: TextIO | None = None,
) -> int:
    out = stdout or sys.stdout
    err = stderr or sys.stderr
    configure_logging(stream=err)
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.start is not None:
            start = args.start
        else:
            start = _ask_start(stdin or sys.stdin, err)
        request = WorkdayRequest(
            start=start,
            end=args.end,
            daily_goal=args.daily_goal,
            weekly_goal=args.weekly_goal,
            breaks=tuple(args.breaks),
        )
        report = build_report(request, now=(clock or RealClock()).now())
    except WorkhoursError as exc:
        logger.error("%s", exc)
        return 1

    if args.json:
        out.write(to_response(report).model_dump_json(indent=2) + "\n")
    else:
        for line in render_report(report):
            out.write(line + "\n")
    out.flush()
    return 0


def _ask_start(stdin: TextIO, err: TextIO) -> str:
    # The question goes to stderr so stdout only ever holds the report.
    err.write("Start time <HH:MM[:SS]>: ")
    err.flush()
    answer = stdin.readline()

    text = answer.strip()
    if not text:
        raise ConfigError("Start time not defined")
    return text
