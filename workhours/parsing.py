from __future__ import annotations

from datetime import datetime, timedelta

from .errors import TimeFormatError


def _split_clock(text: str) -> tuple[int, int, int]:
    parts = text.strip().split(":")
    if len(parts) not in (2, 3):
        raise TimeFormatError(text, "expected HH:MM or HH:MM:SS")

    values: list[int] = []
    for part in parts:
        if not (part.isascii() and part.isdigit()):
            raise TimeFormatError(text, f"{part!r} is not a non-negative integer")
        values.append(int(part))

    if len(values) == 2:
        values.append(0)
    hours, minutes, seconds = values
    return hours, minutes, seconds


def parse_time(text: str, reference: datetime) -> datetime:
    """Return the clock time ``text`` on the local day of ``reference``.

    ``reference`` is the injected "now"; its date and tzinfo anchor the result.
    """
    hours, minutes, seconds = _split_clock(text)
    try:
        return reference.replace(hour=hours, minute=minutes, second=seconds, microsecond=0)
    except ValueError as exc:
        raise TimeFormatError(text, str(exc)) from exc


def parse_duration(text: str) -> timedelta:
    hours, minutes, seconds = _split_clock(text)
    return timedelta(hours=hours, minutes=minutes, seconds=seconds)


def parse_break(text: str, reference: datetime) -> timedelta:
    """Length of a ``start-end`` break; the order of the two times does not matter."""
    bounds = text.split("-")
    if len(bounds) != 2:
        raise TimeFormatError(text, "expected <HH:MM[:SS]>-<HH:MM[:SS]>")

    start = parse_time(bounds[0], reference)
    end = parse_time(bounds[1], reference)
    return abs(end - start)
