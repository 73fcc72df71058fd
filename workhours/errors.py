from __future__ import annotations


class WorkhoursError(Exception):
    """Base class for every error reported by the command line tool."""


class TimeFormatError(WorkhoursError, ValueError):
    """A clock time, duration or break interval could not be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Cannot extract time from {text!r}: {reason}")
        self.text = text
        self.reason = reason


class ConfigError(WorkhoursError):
    """Required input (start time, work goal) is missing or unusable."""
