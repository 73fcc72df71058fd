"""workhours: how long today's workday has been and when it can end."""

__version__ = "0.1.0"

from .calculator import WorkdayReport, WorkdayRequest, build_report
from .cli import main

__all__ = ["main", "build_report", "WorkdayReport", "WorkdayRequest", "__version__"]
