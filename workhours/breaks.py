from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
import logging
from typing import Sequence

from .policy import DEFAULT_POLICY, WorkdayPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreakSummary:
    total: timedelta
    longest: timedelta
    used_default: bool


def default_break(elapsed: timedelta, policy: WorkdayPolicy = DEFAULT_POLICY) -> timedelta:
    if elapsed >= policy.default_break_threshold:
        return policy.large_break
    return policy.short_break


def accumulate_breaks(
    elapsed: timedelta,
    breaks: Sequence[timedelta],
    policy: WorkdayPolicy = DEFAULT_POLICY,
) -> BreakSummary:
    """Sum explicit breaks, or fall back to the default break for ``elapsed``.

    The longest break is the first strict maximum. When the default applies
    there is exactly one implicit break, so ``longest`` equals ``total``.
    """
    if not breaks:
        logger.info("No breaks defined, using default.")
        total = default_break(elapsed, policy)
        return BreakSummary(total=total, longest=total, used_default=True)

    total = timedelta(0)
    longest = timedelta(0)
    for item in breaks:
        if item > longest:
            longest = item
        total += item
    return BreakSummary(total=total, longest=longest, used_default=False)
