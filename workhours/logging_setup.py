from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, TextIO

LOG_LEVEL_ENV = "WORKHOURS_LOG_LEVEL"
LOG_FORMAT_ENV = "WORKHOURS_LOG_FORMAT"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "[%(levelname)s] %(message)s"


def configure_logging(
    stream: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> logging.Logger:
    env = os.environ if environ is None else environ
    level_name = env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger("workhours")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(env.get(LOG_FORMAT_ENV, DEFAULT_LOG_FORMAT)))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
