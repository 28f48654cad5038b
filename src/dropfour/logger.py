from __future__ import annotations

import sys
from pathlib import Path
from typing import List

from loguru import logger

from dropfour.config import LOG_LEVEL, LOG_ROTATION

# Entry points fan logs into a shared file under logs/; library code only
# emits through `logger` and stays disabled until someone opts in.
_sink_ids: List[int] = []


def log_dir() -> Path:
    base = Path.cwd() / "logs"
    base.mkdir(parents=True, exist_ok=True)
    return base


def configure_logging(level: str = LOG_LEVEL, console: bool = False) -> List[int]:
    """
    Enable dropfour logging at `level`: a rotating file sink under logs/ and,
    with `console`, a stderr sink at the same level.

    Drops every sink first (loguru's DEBUG stderr default included), so each
    call fully replaces the previous setup. Returns the new sink ids.
    """
    level = level.upper()
    logger.remove()
    _sink_ids.clear()
    logger.enable("dropfour")

    _sink_ids.append(logger.add(
        log_dir() / "dropfour.log",
        rotation=LOG_ROTATION,
        level=level,
        filter="dropfour",
    ))
    if console:
        _sink_ids.append(logger.add(sys.stderr, level=level, filter="dropfour"))
    return list(_sink_ids)
