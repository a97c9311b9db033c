"""Loguru sinks for the plus codes library.

The library only logs at DEBUG: shortening and recovery decisions, and
input rejected just before an error is raised. Set the level to DEBUG to see
them on stderr, in the opt-in JSON sink (records bound with
``json_output=True``) or in the rotating file under ``log_dir``.
"""

import sys
from pathlib import Path

from loguru import logger

from plus_codes.core.config import get_settings

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"


def setup_logging(log_level: str | None = None, log_dir: str | None = None) -> None:
    """Configure Loguru sinks.

    Args:
        log_level: Minimum log level to emit. Defaults to
            ``Settings.log_level``.
        log_dir: Optional directory for log files. Defaults to
            ``Settings.log_dir``. When set, a rotating file sink is added
            (rotated every 24 hours, retained 7 days).
    """
    if log_level is None or log_dir is None:
        settings = get_settings()
        log_level = log_level or settings.log_level
        log_dir = log_dir or settings.log_dir

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=_LOG_FORMAT,
        serialize=False,
    )
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        serialize=True,
        filter=lambda record: record["extra"].get("json_output", False),
    )

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / "plus-codes.log",
            level=log_level.upper(),
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )
