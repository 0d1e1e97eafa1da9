"""Loguru setup shared by the planner service and the command line."""
from __future__ import annotations

import sys
import typing as t
from pathlib import Path

from loguru import logger

from semester_planner.config import (
    LOG_COMPRESSION,
    LOG_FILE_FORMAT,
    LOG_FORMAT,
    LOG_RETENTION,
    LOG_ROTATION,
)


def setup_logger(
        level: str = "INFO",
        log_file: t.Optional[str] = None,
        console_format: str = LOG_FORMAT,
        file_format: str = LOG_FILE_FORMAT,
        rotation: str = LOG_ROTATION,
        retention: str = LOG_RETENTION,
        compression: t.Optional[str] = LOG_COMPRESSION,
) -> None:
    """Replace loguru's handlers with a stderr sink and an optional file sink.

    Formats and file rotation come from ``semester_planner.config`` unless
    given here.

    :param level: Minimum level for both sinks.
    :param log_file: Path of the rotating log file; console only when unset.
    :param compression: Archive format for rotated files, ``None`` to keep them plain.
    """
    logger.remove()
    logger.add(sys.stderr, format=console_format, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=file_format,
            level=level,
            rotation=rotation,
            retention=retention,
            compression=compression,
        )

    logger.debug(f"Logging at {level}" + (f" to {log_file}" if log_file else ""))
