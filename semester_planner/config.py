# -*- coding: utf-8 -*-
import os

# Defaults are configurable via environment variables
DEFAULT_DAYS_PER_WEEK = int(os.getenv("SEMESTER_PLANNER_DAYS_PER_WEEK", "3"))
DEFAULT_FOCUS_DURATION = int(os.getenv("SEMESTER_PLANNER_FOCUS_DURATION", "45"))
MAX_WINDOW_DAYS = int(os.getenv("SEMESTER_PLANNER_MAX_WINDOW_DAYS", "366"))

LOG_LEVEL = os.getenv("SEMESTER_PLANNER_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("SEMESTER_PLANNER_LOG_FILE") or None

# Console format is colorized by loguru; the file format stays plain
LOG_FORMAT = os.getenv(
    "SEMESTER_PLANNER_LOG_FORMAT",
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
)
LOG_FILE_FORMAT = os.getenv(
    "SEMESTER_PLANNER_LOG_FILE_FORMAT",
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
)
LOG_ROTATION = os.getenv("SEMESTER_PLANNER_LOG_ROTATION", "10 MB")
LOG_RETENTION = os.getenv("SEMESTER_PLANNER_LOG_RETENTION", "7 days")
LOG_COMPRESSION = os.getenv("SEMESTER_PLANNER_LOG_COMPRESSION", "zip") or None
