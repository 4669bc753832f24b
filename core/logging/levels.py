from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def register_levels() -> None:
    for lvl in (LogLevel.TRACE, LogLevel.SUCCESS):
        if logging.getLevelName(int(lvl)) != lvl.name:
            logging.addLevelName(int(lvl), lvl.name)


def to_level(value: int | str) -> int:
    """Map a level name or number to an int; unknown names fall back to INFO."""
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name.isdigit():
        return int(name)
    name = _ALIASES.get(name, name)
    if name in LogLevel.__members__:
        return int(LogLevel[name])
    return logging.INFO
