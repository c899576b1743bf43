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


_CUSTOM = {LogLevel.TRACE: "TRACE", LogLevel.SUCCESS: "SUCCESS"}


def register_levels() -> None:
    for value, name in _CUSTOM.items():
        if logging.getLevelName(int(value)) != name:
            logging.addLevelName(int(value), name)


def to_level(value: int | str | None, default: int = logging.INFO) -> int:
    """Resolve a level name or number, falling back to ``default``."""
    if value is None:
        return default
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name in LogLevel.__members__:
        return int(LogLevel[name])
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else default
