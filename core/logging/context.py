from __future__ import annotations

import contextvars
import logging
from typing import Any, Dict

# Each asyncio task gets its own copy, so concurrent sessions never see
# each other's keys. Handlers on another thread read ``record.context``.
_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


class ContextFilter(logging.Filter):
    """Copies the caller's bound keys onto the record before it changes threads."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = get_context()
        return True


class context(object):
    """Temporarily bind log keys for the duration of a ``with`` block."""

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token = None

    def __enter__(self):
        current = dict(_context.get())
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb):
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False
