"""Event sinks: where a session's envelopes go."""
from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

from core.logging.logger import get_logger
from domain.entities import AnalysisSummary

from .messages import (
    TERMINAL_EVENTS,
    CompleteEvent,
    ErrorEvent,
    ProgressEvent,
    StatusEvent,
)

logger = get_logger(__name__, service="session")


class ChannelClosedError(Exception):
    """The client side of the push channel is gone."""


class EventSink(ABC):
    """Transport for serialized envelopes. Must preserve call order."""

    @abstractmethod
    async def send(self, payload: dict[str, Any]) -> None:
        """Deliver one envelope; raise ChannelClosedError if the peer left."""


class CallbackEventSink(EventSink):
    """Hands each envelope to an async callback, e.g. a terminal renderer."""

    def __init__(self, callback: Callable[[dict[str, Any]], Awaitable[None]]) -> None:
        self._callback = callback

    async def send(self, payload: dict[str, Any]) -> None:
        await self._callback(payload)


class SessionEmitter:
    """
    Typed front for an EventSink bound to one session.

    Sends are serialized, and once a complete or error event has gone out
    every further emission is refused.
    """

    def __init__(self, sink: EventSink) -> None:
        self._sink = sink
        self._lock = asyncio.Lock()
        self._terminal: str | None = None

    @property
    def terminal_sent(self) -> str | None:
        """Type of the terminal event already delivered, if any."""
        return self._terminal

    async def _emit(self, event: StatusEvent | ProgressEvent | CompleteEvent | ErrorEvent) -> bool:
        async with self._lock:
            if self._terminal is not None:
                logger.warning(
                    lambda: f"dropping {event.type} event: session already ended with {self._terminal}"
                )
                return False
            await self._sink.send(event.model_dump())
            if isinstance(event, TERMINAL_EVENTS):
                self._terminal = event.type
            return True

    async def status(self, message: str) -> bool:
        return await self._emit(StatusEvent(message=message))

    async def progress(self, processed: int, total: int) -> bool:
        return await self._emit(ProgressEvent(processed=processed, total=total))

    async def complete(self, summary: AnalysisSummary) -> bool:
        return await self._emit(CompleteEvent(data=summary.to_dict()))

    async def error(self, message: str) -> bool:
        return await self._emit(ErrorEvent(message=message))
