"""WebSocket push channel: one analysis session per connection at a time."""
import asyncio
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from application.session import AnalysisSession, ChannelClosedError, EventSink, parse_control_message
from domain.errors import MalformedMessageError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["WebSockets"])


class WebSocketEventSink(EventSink):
    """Sends envelopes as JSON text frames; a closed socket becomes ChannelClosedError."""

    def __init__(self, websocket: WebSocket) -> None:
        self.websocket = websocket

    async def send(self, payload: dict) -> None:
        if self.websocket.application_state != WebSocketState.CONNECTED:
            raise ChannelClosedError("websocket closed")
        try:
            await self.websocket.send_json(payload)
        except (WebSocketDisconnect, RuntimeError) as exc:
            raise ChannelClosedError(str(exc)) from exc


@router.websocket("/ws")
async def analysis_ws(websocket: WebSocket) -> None:
    await websocket.accept()
    logger.info("Client connected")
    repository = websocket.app.state.repository
    session_options = getattr(websocket.app.state, "session_options", {})
    task: asyncio.Task | None = None

    try:
        while True:
            frame = await websocket.receive()
            if frame["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(frame.get("code", 1000))
            raw = frame.get("text")
            if raw is None:
                logger.warning("Ignoring non-text frame")
                continue
            try:
                message = parse_control_message(json.loads(raw))
            except (json.JSONDecodeError, MalformedMessageError) as e:
                logger.warning(f"Ignoring malformed control message: {e}")
                continue

            if task is not None and not task.done():
                logger.warning("Analysis already running on this connection, ignoring startAnalysis")
                continue

            payload = message.payload
            session = AnalysisSession(repository, WebSocketEventSink(websocket), **session_options)
            task = asyncio.create_task(session.run(payload.match_ids, payload.puuid, payload.region))

    except WebSocketDisconnect:
        logger.info("Client disconnected")
    finally:
        # The session must not outlive its channel.
        if task is not None:
            if not task.done():
                task.cancel()
            await asyncio.gather(task, return_exceptions=True)
