"""Session protocol: envelopes, event sinks and the analysis state machine."""
from .analysis_session import AnalysisSession, SessionState, FAILURE_MESSAGE
from .event_sink import CallbackEventSink, ChannelClosedError, EventSink, SessionEmitter
from .messages import (
    CompleteEvent,
    ErrorEvent,
    ProgressEvent,
    StartAnalysisMessage,
    StartAnalysisPayload,
    StatusEvent,
    parse_control_message,
)

__all__ = [
    "AnalysisSession",
    "SessionState",
    "FAILURE_MESSAGE",
    "CallbackEventSink",
    "ChannelClosedError",
    "EventSink",
    "SessionEmitter",
    "CompleteEvent",
    "ErrorEvent",
    "ProgressEvent",
    "StartAnalysisMessage",
    "StartAnalysisPayload",
    "StatusEvent",
    "parse_control_message",
]
