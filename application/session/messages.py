"""Push-channel message envelopes."""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from domain.enums import Region
from domain.errors import MalformedMessageError


# ── Outbound ─────────────────────────────────────────────────────────────

class StatusEvent(BaseModel):
    type: Literal["status"] = "status"
    message: str


class ProgressEvent(BaseModel):
    type: Literal["progress"] = "progress"
    processed: int
    total: int


class CompleteEvent(BaseModel):
    type: Literal["complete"] = "complete"
    data: dict[str, Any]


class ErrorEvent(BaseModel):
    type: Literal["error"] = "error"
    message: str


TERMINAL_EVENTS = (CompleteEvent, ErrorEvent)


# ── Inbound ──────────────────────────────────────────────────────────────

class StartAnalysisPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    match_ids: list[str] = Field(alias="matchIds")
    puuid: str = Field(min_length=1)
    region: Region

    @field_validator("region", mode="before")
    @classmethod
    def _parse_region(cls, value: Any) -> Region:
        if isinstance(value, Region):
            return value
        if not isinstance(value, str):
            raise ValueError("region must be a string")
        return Region.from_string(value)


class StartAnalysisMessage(BaseModel):
    type: Literal["startAnalysis"]
    payload: StartAnalysisPayload


def parse_control_message(raw: Any) -> StartAnalysisMessage:
    """Validate an inbound frame; raises MalformedMessageError on anything else."""
    try:
        return StartAnalysisMessage.model_validate(raw)
    except ValidationError as exc:
        raise MalformedMessageError(
            f"invalid control message: {exc.error_count()} error(s)"
        ) from exc
