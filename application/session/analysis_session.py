"""One client's analysis run: state machine plus terminal-event discipline."""
from __future__ import annotations

import asyncio
import uuid
from enum import Enum
from typing import Optional, Sequence

from config import settings
from core.logging import context as log_context
from core.logging.logger import get_logger
from domain.entities import AggregateState, AnalysisSummary
from domain.enums import Region
from domain.interfaces import IMatchRepository
from application.services.aggregator import MatchAggregator
from application.services.finalizer import finalize
from application.services.match_fetcher import RateLimitedFetcher, Sleeper
from application.services.match_id_lister import MatchIdLister

from .event_sink import ChannelClosedError, EventSink, SessionEmitter

logger = get_logger(__name__, service="session")

FAILURE_MESSAGE = "Failed to analyze matches"


class SessionState(Enum):
    IDLE = "idle"
    FETCHING_IDS = "fetching_ids"
    PROCESSING = "processing"
    FINALIZING = "finalizing"
    COMPLETE = "complete"
    ABORTED = "aborted"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.COMPLETE, SessionState.ABORTED, SessionState.CANCELLED)


class AnalysisSession:
    """
    Drives one season analysis for one client.

    The AggregateState lives only inside ``run`` and is dropped once the
    terminal event is out. Cancelling the task running ``run`` (or the
    channel closing under it) lands in CANCELLED, with no terminal event
    since nobody is left to receive it.
    """

    def __init__(
        self,
        repository: IMatchRepository,
        sink: EventSink,
        *,
        session_id: str | None = None,
        throttle_seconds: float | None = None,
        max_rate_limit_retries: Optional[int] = None,
        duo_min_games: int | None = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self.repository = repository
        self.session_id = session_id or uuid.uuid4().hex[:12]
        self.emitter = SessionEmitter(sink)
        self._throttle_seconds = throttle_seconds
        self._max_retries = (
            settings.RATE_LIMIT_MAX_RETRIES if max_rate_limit_retries is None else max_rate_limit_retries
        )
        self._duo_min_games = duo_min_games
        self._sleep = sleep
        self._state = SessionState.IDLE

    @property
    def state(self) -> SessionState:
        return self._state

    def _transition(self, new_state: SessionState) -> None:
        logger.debug(lambda: f"{self._state.value} -> {new_state.value}")
        self._state = new_state

    async def run_for_player(self, puuid: str, region: Region) -> Optional[AnalysisSummary]:
        """List the season's match ids first, then analyze them."""
        if self._state is not SessionState.IDLE:
            raise RuntimeError(f"session {self.session_id} already started")
        with log_context(session_id=self.session_id, puuid=puuid, region=region.value):
            self._transition(SessionState.FETCHING_IDS)
            try:
                match_ids = await MatchIdLister(self.repository).list_match_ids(puuid, region)
                await self.emitter.status(f"Found {len(match_ids)} matches this season")
            except (asyncio.CancelledError, ChannelClosedError):
                self._transition(SessionState.CANCELLED)
                raise
            except Exception:
                logger.exception("Error while listing match ids")
                await self._abort()
                return None
            return await self._process(match_ids, puuid, region)

    async def run(self, match_ids: Sequence[str], puuid: str, region: Region) -> Optional[AnalysisSummary]:
        """
        Analyze pre-listed ``match_ids``.

        Returns the summary on COMPLETE, None on ABORTED. Re-raises
        CancelledError after recording CANCELLED.
        """
        if self._state is not SessionState.IDLE:
            raise RuntimeError(f"session {self.session_id} already started")
        with log_context(session_id=self.session_id, puuid=puuid, region=region.value):
            return await self._process(match_ids, puuid, region)

    async def _process(self, match_ids: Sequence[str], puuid: str, region: Region) -> Optional[AnalysisSummary]:
        logger.info(f"Analyzing {len(match_ids)} matches")
        self._transition(SessionState.PROCESSING)
        fetcher = RateLimitedFetcher(
            self.repository,
            region,
            on_status=self.emitter.status,
            sleep=self._sleep,
            max_retries=self._max_retries,
        )
        aggregator = MatchAggregator(
            fetcher,
            on_progress=self.emitter.progress,
            throttle_seconds=self._throttle_seconds,
            sleep=self._sleep,
        )
        try:
            state: AggregateState = await aggregator.run(match_ids, puuid)
            self._transition(SessionState.FINALIZING)
            summary = finalize(state, duo_min_games=self._duo_min_games)
            await self.emitter.complete(summary)
        except (asyncio.CancelledError, ChannelClosedError):
            logger.info("Client went away, stopping analysis")
            self._transition(SessionState.CANCELLED)
            raise
        except Exception:
            logger.exception("Error during match processing")
            await self._abort()
            return None

        self._transition(SessionState.COMPLETE)
        logger.success(
            lambda: f"Analysis complete: {summary.wins}W/{summary.losses}L, KDA {summary.total_kda}"
        )
        return summary

    async def _abort(self) -> None:
        self._transition(SessionState.ABORTED)
        try:
            await self.emitter.error(FAILURE_MESSAGE)
        except ChannelClosedError:
            logger.info("Client went away before the error event could be sent")
