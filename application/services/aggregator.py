"""Folds fetched matches into a session's AggregateState."""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional, Sequence

from config import settings
from core.logging.logger import get_logger
from domain.entities import (
    AggregateState,
    BestKdaGame,
    DuoRecord,
    GameSnapshot,
    Match,
    Participant,
)

from .match_fetcher import RateLimitedFetcher, Sleeper

ProgressNotifier = Callable[[int, int], Awaitable[object]]

logger = get_logger(__name__, service="aggregator")


def _is_better_kd(candidate: Participant, best: Optional[BestKdaGame]) -> bool:
    kd = candidate.kd
    if best is None or kd > best.kd:
        return True
    return kd == best.kd and candidate.kills > best.kills


def fold(state: AggregateState, match: Match, puuid: str) -> bool:
    """
    Add one match to ``state``.

    Returns False, leaving ``state`` untouched, when ``puuid`` did not play
    in the match. The caller still counts it as processed.
    """
    me = match.find_participant(puuid)
    if me is None:
        return False

    state.total_kills += me.kills
    state.total_deaths += me.deaths
    state.total_assists += me.assists
    state.total_time_dead += me.total_time_spent_dead
    state.multi_kills.double_kills += me.double_kills
    state.multi_kills.triple_kills += me.triple_kills
    state.multi_kills.quadra_kills += me.quadra_kills
    state.multi_kills.penta_kills += me.penta_kills

    state.roles[me.team_position] = state.roles.get(me.team_position, 0) + 1
    if me.win:
        state.wins += 1
    else:
        state.losses += 1

    for persona in state.persona_totals:
        state.persona_totals[persona] += getattr(me, persona.stat_field)

    # highlights: strictly greater only, ties keep the earlier game
    if me.kills > state.most_kills_game.kills:
        state.most_kills_game = GameSnapshot.of(me)
    if me.deaths > state.most_deaths_game.deaths:
        state.most_deaths_game = GameSnapshot.of(me)

    # deathless games have no finite kd and are never eligible
    if me.deaths > 0 and _is_better_kd(me, state.best_kda_game):
        state.best_kda_game = BestKdaGame.of(me)

    for mate in match.teammates_of(me):
        record = state.teammates.setdefault(mate.puuid, DuoRecord())
        record.games += 1
        if me.win:
            record.wins += 1

    return True


class MatchAggregator:
    """Runs the fetch → fold → progress → throttle loop, strictly in order."""

    def __init__(
        self,
        fetcher: RateLimitedFetcher,
        *,
        on_progress: Optional[ProgressNotifier] = None,
        throttle_seconds: float | None = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self.fetcher = fetcher
        self._on_progress = on_progress
        self.throttle_seconds = (
            settings.MATCH_THROTTLE_SECONDS if throttle_seconds is None else throttle_seconds
        )
        self._sleep = sleep

    async def run(
        self,
        match_ids: Sequence[str],
        puuid: str,
        state: AggregateState | None = None,
    ) -> AggregateState:
        state = state if state is not None else AggregateState()
        total = len(match_ids)

        for match_id in match_ids:
            match = await self.fetcher.fetch(match_id)
            if not fold(state, match, puuid):
                logger.debug(lambda: f"{match_id}: player not among participants, skipped")
            state.processed += 1
            if self._on_progress is not None:
                await self._on_progress(state.processed, total)
            await self._sleep(self.throttle_seconds)

        return state
