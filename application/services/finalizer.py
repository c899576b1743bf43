"""Derives the season summary from a finished AggregateState."""
from __future__ import annotations

from typing import Callable, Iterable, Optional, Tuple, TypeVar

from config import settings
from domain.entities import AggregateState, AnalysisSummary, BestDuo, DuoRecord
from domain.enums import Persona

# reported when no game contributed a role; an empty teamPosition
# is counted under "" like any other label
UNKNOWN_ROLE = "UNKNOWN"

K = TypeVar("K")
V = TypeVar("V")


def first_max(items: Iterable[Tuple[K, V]], key: Callable[[V], float]) -> Optional[K]:
    """
    Key of the largest value, scanning left to right.

    Replacement is strictly-greater, so among equal maxima the first one
    seen wins. Returns None for an empty iterable.
    """
    best_key: Optional[K] = None
    best_score: Optional[float] = None
    for k, v in items:
        score = key(v)
        if best_score is None or score > best_score:
            best_key, best_score = k, score
    return best_key


def total_kda(kills: int, deaths: int, assists: int) -> str:
    return f"{(kills + assists) / (deaths or 1):.2f}"


def most_common_role(roles: dict[str, int]) -> str:
    role = first_max(roles.items(), key=lambda count: count)
    return UNKNOWN_ROLE if role is None else role


def player_persona(totals: dict[Persona, int]) -> str:
    persona = first_max(totals.items(), key=lambda total: total)
    return (persona or Persona.ALL_ROUNDER).value


def best_duo(teammates: dict[str, DuoRecord], min_games: int) -> Optional[BestDuo]:
    eligible = ((p, r) for p, r in teammates.items() if r.games >= min_games)
    puuid = first_max(eligible, key=lambda r: r.win_ratio)
    if puuid is None:
        return None
    record = teammates[puuid]
    return BestDuo(puuid=puuid, games=record.games, win_rate=record.win_ratio * 100)


def finalize(state: AggregateState, *, duo_min_games: int | None = None) -> AnalysisSummary:
    """Read-only: ``state`` is not modified."""
    min_games = settings.DUO_MIN_GAMES if duo_min_games is None else duo_min_games
    return AnalysisSummary(
        most_common_role=most_common_role(state.roles),
        kills=state.multi_kills,
        total_kda=total_kda(state.total_kills, state.total_deaths, state.total_assists),
        total_time_dead=state.total_time_dead,
        most_kills_game=state.most_kills_game,
        most_deaths_game=state.most_deaths_game,
        best_kda_game=state.best_kda_game,
        player_persona=player_persona(state.persona_totals),
        best_duo=best_duo(state.teammates, min_games),
        wins=state.wins,
        losses=state.losses,
    )
