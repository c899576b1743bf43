"""Running aggregate for one analysis session."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..enums import Persona
from .participant import Participant


@dataclass
class GameSnapshot:
    """Headline numbers of a single game, kept for the highlight reel."""

    kills: int
    deaths: int
    assists: int
    champion_name: str

    @classmethod
    def of(cls, p: Participant) -> "GameSnapshot":
        return cls(kills=p.kills, deaths=p.deaths, assists=p.assists, champion_name=p.champion_name)

    def to_dict(self) -> dict:
        return {
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'championName': self.champion_name,
        }


@dataclass
class BestKdaGame(GameSnapshot):
    kd: float = 0.0

    @classmethod
    def of(cls, p: Participant) -> "BestKdaGame":
        return cls(
            kills=p.kills, deaths=p.deaths, assists=p.assists,
            champion_name=p.champion_name, kd=p.kd,
        )

    def to_dict(self) -> dict:
        return {'kd': self.kd, **super().to_dict()}


@dataclass
class DuoRecord:
    games: int = 0
    wins: int = 0

    @property
    def win_ratio(self) -> float:
        return self.wins / self.games if self.games else 0.0


@dataclass
class MultiKills:
    double_kills: int = 0
    triple_kills: int = 0
    quadra_kills: int = 0
    penta_kills: int = 0

    def to_dict(self) -> dict:
        return {
            'pentaKills': self.penta_kills,
            'quadraKills': self.quadra_kills,
            'tripleKills': self.triple_kills,
            'doubleKills': self.double_kills,
        }


def _persona_totals() -> dict[Persona, int]:
    return {persona: 0 for persona in Persona.tracked()}


@dataclass
class AggregateState:
    """
    Everything the summary needs, folded one match at a time.

    Owned by exactly one session. The dicts rely on insertion order: the
    finalizer scans them first-seen-first, so ties resolve to whichever key
    was recorded earliest.
    """

    total_kills: int = 0
    total_deaths: int = 0
    total_assists: int = 0
    total_time_dead: int = 0
    multi_kills: MultiKills = field(default_factory=MultiKills)

    wins: int = 0
    losses: int = 0
    roles: dict[str, int] = field(default_factory=dict)
    persona_totals: dict[Persona, int] = field(default_factory=_persona_totals)

    # Sentinels of -1 so the first game always replaces them.
    most_kills_game: GameSnapshot = field(default_factory=lambda: GameSnapshot(-1, 0, 0, ''))
    most_deaths_game: GameSnapshot = field(default_factory=lambda: GameSnapshot(0, -1, 0, ''))
    best_kda_game: Optional[BestKdaGame] = None

    teammates: dict[str, DuoRecord] = field(default_factory=dict)

    processed: int = 0
