"""Derived season summary, the payload of the completion event."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .aggregate import BestKdaGame, GameSnapshot, MultiKills


@dataclass(frozen=True)
class BestDuo:
    puuid: str
    games: int
    win_rate: float  # percentage, 0-100

    def to_dict(self) -> dict:
        return {'puuid': self.puuid, 'games': self.games, 'winRate': self.win_rate}


@dataclass(frozen=True)
class AnalysisSummary:
    most_common_role: str
    kills: MultiKills
    total_kda: str  # two decimals, e.g. "2.67"
    total_time_dead: int
    most_kills_game: GameSnapshot
    most_deaths_game: GameSnapshot
    best_kda_game: Optional[BestKdaGame]
    player_persona: str
    best_duo: Optional[BestDuo]
    wins: int
    losses: int

    def to_dict(self) -> dict:
        return {
            'mostCommonRole': self.most_common_role,
            'kills': self.kills.to_dict(),
            'totalKda': self.total_kda,
            'totalTimeDead': self.total_time_dead,
            'mostKillsGame': self.most_kills_game.to_dict(),
            'mostDeathsGame': self.most_deaths_game.to_dict(),
            'bestKdaGame': self.best_kda_game.to_dict() if self.best_kda_game else None,
            'playerPersona': self.player_persona,
            'bestDuo': self.best_duo.to_dict() if self.best_duo else None,
            'wins': self.wins,
            'losses': self.losses,
        }
