"""Domain layer - Business entities, enums, errors and interfaces."""
from .entities import (
    Participant, Match, AggregateState, GameSnapshot, BestKdaGame,
    DuoRecord, MultiKills, AnalysisSummary, BestDuo,
)
from .enums import Region, Persona
from .interfaces import IMatchRepository

__all__ = [
    # Entities
    'Participant',
    'Match',
    'AggregateState',
    'GameSnapshot',
    'BestKdaGame',
    'DuoRecord',
    'MultiKills',
    'AnalysisSummary',
    'BestDuo',
    # Enums
    'Region',
    'Persona',
    # Interfaces
    'IMatchRepository',
]
