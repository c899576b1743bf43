"""Domain entities."""
from .participant import Participant
from .match import Match
from .aggregate import AggregateState, BestKdaGame, DuoRecord, GameSnapshot, MultiKills
from .summary import AnalysisSummary, BestDuo

__all__ = [
    'Participant',
    'Match',
    'AggregateState',
    'BestKdaGame',
    'DuoRecord',
    'GameSnapshot',
    'MultiKills',
    'AnalysisSummary',
    'BestDuo',
]
