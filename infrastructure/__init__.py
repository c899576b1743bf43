"""Infrastructure layer - API clients and repositories."""
from .api import RiotAPIClient
from .repositories import MatchRepository

__all__ = [
    'RiotAPIClient',
    'MatchRepository',
]
