"""Infrastructure API module."""
from .riot_client import RiotAPIClient, parse_retry_after

__all__ = [
    'RiotAPIClient',
    'parse_retry_after',
]
