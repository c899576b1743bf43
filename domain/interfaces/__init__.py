"""Domain interfaces."""
from .repository import IMatchRepository

__all__ = [
    'IMatchRepository',
]
