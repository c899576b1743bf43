"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import List
from ..entities import Match
from ..enums import Region


class IMatchRepository(ABC):
    """Interface for match data repository.

    Implementations raise the ``domain.errors`` taxonomy rather than
    returning None, so callers can tell a 429 from a 404.
    """

    @abstractmethod
    async def get_match_by_id(self, region: Region, match_id: str) -> Match:
        """Get a single match by ID."""

    @abstractmethod
    async def get_match_ids_by_puuid(
        self,
        region: Region,
        puuid: str,
        start_time: int,
        start: int = 0,
        count: int = 100,
    ) -> List[str]:
        """Get at most ``count`` match IDs, newest first."""
