"""Match repository implementation."""
import logging
from typing import List

from domain.entities import Match, Participant
from domain.enums import Region
from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class MatchRepository(IMatchRepository):
    """Repository for match data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize match repository.

        Args:
            api_client: Riot API client instance, already entered
        """
        self.api_client = api_client

    async def get_match_ids_by_puuid(
        self,
        region: Region,
        puuid: str,
        start_time: int,
        start: int = 0,
        count: int = 100,
    ) -> List[str]:
        """Get match IDs for a player, newest first."""
        return await self.api_client.list_match_ids(
            region=region,
            puuid=puuid,
            start_time=start_time,
            start=start,
            count=count,
        )

    async def get_match_by_id(self, region: Region, match_id: str) -> Match:
        """
        Get a single match by ID.

        Args:
            region: Regional routing value
            match_id: Match identifier

        Returns:
            Match entity

        Raises:
            RiotAPIError subclasses, unchanged from the client
        """
        match_data = await self.api_client.fetch_match_detail(region, match_id)
        return self.parse_match_data(match_data, match_id)

    @classmethod
    def parse_match_data(cls, data: dict, match_id: str = '') -> Match:
        """Parse raw API match data into Match entity."""
        metadata = data.get('metadata') or {}
        info = data.get('info') or {}
        participants = [cls.parse_participant_data(p) for p in info.get('participants', [])]
        return Match(
            match_id=metadata.get('matchId', match_id),
            participants=participants,
        )

    @staticmethod
    def parse_participant_data(p_data: dict) -> Participant:
        """Parse raw participant data into Participant entity."""
        return Participant(
            puuid=p_data.get('puuid', ''),
            team_id=p_data.get('teamId', 0),
            champion_name=p_data.get('championName', ''),
            team_position=p_data.get('teamPosition') or '',
            # Game outcome
            win=bool(p_data.get('win', False)),
            kills=p_data.get('kills', 0),
            deaths=p_data.get('deaths', 0),
            assists=p_data.get('assists', 0),
            total_time_spent_dead=p_data.get('totalTimeSpentDead', 0),
            # Multi-kills
            double_kills=p_data.get('doubleKills', 0),
            triple_kills=p_data.get('tripleKills', 0),
            quadra_kills=p_data.get('quadraKills', 0),
            penta_kills=p_data.get('pentaKills', 0),
            # Persona stats
            total_damage_dealt_to_champions=p_data.get('totalDamageDealtToChampions', 0),
            total_damage_taken=p_data.get('totalDamageTaken', 0),
            vision_score=p_data.get('visionScore', 0),
            damage_dealt_to_objectives=p_data.get('damageDealtToObjectives', 0),
        )
