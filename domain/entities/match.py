"""Match entity representing one match-v5 record."""
from dataclasses import dataclass, field
from typing import Optional
from .participant import Participant


@dataclass
class Match:
    """A match as seen by the summary: its id and its ten participants."""

    match_id: str
    participants: list[Participant] = field(default_factory=list)

    def find_participant(self, puuid: str) -> Optional[Participant]:
        """First participant with this puuid, or None if the player is absent."""
        return next((p for p in self.participants if p.puuid == puuid), None)

    def teammates_of(self, participant: Participant) -> list[Participant]:
        """Everyone else on the participant's team, in payload order."""
        return [
            p for p in self.participants
            if p.team_id == participant.team_id and p.puuid != participant.puuid
        ]
