"""Participant entity representing a player in a match."""
from dataclasses import dataclass


@dataclass
class Participant:
    """Per-player, per-match facts used by the season summary."""

    # Identity
    puuid: str

    # Match context
    team_id: int
    champion_name: str = ""
    team_position: str = ""  # raw label, may be empty

    # Match outcome
    win: bool = False
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    total_time_spent_dead: int = 0

    # Multi-kills
    double_kills: int = 0
    triple_kills: int = 0
    quadra_kills: int = 0
    penta_kills: int = 0

    # Persona stats
    total_damage_dealt_to_champions: int = 0
    total_damage_taken: int = 0
    vision_score: int = 0
    damage_dealt_to_objectives: int = 0

    @property
    def kd(self) -> float | None:
        """Kills per death, or None for deathless games."""
        if self.deaths <= 0:
            return None
        return self.kills / self.deaths
