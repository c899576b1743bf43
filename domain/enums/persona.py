"""Persona labels derived from the dominant accumulated stat."""
from enum import Enum


class Persona(Enum):
    """Player persona; member order is the tie-break order of the scan."""

    CARRY = "The Carry"
    TANK = "The Unkillable Tank"
    VISIONARY = "The Visionary"
    OBJECTIVE_FIEND = "The Objective Fiend"

    ALL_ROUNDER = "The All-Rounder"  # fallback, never tracked

    @property
    def stat_field(self) -> str | None:
        """Participant field whose running sum backs this persona."""
        return _STAT_FIELDS.get(self)

    @classmethod
    def tracked(cls) -> list['Persona']:
        return [p for p in cls if p.stat_field is not None]


_STAT_FIELDS = {
    Persona.CARRY: "total_damage_dealt_to_champions",
    Persona.TANK: "total_damage_taken",
    Persona.VISIONARY: "vision_score",
    Persona.OBJECTIVE_FIEND: "damage_dealt_to_objectives",
}
