"""Regional routing values for the match-v5 and account-v1 APIs."""
from enum import Enum


class Region(Enum):
    """Regional routing cluster; the host prefix for match/account APIs."""

    AMERICAS = "americas"
    EUROPE = "europe"
    ASIA = "asia"
    SEA = "sea"

    @property
    def regional_route(self) -> str:
        return self.value

    @property
    def base_url(self) -> str:
        return f"https://{self.regional_route}.api.riotgames.com"

    @classmethod
    def from_string(cls, value: str) -> 'Region':
        """Parse a routing value case-insensitively; raises ValueError if unknown."""
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError(f"Unknown region: {value!r}") from None
