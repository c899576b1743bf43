from typing import Any, Dict, List

from application.session import EventSink
from domain.entities import Match
from domain.enums import Region
from domain.interfaces import IMatchRepository
from infrastructure.repositories import MatchRepository

TARGET = "puuid-target"


def participant(puuid: str = TARGET, *, team_id: int = 100, **stats: Any) -> Dict[str, Any]:
    """Raw match-v5 participant with zeroed stats, overridable by camelCase key."""
    data: Dict[str, Any] = {
        "puuid": puuid,
        "teamId": team_id,
        "championName": "Ahri",
        "teamPosition": "MIDDLE",
        "win": False,
        "kills": 0,
        "deaths": 0,
        "assists": 0,
        "totalTimeSpentDead": 0,
        "doubleKills": 0,
        "tripleKills": 0,
        "quadraKills": 0,
        "pentaKills": 0,
        "totalDamageDealtToChampions": 0,
        "totalDamageTaken": 0,
        "visionScore": 0,
        "damageDealtToObjectives": 0,
    }
    data.update(stats)
    return data


def match_payload(match_id: str, participants: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"metadata": {"matchId": match_id}, "info": {"participants": participants}}


def match(match_id: str, participants: List[Dict[str, Any]]) -> Match:
    return MatchRepository.parse_match_data(match_payload(match_id, participants))


class FakeMatchRepository(IMatchRepository):
    """In-memory repository; ``failures`` raise in order before the match is served."""

    def __init__(self, matches=None, pages=None, failures=None):
        self.matches: Dict[str, Dict[str, Any]] = matches or {}
        self.pages: List[List[str]] = list(pages or [])
        self.failures: Dict[str, List[Exception]] = failures or {}
        self.match_calls: List[str] = []
        self.page_calls: List[tuple] = []

    async def get_match_by_id(self, region: Region, match_id: str) -> Match:
        self.match_calls.append(match_id)
        pending = self.failures.get(match_id)
        if pending:
            raise pending.pop(0)
        return MatchRepository.parse_match_data(self.matches[match_id], match_id)

    async def get_match_ids_by_puuid(self, region, puuid, start_time, start=0, count=100):
        self.page_calls.append((start_time, start, count))
        index = len(self.page_calls) - 1
        return list(self.pages[index]) if index < len(self.pages) else []


class RecordingSink(EventSink):
    def __init__(self):
        self.events: List[Dict[str, Any]] = []

    async def send(self, payload):
        self.events.append(payload)

    def of_type(self, kind: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["type"] == kind]


class FakeSleep:
    """Stand-in for asyncio.sleep that records the requested delays."""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.calls)
