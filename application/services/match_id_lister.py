"""Season-window pagination over match-v5 ``by-puuid/{puuid}/ids``."""
from __future__ import annotations

from datetime import datetime
from typing import Callable, List

from config import settings
from core.logging.logger import get_logger
from domain.enums import Region
from domain.interfaces import IMatchRepository

logger = get_logger(__name__, service="lister")

# largest page the ids endpoint serves
MAX_PAGE_SIZE = 100


def season_start_timestamp(now: datetime | None = None) -> int:
    """Epoch seconds of January 1st 00:00 of the current year, local time."""
    now = now or datetime.now()
    return int(datetime(now.year, 1, 1).timestamp())


class MatchIdLister:
    """Collects every match id since the season start, one page at a time."""

    def __init__(
        self,
        repository: IMatchRepository,
        *,
        page_size: int | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.repository = repository
        requested = page_size or settings.MATCH_PAGE_SIZE
        if requested > MAX_PAGE_SIZE:
            logger.warning(f"page size {requested} exceeds {MAX_PAGE_SIZE}, using {MAX_PAGE_SIZE}")
        self.page_size = min(requested, MAX_PAGE_SIZE)
        self._clock = clock

    async def list_match_ids(self, puuid: str, region: Region) -> List[str]:
        start_time = season_start_timestamp(self._clock())
        match_ids: List[str] = []
        start = 0

        while True:
            page = await self.repository.get_match_ids_by_puuid(
                region, puuid, start_time, start=start, count=self.page_size
            )
            match_ids.extend(page)
            logger.debug(lambda: f"page start={start} returned {len(page)} ids")
            # a short page means history is exhausted; a full one may not be
            if len(page) < self.page_size:
                break
            start += self.page_size

        logger.info(f"Listed {len(match_ids)} matches since {start_time} for {region.value}")
        return match_ids
