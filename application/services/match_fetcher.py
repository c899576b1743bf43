"""Per-match fetch with Retry-After aware rate-limit handling."""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

from core.logging.logger import get_logger
from domain.entities import Match
from domain.enums import Region
from domain.errors import RateLimitedError, RetryLimitExceededError
from domain.interfaces import IMatchRepository

StatusNotifier = Callable[[str], Awaitable[object]]
Sleeper = Callable[[float], Awaitable[None]]

logger = get_logger(__name__, service="fetcher")


class RateLimitedFetcher:
    """
    Fetches one match at a time, sitting out every 429 for as long as the
    server asks and then repeating the same request.

    By default there is no retry ceiling. Pass ``max_retries`` to turn an
    endless 429 streak into a RetryLimitExceededError. Anything other than
    a 429 propagates untouched.
    """

    def __init__(
        self,
        repository: IMatchRepository,
        region: Region,
        *,
        on_status: Optional[StatusNotifier] = None,
        sleep: Sleeper = asyncio.sleep,
        max_retries: Optional[int] = None,
    ) -> None:
        self.repository = repository
        self.region = region
        self._on_status = on_status
        self._sleep = sleep
        self.max_retries = max_retries

    async def fetch(self, match_id: str) -> Match:
        retries = 0
        while True:
            try:
                return await self.repository.get_match_by_id(self.region, match_id)
            except RateLimitedError as exc:
                if self.max_retries is not None and retries >= self.max_retries:
                    logger.error(lambda: f"{match_id}: giving up after {retries} rate-limit retries")
                    raise RetryLimitExceededError(retries, url=exc.url) from exc
                retries += 1
                wait = exc.retry_after
                logger.warning(f"Rate limited. Retrying after {wait} seconds...")
                if self._on_status is not None:
                    await self._on_status(f"Rate limited. Retrying in {wait}s...")
                await self._sleep(wait)
