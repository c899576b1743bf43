"""Riot Games API client."""
import logging
import math
from typing import Optional, Dict, Any, List
import httpx

from config import settings
from domain.enums import Region
from domain.errors import (
    AuthError,
    HTTPStatusError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
)

logger = logging.getLogger(__name__)


def parse_retry_after(value: Optional[str], default: int) -> int:
    """Seconds from a Retry-After header; ``default`` if absent, non-numeric or zero."""
    if value is None:
        return default
    try:
        seconds = float(value.strip())
    except ValueError:
        return default
    if not math.isfinite(seconds):
        return default
    # fractional delays truncate to whole seconds
    whole = int(seconds)
    return whole if whole > 0 else default


class RiotAPIClient:
    """
    Asynchronous Riot API client.

    Pure transport: one GET per call, HTTP failures translated into the
    ``domain.errors`` taxonomy. Retrying is the caller's business.
    """

    def __init__(
        self,
        api_key: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key  = api_key
        self.session: Optional[httpx.AsyncClient] = None
        self.timeout  = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self._transport = transport

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _get(self, url: str, params: Dict[str, Any] | None = None) -> Any:
        if self.session is None:
            raise RuntimeError("RiotAPIClient used outside of 'async with'")

        try:
            response = await self.session.get(url, params=params)
        except httpx.HTTPError as exc:
            logger.error(f"Network error for {url}: {exc}")
            raise NetworkError(str(exc) or type(exc).__name__, url=url) from exc

        if response.is_success:
            return response.json()

        status = response.status_code
        if status == 429:
            retry_after = parse_retry_after(
                response.headers.get("Retry-After"),
                settings.RATE_LIMIT_DEFAULT_RETRY_AFTER,
            )
            raise RateLimitedError(retry_after, url=url)

        if status == 404:
            raise NotFoundError(f"HTTP 404 for {url}", url=url)

        if status in (401, 403):
            logger.error(f"{status}: check RIOT_API_KEY")
            raise AuthError(status, url=url)

        logger.warning(f"HTTP {status} for {url}")
        raise HTTPStatusError(status, url=url)

    # ── Match API ──────────────────────────────────────────────────────

    async def list_match_ids(
        self,
        region: Region,
        puuid: str,
        start_time: int,
        start: int = 0,
        count: int = 100,
    ) -> List[str]:
        url = f"{region.base_url}/lol/match/v5/matches/by-puuid/{puuid}/ids"
        params = {"startTime": start_time, "start": start, "count": min(count, 100)}
        result = await self._get(url, params)
        return result if isinstance(result, list) else []

    async def fetch_match_detail(self, region: Region, match_id: str) -> Dict[str, Any]:
        return await self._get(f"{region.base_url}/lol/match/v5/matches/{match_id}")
