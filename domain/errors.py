"""Error taxonomy for remote fetches and inbound control messages."""
from __future__ import annotations

from typing import Optional


class RiotAPIError(Exception):
    """Base class for every failure talking to the Riot API."""

    status_code: Optional[int] = None

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class RateLimitedError(RiotAPIError):
    """HTTP 429. The only recoverable kind: wait ``retry_after`` seconds and retry."""

    status_code = 429

    def __init__(self, retry_after: int, *, url: str | None = None) -> None:
        super().__init__(f"rate limited, retry after {retry_after}s", url=url)
        self.retry_after = retry_after


class TerminalFetchError(RiotAPIError):
    """A fetch failure that aborts the analysis session."""


class NotFoundError(TerminalFetchError):
    status_code = 404


class AuthError(TerminalFetchError):
    """401/403: missing, expired or revoked API key."""

    def __init__(self, status_code: int, *, url: str | None = None) -> None:
        super().__init__(f"HTTP {status_code}: check RIOT_API_KEY", url=url)
        self.status_code = status_code


class HTTPStatusError(TerminalFetchError):
    def __init__(self, status_code: int, *, url: str | None = None) -> None:
        super().__init__(f"HTTP {status_code}", url=url)
        self.status_code = status_code


class NetworkError(TerminalFetchError):
    """Transport-level failure: DNS, connect, timeout, reset."""


class RetryLimitExceededError(TerminalFetchError):
    """Raised when an explicit rate-limit retry ceiling is configured and hit."""

    status_code = 429

    def __init__(self, attempts: int, *, url: str | None = None) -> None:
        super().__init__(f"still rate limited after {attempts} retries", url=url)
        self.attempts = attempts


class MalformedMessageError(ValueError):
    """Inbound control message is not a valid ``startAnalysis`` trigger."""
