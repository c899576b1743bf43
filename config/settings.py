"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, '').strip()
    return int(raw) if raw else None


class Settings:
    """
    Runtime configuration, read once from the environment.

    Riot personal keys allow 20 req/s and 100 req/120s. Sessions do not
    share a limiter: each one honours Retry-After on its own and throttles
    between matches, so several open sessions simply back off harder.
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: int = int(os.getenv('REQUEST_TIMEOUT', '30'))

    # ── Match listing ──────────────────────────────────────────────────────
    MATCH_PAGE_SIZE: int = 100  # match-v5 hard maximum for `count`

    # ── Match fetching ─────────────────────────────────────────────────────
    MATCH_THROTTLE_SECONDS:         float         = float(os.getenv('MATCH_THROTTLE_SECONDS', '0.1'))
    RATE_LIMIT_DEFAULT_RETRY_AFTER: int           = 1
    # Unset = retry 429s forever.
    RATE_LIMIT_MAX_RETRIES:         Optional[int] = _optional_int('RATE_LIMIT_MAX_RETRIES')

    # ── Summary ────────────────────────────────────────────────────────────
    DUO_MIN_GAMES: int = int(os.getenv('DUO_MIN_GAMES', '5'))

    # ── Server ─────────────────────────────────────────────────────────────
    SERVER_HOST: str = os.getenv('SERVER_HOST', '0.0.0.0')
    PORT:        int = int(os.getenv('PORT', '3001'))

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(BASE_DIR / 'data' / 'logs')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in config/.env")


settings = Settings()
