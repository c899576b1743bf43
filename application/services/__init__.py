"""Application services root exports."""
from .match_fetcher import RateLimitedFetcher
from .match_id_lister import MatchIdLister, season_start_timestamp
from .aggregator import MatchAggregator, fold
from .finalizer import finalize

__all__ = [
    "RateLimitedFetcher",
    "MatchIdLister",
    "season_start_timestamp",
    "MatchAggregator",
    "fold",
    "finalize",
]
