"""Application layer - Services and the analysis session."""
from .services import MatchAggregator, MatchIdLister, RateLimitedFetcher, finalize
from .session import AnalysisSession, SessionState

__all__ = [
    'MatchAggregator',
    'MatchIdLister',
    'RateLimitedFetcher',
    'finalize',
    'AnalysisSession',
    'SessionState',
]
