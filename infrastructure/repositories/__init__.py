"""Repository implementations."""
from .match_repository import MatchRepository
from .hero_repository import HeroPerformanceRepository

__all__ = [
    'MatchRepository',
    'HeroPerformanceRepository',
]
