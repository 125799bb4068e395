"""Infrastructure layer - HTTP transport, API client, scrapers and repositories."""
from .api import SteamAPIClient, Transport, RetryPolicy
from .repositories import MatchRepository, HeroPerformanceRepository
from .logs import extract_lobby_players

__all__ = [
    'SteamAPIClient',
    'Transport',
    'RetryPolicy',
    'MatchRepository',
    'HeroPerformanceRepository',
    'extract_lobby_players',
]
