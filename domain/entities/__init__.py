"""Domain entities."""
from .player import Player
from .match import MatchSummary, MatchParticipant
from .reports import UserGameInfo, UserHeroPerformance

__all__ = [
    'Player',
    'MatchSummary',
    'MatchParticipant',
    'UserGameInfo',
    'UserHeroPerformance',
]
