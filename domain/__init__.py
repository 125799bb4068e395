"""Domain layer - entities, enums, error taxonomy and interfaces."""
from .entities import Player, MatchSummary, MatchParticipant, UserGameInfo, UserHeroPerformance
from .enums import Outcome, LobbyType
from .errors import (
    ErrorKind, ApiError, TooManyRequests, AccessForbidden, PrivateProfile,
    MatchNotFound, Parsing, Unknown, NetworkFailure, Generic,
)
from .result import Ok, Err, Result
from .interfaces import IStatisticsProvider

__all__ = [
    # Entities
    'Player',
    'MatchSummary',
    'MatchParticipant',
    'UserGameInfo',
    'UserHeroPerformance',
    # Enums
    'Outcome',
    'LobbyType',
    # Errors
    'ErrorKind',
    'ApiError',
    'TooManyRequests',
    'AccessForbidden',
    'PrivateProfile',
    'MatchNotFound',
    'Parsing',
    'Unknown',
    'NetworkFailure',
    'Generic',
    # Results
    'Ok',
    'Err',
    'Result',
    # Interfaces
    'IStatisticsProvider',
]
