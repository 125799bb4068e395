"""Infrastructure API module."""
from .transport import Transport, TransportFailure
from .classifier import classify_match_history, classify_match_details
from .retry_policy import RetryPolicy, is_throttled
from .steam_client import SteamAPIClient

__all__ = [
    'Transport',
    'TransportFailure',
    'classify_match_history',
    'classify_match_details',
    'RetryPolicy',
    'is_throttled',
    'SteamAPIClient',
]
