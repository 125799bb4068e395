"""Domain enumerations."""
from .outcome import Outcome
from .lobby_type import LobbyType

__all__ = [
    'Outcome',
    'LobbyType',
]
