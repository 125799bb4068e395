"""Presentation CLI exports."""
from .recent_games_command import RecentGamesCommand
from .heroes_command import HeroesCommand
from .lobby_command import LobbyCommand

__all__ = [
    "RecentGamesCommand",
    "HeroesCommand",
    "LobbyCommand",
]
