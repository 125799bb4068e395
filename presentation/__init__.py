"""Presentation layer - User interfaces."""
from .cli import RecentGamesCommand, HeroesCommand, LobbyCommand

__all__ = [
    "RecentGamesCommand",
    "HeroesCommand",
    "LobbyCommand",
]
