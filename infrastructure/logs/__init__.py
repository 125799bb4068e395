"""Local game client log readers."""
from .lobby_log import LogSource, extract_lobby_players, extract_player_ids

__all__ = ['LogSource', 'extract_lobby_players', 'extract_player_ids']
