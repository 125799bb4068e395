"""Per-player results handed back to callers."""
from dataclasses import dataclass

from ..enums import Outcome
from .player import Player


@dataclass(frozen=True)
class UserGameInfo:
    """How one player did in one match."""

    player: Player
    hero_name: str
    outcome: Outcome
    kda: str

    def to_dict(self) -> dict:
        return {
            'player': self.player.player_id,
            'hero_name': self.hero_name,
            'outcome': self.outcome.value,
            'kda': self.kda,
        }


@dataclass(frozen=True)
class UserHeroPerformance:
    """One row of the player's hero statistics, in page order."""

    player: Player
    hero_name: str
    matches_played: int
    win_rate: float

    def to_dict(self) -> dict:
        return {
            'player': self.player.player_id,
            'hero_name': self.hero_name,
            'matches_played': self.matches_played,
            'win_rate': round(self.win_rate, 2),
        }
