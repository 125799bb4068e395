"""Match outcome from one player's point of view."""
from enum import Enum


class Outcome(Enum):
    VICTORY = "Victory"
    LOSS = "Loss"

    @classmethod
    def from_sides(cls, radiant_win: bool, played_for_radiant: bool) -> 'Outcome':
        """Victory when the player was on the side that won."""
        return cls.VICTORY if radiant_win == played_for_radiant else cls.LOSS
