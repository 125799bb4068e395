"""Player identity."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """A Dota 2 player, identified by the 32-bit Steam account id (as text)."""

    player_id: str

    def __post_init__(self) -> None:
        cleaned = self.player_id.strip() if isinstance(self.player_id, str) else str(self.player_id)
        if not cleaned.isdigit():
            raise ValueError(f"player id must be numeric, got {self.player_id!r}")
        object.__setattr__(self, 'player_id', cleaned)

    @property
    def account_id(self) -> int:
        return int(self.player_id)

    def __str__(self) -> str:
        return self.player_id
