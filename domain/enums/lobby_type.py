"""Dota 2 lobby types as reported by the match-history endpoint."""
from enum import IntEnum


class LobbyType(IntEnum):
    """Matchmaking context of a match.

    Only some of these say anything about a player's skill; the recent-games
    fetch keeps the ones listed in settings.VALID_LOBBY_TYPES.
    """

    INVALID = -1
    PUBLIC_MATCHMAKING = 0
    PRACTICE = 1
    TOURNAMENT = 2
    TUTORIAL = 3
    COOP_WITH_BOTS = 4
    TEAM_MATCH = 5
    SOLO_QUEUE = 6
    RANKED = 7
    SOLO_MID_1V1 = 8
    BATTLE_CUP = 9

    @property
    def friendly(self) -> str:
        return self.name.replace('_', ' ').title()

    @classmethod
    def matchmaking(cls) -> list['LobbyType']:
        """Lobby types counted by default."""
        return [cls.PUBLIC_MATCHMAKING, cls.RANKED]
