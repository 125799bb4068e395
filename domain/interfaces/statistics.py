"""Statistics provider interface."""
from abc import ABC, abstractmethod
from typing import List

from ..entities import Player, UserGameInfo, UserHeroPerformance
from ..errors import ApiError
from ..result import Result


class IStatisticsProvider(ABC):
    """Source of per-player match and hero statistics."""

    @abstractmethod
    async def fetch_recent_games(self, player: Player) -> Result[List[UserGameInfo], ApiError]:
        """Details of the player's most recent relevant matches, newest first."""
        pass

    @abstractmethod
    async def fetch_match_detail(self, player: Player, match_id: int) -> Result[UserGameInfo, ApiError]:
        """The player's hero, outcome and KDA in one match."""
        pass

    @abstractmethod
    async def fetch_most_played_heroes(self, player: Player, n: int) -> Result[List[UserHeroPerformance], ApiError]:
        """The first ``n`` rows of the player's hero statistics."""
        pass
