"""Use case: recent form of everyone in the current lobby."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import List, Optional

from config import settings
from core.logging.logger import get_logger
from domain.entities import Player, UserGameInfo, UserHeroPerformance
from domain.errors import ApiError
from domain.interfaces import IStatisticsProvider
from domain.result import Result
from infrastructure.logs import LogSource, extract_lobby_players

logger = get_logger(__name__, service="lobby-report")


@dataclass(frozen=True)
class PlayerReport:
    """Both fetches for one lobby member; each may have failed on its own."""

    player: Player
    recent_games: Result[List[UserGameInfo], ApiError]
    heroes: Result[List[UserHeroPerformance], ApiError]


class LobbyReportUseCase:
    """
    Reads the lobby from the server log and builds one report per player.

    Players are processed concurrently. A private profile or a throttled
    history for one player only affects that player's report.
    """

    def __init__(
        self,
        stats: IStatisticsProvider,
        log_source: Optional[LogSource] = None,
        heroes_per_player: Optional[int] = None,
    ):
        self.stats = stats
        self.log_source = log_source if log_source is not None else settings.DOTA_SERVER_LOG
        self.heroes_per_player = settings.MOST_PLAYED_HEROES if heroes_per_player is None else heroes_per_player

    async def execute(self) -> Optional[List[PlayerReport]]:
        """Reports in lobby order, or None when no lobby could be read."""
        player_ids = extract_lobby_players(self.log_source)
        if player_ids is None:
            logger.warning(lambda: "no-lobby-found")
            return None

        players: List[Player] = []
        for pid in player_ids:
            try:
                players.append(Player(pid))
            except ValueError:
                logger.warning(lambda: f"skipping malformed lobby id {pid!r}")

        logger.info(lambda: f"lobby-report players={len(players)}")
        return list(await asyncio.gather(*(self._report(p) for p in players)))

    async def _report(self, player: Player) -> PlayerReport:
        recent_games, heroes = await asyncio.gather(
            self.stats.fetch_recent_games(player),
            self.stats.fetch_most_played_heroes(player, self.heroes_per_player),
        )
        return PlayerReport(player=player, recent_games=recent_games, heroes=heroes)
