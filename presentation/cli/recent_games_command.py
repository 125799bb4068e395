from __future__ import annotations

from application import DotaStatisticsService
from config import settings
from core.logging.logger import get_logger
from domain.entities import Player
from .output import print_games


class RecentGamesCommand:
    """Prompt for an account id and show its recent games."""

    def __init__(self) -> None:
        self.log = get_logger(__name__, service="recent-cli")

    async def run(self) -> None:
        raw = input("Account id (32-bit): ").strip()
        try:
            player = Player(raw)
        except ValueError as exc:
            print(f"  {exc}", flush=True)
            return

        settings.validate()
        self.log.info(lambda: f"recent-games {player}")
        async with DotaStatisticsService() as stats:
            result = await stats.fetch_recent_games(player)
        print(f"\nRecent games of {player}:", flush=True)
        print_games(result)
