from __future__ import annotations

from application import DotaStatisticsService
from config import settings
from core.logging.logger import get_logger
from domain.entities import Player
from .output import print_heroes


class HeroesCommand:
    """Prompt for an account id and show its most played heroes."""

    def __init__(self) -> None:
        self.log = get_logger(__name__, service="heroes-cli")

    async def run(self) -> None:
        raw = input("Account id (32-bit): ").strip()
        try:
            player = Player(raw)
        except ValueError as exc:
            print(f"  {exc}", flush=True)
            return

        n = settings.MOST_PLAYED_HEROES
        self.log.info(lambda: f"most-played-heroes {player} n={n}")
        async with DotaStatisticsService() as stats:
            result = await stats.fetch_most_played_heroes(player, n)
        print(f"\nMost played heroes of {player}:", flush=True)
        print_heroes(result)
