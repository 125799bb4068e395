"""Statistics service: one entry point for every per-player fetch."""
from __future__ import annotations

from typing import List, Optional

from config import settings
from domain.entities import Player, UserGameInfo, UserHeroPerformance
from domain.errors import ApiError
from domain.interfaces import IStatisticsProvider
from domain.result import Result
from infrastructure import HeroPerformanceRepository, MatchRepository, SteamAPIClient


class DotaStatisticsService(IStatisticsProvider):
    """Owns the HTTP clients and delegates to the repositories.

    Use as ``async with DotaStatisticsService(...) as stats:``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_client: Optional[SteamAPIClient] = None,
        match_repo: Optional[MatchRepository] = None,
        hero_repo: Optional[HeroPerformanceRepository] = None,
    ):
        self.api_client = api_client or SteamAPIClient(api_key if api_key is not None else settings.STEAM_API_KEY)
        self.match_repo = match_repo or MatchRepository(self.api_client)
        self.hero_repo = hero_repo or HeroPerformanceRepository()

    async def __aenter__(self) -> "DotaStatisticsService":
        await self.api_client.__aenter__()
        try:
            await self.hero_repo.__aenter__()
        except BaseException as exc:
            await self.api_client.__aexit__(type(exc), exc, exc.__traceback__)
            raise
        return self

    async def __aexit__(self, *exc) -> None:
        try:
            await self.hero_repo.__aexit__(*exc)
        finally:
            await self.api_client.__aexit__(*exc)

    async def fetch_recent_games(self, player: Player) -> Result[List[UserGameInfo], ApiError]:
        return await self.match_repo.fetch_recent_games(player)

    async def fetch_match_detail(self, player: Player, match_id: int) -> Result[UserGameInfo, ApiError]:
        return await self.match_repo.fetch_match_detail(player, match_id)

    async def fetch_most_played_heroes(self, player: Player, n: int) -> Result[List[UserHeroPerformance], ApiError]:
        return await self.hero_repo.fetch_most_played_heroes(player, n)
