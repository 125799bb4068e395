"""Hero performance repository backed by the Dotabuff heroes page."""
from __future__ import annotations

from typing import List, Optional

from config import settings
from core.logging.context import log_context
from core.logging.logger import get_logger
from domain.entities import Player, UserHeroPerformance
from domain.errors import ApiError, Generic
from domain.result import Err, Ok, Result
from infrastructure.api import Transport
from infrastructure.scraping import parse_hero_stats_page

logger = get_logger(__name__, service="heroes")


class HeroPerformanceRepository:
    """Most played heroes of a player.

    Runs in its own failure domain: whatever goes wrong while fetching or
    parsing the page comes back as ``Generic`` instead of being raised.
    """

    def __init__(self, transport: Optional[Transport] = None, page_url: Optional[str] = None):
        self.transport = transport or Transport(headers={"User-Agent": settings.USER_AGENT})
        self.page_url = page_url or settings.HERO_STATS_URL

    async def __aenter__(self) -> "HeroPerformanceRepository":
        await self.transport.__aenter__()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.transport.__aexit__(*exc)

    async def fetch_most_played_heroes(self, player: Player, n: int) -> Result[List[UserHeroPerformance], ApiError]:
        with log_context(player=player.player_id):
            try:
                page = await self.transport.send(
                    self.page_url.format(player=player.player_id), {}, require_success=True
                )
                if isinstance(page, Err):
                    logger.warning(
                        lambda: f"hero-stats-unavailable {page.error.message}",
                        extra={"status": page.error.status},
                    )
                    return Err(Generic(page.error.message))
                heroes = parse_hero_stats_page(page.value, player, n)
            except Exception as exc:
                logger.error(lambda: f"hero-stats-failed {exc!r}")
                return Err(Generic(str(exc) or exc.__class__.__name__))

            logger.debug(lambda: f"hero-stats-parsed rows={len(heroes)}")
            return Ok(heroes)
