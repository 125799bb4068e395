"""Match repository: recent games and per-match details from the Steam Web API."""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional

from config import settings
from core.logging.context import log_context
from core.logging.logger import get_logger
from domain.entities import MatchParticipant, MatchSummary, Player, UserGameInfo
from domain.enums import Outcome
from domain.errors import ApiError, Parsing
from domain.result import Err, Ok, Result
from infrastructure.api import RetryPolicy, SteamAPIClient, is_throttled
from infrastructure.static import get_hero_name

logger = get_logger(__name__, service="matches")

# players 0-4 are Radiant, 5-9 Dire
RADIANT_SLOTS = 5


class MatchRepository:
    """Match data for one player, built from the history and details endpoints."""

    def __init__(
        self,
        api_client: SteamAPIClient,
        retry_policy: Optional[RetryPolicy] = None,
        valid_lobby_types: Optional[Iterable[int]] = None,
        max_recent_games: Optional[int] = None,
        hero_name: Callable[[int], str] = get_hero_name,
    ):
        """
        Initialize match repository.

        Args:
            api_client: Steam API client (transport + classification)
            retry_policy: Throttle retry for match details
            valid_lobby_types: Lobby types worth a detail fetch
            max_recent_games: Upper bound of detail fetches per history call
            hero_name: Hero id to display name lookup
        """
        self.api_client = api_client
        self.retry_policy = retry_policy or RetryPolicy.from_settings()
        self.valid_lobby_types: FrozenSet[int] = frozenset(
            settings.VALID_LOBBY_TYPES if valid_lobby_types is None else valid_lobby_types
        )
        self.max_recent_games = settings.MAX_RECENT_GAMES if max_recent_games is None else max_recent_games
        self._hero_name = hero_name

    # ── Match details ──────────────────────────────────────────────────────

    async def fetch_match_detail(self, player: Player, match_id: int) -> Result[UserGameInfo, ApiError]:
        """The player's hero, outcome and KDA in one match.

        Throttled attempts are retried from scratch (new request) up to the
        policy's bound; every other error is returned as is.
        """
        with log_context(player=player.player_id, match_id=match_id):
            return await self.retry_policy.run(
                lambda: self._try_fetch_match_detail(player, match_id),
                is_retryable=is_throttled,
                logger=logger,
            )

    async def _try_fetch_match_detail(self, player: Player, match_id: int) -> Result[UserGameInfo, ApiError]:
        details = await self.api_client.get_match_details(match_id)
        return details.then(lambda result: self._parse_user_game_info(result, player))

    def _parse_user_game_info(self, result: Dict[str, Any], player: Player) -> Result[UserGameInfo, ApiError]:
        """Locate the player among the participants and derive the outcome."""
        radiant_win = result.get('radiant_win')
        if not isinstance(radiant_win, bool):
            return Err(Parsing("field 'radiant_win' is missing or not a boolean"))

        players_data = result.get('players')
        if not isinstance(players_data, list):
            return Err(Parsing("field 'players' is missing or not a list"))

        try:
            participants = [MatchParticipant.from_api(p) for p in players_data]
        except (KeyError, TypeError) as exc:
            return Err(Parsing(f"malformed player entry: {exc}"))

        index = next(
            (i for i, p in enumerate(participants) if p.account_id == player.account_id),
            None,
        )
        if index is None:
            return Err(Parsing("player not found"))

        participant = participants[index]
        played_for_radiant = index < RADIANT_SLOTS
        return Ok(
            UserGameInfo(
                player=player,
                hero_name=self._hero_name(participant.hero_id),
                outcome=Outcome.from_sides(radiant_win, played_for_radiant),
                kda=participant.kda,
            )
        )

    # ── Recent games ───────────────────────────────────────────────────────

    async def fetch_recent_games(self, player: Player) -> Result[List[UserGameInfo], ApiError]:
        """Details of the player's most recent relevant matches, in history order.

        Fails as a whole on the first failing detail fetch.
        """
        with log_context(player=player.player_id):
            history = await self.api_client.get_match_history(player.player_id)
            if isinstance(history, Err):
                logger.warning(lambda: f"match-history-failed {history.error.kind.value}")
                return history

            selected = self.select_matches(self._parse_match_summaries(history.value))
            logger.info(lambda: f"fetching details for {len(selected)} matches")
            return await self._fetch_all_details(player, [m.match_id for m in selected])

    def select_matches(self, matches: List[MatchSummary]) -> List[MatchSummary]:
        """Allowed lobby types only, capped, in upstream order."""
        relevant = [m for m in matches if m.lobby_type in self.valid_lobby_types]
        return relevant[:max(0, self.max_recent_games)]

    @staticmethod
    def _parse_match_summaries(result: Dict[str, Any]) -> List[MatchSummary]:
        """Decoded ``matches`` list; a missing or malformed list counts as no matches."""
        raw = result.get('matches')
        if raw is None:
            return []
        try:
            return [MatchSummary.from_api(m) for m in raw]
        except (KeyError, TypeError) as exc:
            logger.warning(lambda: f"match list not decodable, treating as empty: {exc!r}")
            return []

    async def _fetch_all_details(self, player: Player, match_ids: List[int]) -> Result[List[UserGameInfo], ApiError]:
        if not match_ids:
            return Ok([])

        tasks = {
            asyncio.create_task(self.fetch_match_detail(player, match_id)): position
            for position, match_id in enumerate(match_ids)
        }
        results: List[Optional[UserGameInfo]] = [None] * len(match_ids)
        pending = set(tasks)
        try:
            while pending:
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                for task in done:
                    outcome = task.result()
                    if isinstance(outcome, Err):
                        logger.warning(
                            lambda: f"detail fetch failed, dropping batch: {outcome.error.kind.value}",
                            extra={"error": outcome.error.kind.value},
                        )
                        return outcome
                    results[tasks[task]] = outcome.value
        finally:
            for task in pending:
                task.cancel()

        return Ok(results)
