"""Steam Web API client for the Dota 2 match endpoints."""
from __future__ import annotations

from typing import Any, Dict, Optional

from config import settings
from core.logging.logger import get_logger
from domain.errors import ApiError, NetworkFailure
from domain.result import Err, Result
from .classifier import classify_match_details, classify_match_history
from .transport import Transport, TransportFailure

logger = get_logger(__name__, service="steam-api")


def _network_failure(failure: TransportFailure) -> ApiError:
    return NetworkFailure(failure.message)


class SteamAPIClient:
    """Sends one request per call and classifies the answer.

    Retrying is left to the caller; see MatchRepository.
    """

    def __init__(
        self,
        api_key: str,
        transport: Optional[Transport] = None,
        match_history_url: Optional[str] = None,
        match_details_url: Optional[str] = None,
    ):
        self.api_key = api_key
        self.transport = transport or Transport()
        self.match_history_url = match_history_url or settings.MATCH_HISTORY_URL
        self.match_details_url = match_details_url or settings.MATCH_DETAILS_URL

    async def __aenter__(self) -> "SteamAPIClient":
        await self.transport.__aenter__()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.transport.__aexit__(*exc)

    async def get_match_history(self, account_id: str) -> Result[Dict[str, Any], ApiError]:
        params = {"key": self.api_key, "account_id": account_id}
        response = await self.transport.send(self.match_history_url, params)
        result = response.map_err(_network_failure).then(classify_match_history)
        if isinstance(result, Err):
            logger.debug(lambda: "match-history-rejected", extra={"error": result.error.kind.value})
        return result

    async def get_match_details(self, match_id: int) -> Result[Dict[str, Any], ApiError]:
        params = {"key": self.api_key, "match_id": str(match_id)}
        response = await self.transport.send(self.match_details_url, params)
        result = response.map_err(_network_failure).then(classify_match_details)
        if isinstance(result, Err):
            logger.debug(lambda: "match-details-rejected", extra={"error": result.error.kind.value})
        return result
