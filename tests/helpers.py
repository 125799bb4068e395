import json
from typing import Callable, Dict, List, Optional

import httpx

from infrastructure.api import RetryPolicy, SteamAPIClient, Transport
from infrastructure.repositories import MatchRepository

HISTORY_URL = "https://api.test/IDOTA2Match_570/GetMatchHistory/V001/"
DETAILS_URL = "https://api.test/IDOTA2Match_570/GetMatchDetails/V001/"
API_KEY = "TESTKEY"

PLAYER_ID = "86745912"

THROTTLE_PAGE = "<html><head><title>429 Too Many Requests</title></head><body>Too Many Requests</body></html>"
FORBIDDEN_PAGE = "<html><head><title>Forbidden</title></head><body>Verify your key= parameter.</body></html>"


def history_body(status: int = 1, matches: Optional[List[Dict]] = None, include_matches: bool = True) -> str:
    result: Dict = {"status": status}
    if include_matches:
        result["matches"] = matches or []
    return json.dumps({"result": result})


def participant(account_id: int, hero_id: int = 1, kills: int = 0, deaths: int = 0, assists: int = 0) -> Dict:
    return {
        "account_id": account_id,
        "player_slot": 0,
        "hero_id": hero_id,
        "kills": kills,
        "deaths": deaths,
        "assists": assists,
    }


def lobby(player_slot: int, account_id: int = int(PLAYER_ID), hero_id: int = 14,
          kills: int = 7, deaths: int = 3, assists: int = 12) -> List[Dict]:
    """Ten participants with the tracked player at the given list position."""
    players = [participant(1000 + i) for i in range(10)]
    players[player_slot] = participant(account_id, hero_id, kills, deaths, assists)
    return players


def details_body(radiant_win: bool = True, players: Optional[List[Dict]] = None) -> str:
    return json.dumps({"result": {"radiant_win": radiant_win, "players": players if players is not None else lobby(0)}})


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> SteamAPIClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SteamAPIClient(
        API_KEY,
        transport=Transport(client=http),
        match_history_url=HISTORY_URL,
        match_details_url=DETAILS_URL,
    )


def make_repository(
    handler: Callable[[httpx.Request], httpx.Response],
    max_retries: int = 3,
    valid_lobby_types=(0, 7),
    max_recent_games: int = 10,
) -> MatchRepository:
    return MatchRepository(
        mock_client(handler),
        retry_policy=RetryPolicy(max_retries=max_retries),
        valid_lobby_types=valid_lobby_types,
        max_recent_games=max_recent_games,
    )


class RecordingHandler:
    """MockTransport handler that records requests and answers from a callable."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    def calls_to(self, url: str) -> List[httpx.Request]:
        return [r for r in self.requests if str(r.url).startswith(url)]

    def detail_match_ids(self) -> List[int]:
        return [int(r.url.params["match_id"]) for r in self.calls_to(DETAILS_URL)]
