import json

import httpx
import pytest

from domain.entities import MatchSummary
from domain.enums import LobbyType, Outcome
from domain.errors import MatchNotFound, Parsing, PrivateProfile, TooManyRequests
from domain.result import Err, Ok
from tests.helpers import (
    DETAILS_URL, HISTORY_URL, THROTTLE_PAGE, RecordingHandler, details_body, history_body, lobby,
    make_repository,
)


def _history(*pairs):
    return [{"match_id": m, "lobby_type": lt, "start_time": 1700000000 + m} for m, lt in pairs]


def _respond(history: str, details=None):
    """History answer plus per-match detail answers (default: a radiant win in slot 0)."""
    details = details or {}

    def respond(request: httpx.Request) -> httpx.Response:
        if str(request.url).startswith(HISTORY_URL):
            return httpx.Response(200, text=history)
        match_id = int(request.url.params["match_id"])
        return httpx.Response(200, text=details.get(match_id, details_body(radiant_win=True, players=lobby(0))))

    return RecordingHandler(respond)


@pytest.mark.asyncio
async def test_only_allowed_lobby_types_are_detail_fetched(player):
    matches = _history((1, LobbyType.RANKED), (2, LobbyType.PRACTICE), (3, LobbyType.PUBLIC_MATCHMAKING),
                       (4, LobbyType.COOP_WITH_BOTS), (5, LobbyType.BATTLE_CUP))
    handler = _respond(history_body(1, matches))
    repo = make_repository(handler, valid_lobby_types=(0, 7))
    async with repo.api_client:
        result = await repo.fetch_recent_games(player)

    assert isinstance(result, Ok)
    assert len(result.value) == 2
    assert sorted(handler.detail_match_ids()) == [1, 3]


@pytest.mark.asyncio
async def test_cap_limits_detail_fetches(player):
    matches = _history(*[(m, 7) for m in range(1, 13)])
    handler = _respond(history_body(1, matches))
    repo = make_repository(handler, max_recent_games=5)
    async with repo.api_client:
        result = await repo.fetch_recent_games(player)

    assert len(result.value) == 5
    assert sorted(handler.detail_match_ids()) == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_results_keep_history_order(player):
    matches = _history((30, 7), (20, 7), (10, 7))
    details = {
        30: details_body(radiant_win=True, players=lobby(0, hero_id=1)),
        20: details_body(radiant_win=True, players=lobby(8, hero_id=2)),
        10: details_body(radiant_win=False, players=lobby(8, hero_id=3)),
    }
    repo = make_repository(_respond(history_body(1, matches), details))
    async with repo.api_client:
        result = await repo.fetch_recent_games(player)

    assert [g.hero_name for g in result.value] == ["Anti-Mage", "Axe", "Bane"]
    assert [g.outcome for g in result.value] == [Outcome.VICTORY, Outcome.LOSS, Outcome.VICTORY]


@pytest.mark.asyncio
async def test_second_detail_failure_fails_the_batch(player):
    matches = _history((1, 7), (2, 7))
    details = {2: json.dumps({"result": {"error": "Match ID not found"}})}
    repo = make_repository(_respond(history_body(1, matches), details))
    async with repo.api_client:
        result = await repo.fetch_recent_games(player)

    assert result == Err(MatchNotFound())


@pytest.mark.asyncio
async def test_player_missing_in_one_match_fails_the_batch(player):
    matches = _history((1, 7), (2, 7))
    details = {1: details_body(players=[])}
    repo = make_repository(_respond(history_body(1, matches), details))
    async with repo.api_client:
        result = await repo.fetch_recent_games(player)

    assert result == Err(Parsing("player not found"))


@pytest.mark.asyncio
async def test_private_profile_makes_no_detail_calls(player):
    handler = _respond(history_body(15, include_matches=False))
    repo = make_repository(handler)
    async with repo.api_client:
        result = await repo.fetch_recent_games(player)

    assert result == Err(PrivateProfile())
    assert handler.calls_to(DETAILS_URL) == []
    assert handler.calls_to(HISTORY_URL)[0].url.params["account_id"] == player.player_id


@pytest.mark.asyncio
async def test_throttled_history_is_not_retried(player):
    handler = RecordingHandler(lambda request: httpx.Response(429, text=THROTTLE_PAGE))
    repo = make_repository(handler, max_retries=3)
    async with repo.api_client:
        result = await repo.fetch_recent_games(player)

    assert result == Err(TooManyRequests())
    assert len(handler.requests) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("history", [
    history_body(1, include_matches=False),
    json.dumps({"result": {"status": 1, "matches": "nope"}}),
    json.dumps({"result": {"status": 1, "matches": [{"match_id": 1}]}}),
])
async def test_missing_or_undecodable_match_list_is_empty(player, history):
    handler = _respond(history)
    repo = make_repository(handler)
    async with repo.api_client:
        result = await repo.fetch_recent_games(player)

    assert result == Ok([])
    assert handler.calls_to(DETAILS_URL) == []


def test_select_matches_filters_before_capping():
    repo = make_repository(lambda request: httpx.Response(200), valid_lobby_types=(7,), max_recent_games=2)
    matches = [MatchSummary(1, 0), MatchSummary(2, 7), MatchSummary(3, 0), MatchSummary(4, 7), MatchSummary(5, 7)]
    assert [m.match_id for m in repo.select_matches(matches)] == [2, 4]
