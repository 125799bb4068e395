import pytest

from application.use_cases import LobbyReportUseCase
from domain.entities import Player, UserGameInfo, UserHeroPerformance
from domain.enums import Outcome
from domain.errors import PrivateProfile
from domain.interfaces import IStatisticsProvider
from domain.result import Err, Ok


class FakeStats(IStatisticsProvider):
    def __init__(self, private=()):
        self.private = set(private)
        self.hero_requests = []

    async def fetch_recent_games(self, player):
        if player.player_id in self.private:
            return Err(PrivateProfile())
        return Ok([UserGameInfo(player, "Axe", Outcome.VICTORY, "1/2/3")])

    async def fetch_match_detail(self, player, match_id):
        raise AssertionError("not used by the lobby report")

    async def fetch_most_played_heroes(self, player, n):
        self.hero_requests.append((player.player_id, n))
        return Ok([UserHeroPerformance(player, "Axe", 10, 60.0)])


def _write_log(tmp_path, ids):
    log = tmp_path / "server_log.txt"
    tokens = " ".join(f"{i}:[U:1:{pid}]" for i, pid in enumerate(ids))
    log.write_text(f"(Lobby 99 DOTA_GAMEMODE_ALL_DRAFT {tokens})\n", encoding="utf-8")
    return log


@pytest.mark.asyncio
async def test_one_report_per_lobby_player_in_order(tmp_path):
    log = _write_log(tmp_path, ["1", "11", "12", "13"])
    stats = FakeStats(private={"12"})

    reports = await LobbyReportUseCase(stats, log_source=log, heroes_per_player=3).execute()

    assert [r.player for r in reports] == [Player("11"), Player("12"), Player("13")]
    assert reports[1].recent_games == Err(PrivateProfile())
    assert isinstance(reports[0].recent_games, Ok)
    assert isinstance(reports[2].recent_games, Ok)
    assert isinstance(reports[1].heroes, Ok)
    assert sorted(stats.hero_requests) == [("11", 3), ("12", 3), ("13", 3)]


@pytest.mark.asyncio
async def test_no_lobby_gives_none(tmp_path):
    reports = await LobbyReportUseCase(FakeStats(), log_source=tmp_path / "missing.txt").execute()
    assert reports is None
