from __future__ import annotations

from application import DotaStatisticsService, LobbyReportUseCase
from config import settings
from core.logging.logger import get_logger
from .output import print_games, print_heroes


class LobbyCommand:
    """Report on every player of the lobby found in the server log."""

    def __init__(self) -> None:
        self.log = get_logger(__name__, service="lobby-cli")

    async def run(self) -> None:
        settings.validate()
        print(f"Reading lobby from {settings.DOTA_SERVER_LOG}", flush=True)
        async with DotaStatisticsService() as stats:
            reports = await LobbyReportUseCase(stats).execute()

        if reports is None:
            print("  No lobby found in the server log.", flush=True)
            return

        for report in reports:
            print(f"\n=== Player {report.player} ===", flush=True)
            print("Recent games:", flush=True)
            print_games(report.recent_games)
            print("Most played heroes:", flush=True)
            print_heroes(report.heroes)
        self.log.success(lambda: f"lobby-report-done players={len(reports)}")
