"""Application layer - Services and use cases."""
from .services import DotaStatisticsService
from .use_cases import LobbyReportUseCase, PlayerReport

__all__ = [
    'DotaStatisticsService',
    'LobbyReportUseCase',
    'PlayerReport',
]
