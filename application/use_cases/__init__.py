"""Application use cases."""
from .lobby_report import LobbyReportUseCase, PlayerReport

__all__ = [
    'LobbyReportUseCase',
    'PlayerReport',
]
