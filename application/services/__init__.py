"""Application services root exports."""
from .statistics_service import DotaStatisticsService

__all__ = [
    "DotaStatisticsService",
]
