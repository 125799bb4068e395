"""Domain interfaces."""
from .statistics import IStatisticsProvider

__all__ = [
    'IStatisticsProvider',
]
