"""HTML page parsers."""
from .hero_stats_page import parse_hero_stats_page, HeroStatsPageError

__all__ = ['parse_hero_stats_page', 'HeroStatsPageError']
