"""Static lookup tables."""
from .hero_names import HERO_NAMES, get_hero_name

__all__ = ['HERO_NAMES', 'get_hero_name']
