"""Parser for the Dotabuff "heroes" page of a player."""
from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from domain.entities import Player, UserHeroPerformance

ROW_SELECTOR = "section > article > table > tbody > tr"

# column positions inside a row; column 0 is the hero portrait
HERO_COLUMN = 1
MATCHES_COLUMN = 2
WIN_RATE_COLUMN = 3


class HeroStatsPageError(ValueError):
    """The page does not have the expected table shape."""


def parse_hero_stats_page(html: str, player: Player, n: int) -> List[UserHeroPerformance]:
    """First ``n`` rows of the hero table, in the page's own order.

    The page is already sorted by matches played, so nothing is re-sorted.
    """
    if n <= 0:
        return []

    soup = BeautifulSoup(html, "html.parser")
    rows = soup.select(ROW_SELECTOR)

    heroes: List[UserHeroPerformance] = []
    for row in rows[:n]:
        columns = row.find_all("td", recursive=False)
        if len(columns) <= WIN_RATE_COLUMN:
            raise HeroStatsPageError(f"expected at least {WIN_RATE_COLUMN + 1} columns, got {len(columns)}")

        anchor = columns[HERO_COLUMN].find("a")
        if anchor is None:
            raise HeroStatsPageError("hero column has no link")

        heroes.append(
            UserHeroPerformance(
                player=player,
                hero_name=anchor.get_text(strip=True),
                matches_played=int(columns[MATCHES_COLUMN]["data-value"]),
                win_rate=float(columns[WIN_RATE_COLUMN]["data-value"]),
            )
        )
    return heroes
