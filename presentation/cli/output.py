"""Console rendering of fetch results."""
from __future__ import annotations

from typing import List

from domain.entities import UserGameInfo, UserHeroPerformance
from domain.enums import Outcome
from domain.errors import ApiError
from domain.result import Err, Result

_GREEN = "\033[92m"
_RED = "\033[91m"
_YELLOW = "\033[93m"
_RESET = "\033[0m"


def print_error(error: ApiError) -> None:
    print(f"  {_YELLOW}{error.describe()}{_RESET}", flush=True)


def print_games(result: Result[List[UserGameInfo], ApiError]) -> None:
    if isinstance(result, Err):
        print_error(result.error)
        return
    if not result.value:
        print("  No recent ranked or public matches.", flush=True)
        return
    for game in result.value:
        color = _GREEN if game.outcome is Outcome.VICTORY else _RED
        print(f"  {color}{game.outcome.value:<8}{_RESET} {game.hero_name:<22} {game.kda}", flush=True)


def print_heroes(result: Result[List[UserHeroPerformance], ApiError]) -> None:
    if isinstance(result, Err):
        print_error(result.error)
        return
    for rank, hero in enumerate(result.value, start=1):
        print(
            f"  {rank:>2}. {hero.hero_name:<22} matches={hero.matches_played:<5} win rate={hero.win_rate:.2f}%",
            flush=True,
        )
