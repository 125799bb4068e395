"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import shutil
import sys
from typing import Awaitable, Callable, Dict, Tuple

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings

_RED = "\033[1;91m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_BOLD = "\033[1m"
_RESET = "\033[0m"

Action = Callable[[], Awaitable[None]]


def _rule(char: str = "═", width: int = 48) -> str:
    cols = shutil.get_terminal_size(fallback=(80, 20)).columns
    return f"{_RED}{char * min(cols, width)}{_RESET}"


def _actions() -> Dict[str, Tuple[str, Action]]:
    from presentation.cli import HeroesCommand, LobbyCommand, RecentGamesCommand

    return {
        "1": ("Recent games of a player", lambda: RecentGamesCommand().run()),
        "2": ("Most played heroes of a player", lambda: HeroesCommand().run()),
        "3": ("Current lobby report", lambda: LobbyCommand().run()),
    }


def _menu() -> None:
    print(_rule(width=64))
    print(f"{_RED}  DOTA 2 ASSISTANT{_RESET}")
    print(f"{_CYAN}  Recent games and hero stats for the players in your lobby{_RESET}")
    print(_rule(width=64))

    actions = _actions()
    exit_key = str(len(actions) + 1)
    while True:
        print(f"\n{_rule()}\n  {_BOLD}MAIN MENU{_RESET}\n{_rule()}")
        for key, (label, _) in actions.items():
            print(f"  {_CYAN}{key}{_RESET}  {label}")
        print(f"  {_CYAN}{exit_key}{_RESET}  Exit")
        print(_rule("─"))
        choice = input("  Choose: ").strip()

        if choice == exit_key:
            print(f"\n  {_RED}Good luck, have fun!{_RESET}\n")
            return
        if choice not in actions:
            print(f"  {_YELLOW}Invalid option.{_RESET}")
            continue
        try:
            asyncio.run(actions[choice][1]())
        except ValueError as exc:
            # configuration problems, e.g. missing STEAM_API_KEY
            print(f"  {_YELLOW}{exc}{_RESET}")


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dota-assistant", description="Interactive Dota 2 assistant.")
    parser.add_argument("--log", default=None, help=f"server log to read (default: {settings.DOTA_SERVER_LOG})")
    parser.add_argument("--log-level", default=None, help=f"logging level (default: {settings.LOG_LEVEL})")
    return parser.parse_args(argv)


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if args.log:
        settings.DOTA_SERVER_LOG = args.log
    if args.log_level:
        settings.LOG_LEVEL = args.log_level

    bootstrap_logging(
        service="dota-assistant",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="dota-assistant.jsonl",
    )
    try:
        _menu()
        return 0
    finally:
        shutdown_logging()


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
