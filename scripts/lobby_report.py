"""Print the lobby report once, without the interactive menu."""
from __future__ import annotations

import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from presentation.cli import LobbyCommand


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--log", default=None, help=f"server log to read (default: {settings.DOTA_SERVER_LOG})")
    args = parser.parse_args(argv)
    if args.log:
        settings.DOTA_SERVER_LOG = args.log

    bootstrap_logging(service="lobby-report", level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR,
                      log_file_name="lobby-report.jsonl")
    try:
        asyncio.run(LobbyCommand().run())
        return 0
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
