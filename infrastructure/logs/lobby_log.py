"""Lobby participant extraction from the Dota 2 ``server_log.txt``."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

from core.logging.logger import get_logger

logger = get_logger(__name__, service="lobby-log")

LOBBY_MARKER = "Lobby"
PLAYER_MARKER = "[U:1:"
LOBBY_SIZE = 10

LogSource = Union[str, Path]


def _to_path(source: LogSource) -> Path:
    if isinstance(source, Path):
        return source
    parsed = urlparse(source)
    if parsed.scheme == "file":
        return Path(url2pathname(unquote(parsed.path)))
    return Path(source)


def extract_player_ids(line: str) -> List[str]:
    """Every ``[U:1:<id>]`` token of the line, minus the first one (the local user)."""
    ids = [chunk.split("]", 1)[0] for chunk in line.split(PLAYER_MARKER)[1:]]
    return ids[1:LOBBY_SIZE + 1]


def extract_lobby_players(source: LogSource) -> Optional[List[str]]:
    """Account ids of the players in the most recent lobby, or None.

    None means the log could not be read or holds no lobby line yet.
    """
    path = _to_path(source)
    try:
        lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as exc:
        logger.warning(lambda: f"cannot read server log {path}: {exc}")
        return None

    for line in reversed(lines):
        if LOBBY_MARKER in line:
            return extract_player_ids(line)

    logger.info(lambda: f"no lobby line in {path}")
    return None
