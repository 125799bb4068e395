"""Application settings and configuration."""
import os
from pathlib import Path
from typing import FrozenSet
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _int_set(raw: str) -> FrozenSet[int]:
    return frozenset(int(v.strip()) for v in raw.split(',') if v.strip())


class Settings:
    """
    Everything here can be overridden from config/.env or the process
    environment. Only STEAM_API_KEY is mandatory.
    """

    STEAM_API_KEY: str = os.getenv('STEAM_API_KEY', '')

    # ── Upstream endpoints ────────────────────────────────────────────────
    MATCH_HISTORY_URL: str = os.getenv(
        'MATCH_HISTORY_URL',
        'https://api.steampowered.com/IDOTA2Match_570/GetMatchHistory/V001/',
    )
    MATCH_DETAILS_URL: str = os.getenv(
        'MATCH_DETAILS_URL',
        'https://api.steampowered.com/IDOTA2Match_570/GetMatchDetails/V001/',
    )
    # {player} is replaced with the 32-bit account id
    HERO_STATS_URL: str = os.getenv(
        'HERO_STATS_URL',
        'https://www.dotabuff.com/players/{player}/heroes',
    )

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = float(os.getenv('REQUEST_TIMEOUT', '10'))
    USER_AGENT: str = os.getenv(
        'USER_AGENT',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
        'AppleWebKit/537.36 (KHTML, like Gecko) '
        'Chrome/120.0.0.0 Safari/537.36',
    )

    # ── Throttle retry (match details only) ───────────────────────────────
    # MAX_RETRIES retries on top of the first call, so MAX_RETRIES + 1 calls max.
    MAX_RETRIES:          int   = int(os.getenv('MAX_RETRIES', '5'))
    RETRY_BACKOFF_MS:     int   = int(os.getenv('RETRY_BACKOFF_MS', '0'))
    RETRY_BACKOFF_FACTOR: float = float(os.getenv('RETRY_BACKOFF_FACTOR', '2.0'))
    RETRY_JITTER_MS:      int   = int(os.getenv('RETRY_JITTER_MS', '0'))

    # ── Recent games ───────────────────────────────────────────────────────
    # 0 = public matchmaking, 7 = ranked matchmaking
    VALID_LOBBY_TYPES: FrozenSet[int] = _int_set(os.getenv('VALID_LOBBY_TYPES', '0,7'))
    MAX_RECENT_GAMES:  int = int(os.getenv('MAX_RECENT_GAMES', '10'))
    MOST_PLAYED_HEROES: int = int(os.getenv('MOST_PLAYED_HEROES', '5'))

    # ── Local client ───────────────────────────────────────────────────────
    DOTA_SERVER_LOG: str = os.getenv(
        'DOTA_SERVER_LOG',
        str(Path.home() / '.steam/steam/steamapps/common/dota 2 beta/game/dota/server_log.txt'),
    )

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(BASE_DIR / 'data' / 'logs')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.STEAM_API_KEY:
            raise ValueError("STEAM_API_KEY must be set in config/.env")
        if cls.MAX_RETRIES < 0:
            raise ValueError("MAX_RETRIES must not be negative")

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
