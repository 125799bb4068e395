"""Match records decoded from the Steam Web API."""
from dataclasses import dataclass
from typing import Any, Mapping


def _require_int(data: Mapping[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field '{key}' is not an integer: {value!r}")
    return value


@dataclass(frozen=True)
class MatchSummary:
    """One entry of a match-history listing."""

    match_id: int
    lobby_type: int

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> 'MatchSummary':
        return cls(
            match_id=_require_int(data, 'match_id'),
            lobby_type=_require_int(data, 'lobby_type'),
        )


@dataclass(frozen=True)
class MatchParticipant:
    """One player row of a match-details payload."""

    account_id: int
    hero_id: int
    kills: int
    deaths: int
    assists: int

    @property
    def kda(self) -> str:
        return f"{self.kills}/{self.deaths}/{self.assists}"

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> 'MatchParticipant':
        return cls(
            account_id=_require_int(data, 'account_id'),
            hero_id=_require_int(data, 'hero_id'),
            kills=_require_int(data, 'kills'),
            deaths=_require_int(data, 'deaths'),
            assists=_require_int(data, 'assists'),
        )
