"""Classified failures shared by every fetch operation.

Errors are plain values returned inside ``Err``; nothing here is raised.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    TOO_MANY_REQUESTS = "too_many_requests"
    ACCESS_FORBIDDEN = "access_forbidden"
    PRIVATE_PROFILE = "private_profile"
    MATCH_NOT_FOUND = "match_not_found"
    PARSING = "parsing"
    UNKNOWN = "unknown"
    NETWORK_FAILURE = "network_failure"
    GENERIC = "generic"


@dataclass(frozen=True)
class ApiError:
    """Base of the taxonomy. Only ``TooManyRequests`` is retryable."""

    kind: ClassVar[ErrorKind]
    retryable: ClassVar[bool] = False

    def describe(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class TooManyRequests(ApiError):
    kind: ClassVar[ErrorKind] = ErrorKind.TOO_MANY_REQUESTS
    retryable: ClassVar[bool] = True

    def describe(self) -> str:
        return "Too many requests to the Steam API, try again in a minute"


@dataclass(frozen=True)
class AccessForbidden(ApiError):
    kind: ClassVar[ErrorKind] = ErrorKind.ACCESS_FORBIDDEN

    def describe(self) -> str:
        return "Access forbidden, check that the Steam API key is valid"


@dataclass(frozen=True)
class PrivateProfile(ApiError):
    kind: ClassVar[ErrorKind] = ErrorKind.PRIVATE_PROFILE

    def describe(self) -> str:
        return "Match history is private (enable 'Expose Public Match Data' in the Dota client)"


@dataclass(frozen=True)
class MatchNotFound(ApiError):
    kind: ClassVar[ErrorKind] = ErrorKind.MATCH_NOT_FOUND

    def describe(self) -> str:
        return "Match not found"


@dataclass(frozen=True)
class Parsing(ApiError):
    message: str
    kind: ClassVar[ErrorKind] = ErrorKind.PARSING

    def describe(self) -> str:
        return f"Could not parse API response: {self.message}"


@dataclass(frozen=True)
class Unknown(ApiError):
    raw_body: str
    kind: ClassVar[ErrorKind] = ErrorKind.UNKNOWN

    def describe(self) -> str:
        return f"Unexpected API response: {self.raw_body[:200]}"


@dataclass(frozen=True)
class NetworkFailure(ApiError):
    message: str
    kind: ClassVar[ErrorKind] = ErrorKind.NETWORK_FAILURE

    def describe(self) -> str:
        return f"Network error: {self.message}"


@dataclass(frozen=True)
class Generic(ApiError):
    message: str
    kind: ClassVar[ErrorKind] = ErrorKind.GENERIC

    def describe(self) -> str:
        return f"Error: {self.message}"
