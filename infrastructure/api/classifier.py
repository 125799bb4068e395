"""Turns raw Steam Web API bodies into a payload or a classified error.

The two endpoints report failures differently: match history carries a
numeric ``result.status``, match details an ad-hoc ``result.error`` string.
Both answer with an HTML page instead of JSON when throttling, and the only
way to tell that apart from a real rejection is the literal ``429`` in the
body.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from domain.errors import (
    AccessForbidden, ApiError, MatchNotFound, PrivateProfile, TooManyRequests, Unknown,
)
from domain.result import Err, Ok, Result

THROTTLE_MARKER = "429"

HISTORY_STATUS_OK = 1
HISTORY_STATUS_PRIVATE = 15


def _parse_result_object(body: str) -> Optional[Dict[str, Any]]:
    """The ``result`` object of a JSON body, or None when the body is not JSON."""
    try:
        document = json.loads(body)
    except (ValueError, RecursionError):
        return None
    if not isinstance(document, dict):
        return None
    result = document.get("result")
    return result if isinstance(result, dict) else {}


def _unparseable(body: str) -> Err[ApiError]:
    if THROTTLE_MARKER in body:
        return Err(TooManyRequests())
    return Err(AccessForbidden())


def classify_match_history(body: str) -> Result[Dict[str, Any], ApiError]:
    result = _parse_result_object(body)
    status = None if result is None else result.get("status")
    # a body without an integer status is treated the same as one that isn't JSON
    if isinstance(status, bool) or not isinstance(status, int):
        return _unparseable(body)

    if status == HISTORY_STATUS_OK:
        return Ok(result)
    if status == HISTORY_STATUS_PRIVATE:
        return Err(PrivateProfile())
    return Err(Unknown(body))


def classify_match_details(body: str) -> Result[Dict[str, Any], ApiError]:
    result = _parse_result_object(body)
    if result is None:
        return _unparseable(body)
    if isinstance(result.get("error"), str):
        return Err(MatchNotFound())
    return Ok(result)
