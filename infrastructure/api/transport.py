"""Single-request HTTP transport."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import httpx

from config import settings
from core.logging.logger import get_logger
from domain.result import Err, Ok, Result

logger = get_logger(__name__, service="transport")


@dataclass(frozen=True)
class TransportFailure:
    """The round trip did not complete, or ended with a rejected status."""

    message: str
    timed_out: bool = False
    status: Optional[int] = None


class Transport:
    """Issues one GET per call and hands back the body text, by default whatever the status.

    Status codes are not interpreted for the Steam endpoints: the upstream puts its
    real status inside the body, and throttle pages are recognised by the
    response classifier. No retries at this layer.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.headers = headers or {}
        self.session: Optional[httpx.AsyncClient] = client

    async def __aenter__(self) -> "Transport":
        if self.session is None:
            self.session = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
            )
        return self

    async def __aexit__(self, *_) -> None:
        if self.session:
            await self.session.aclose()
            self.session = None

    async def send(
        self,
        endpoint: str,
        params: Mapping[str, str],
        *,
        require_success: bool = False,
    ) -> Result[str, TransportFailure]:
        """Body text of the response.

        With ``require_success`` a non-2xx status is a failure instead of a body.
        """
        if self.session is None:
            raise RuntimeError("Transport used outside of 'async with'")

        start = time.perf_counter()
        try:
            response = await self.session.get(endpoint, params=dict(params), timeout=self.timeout)
        except httpx.TimeoutException as exc:
            logger.warning(lambda: "request-timeout", extra={"endpoint": endpoint, "error": repr(exc)})
            return Err(TransportFailure(f"request to {endpoint} timed out after {self.timeout}s", timed_out=True))
        except httpx.HTTPError as exc:
            logger.warning(lambda: "request-failed", extra={"endpoint": endpoint, "error": repr(exc)})
            return Err(TransportFailure(f"request to {endpoint} failed: {exc}"))

        logger.debug(
            lambda: "request-done",
            extra={
                "endpoint": endpoint,
                "status": response.status_code,
                "latency_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        if require_success and not response.is_success:
            return Err(TransportFailure(f"HTTP {response.status_code}", status=response.status_code))
        return Ok(response.text)
