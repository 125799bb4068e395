from __future__ import annotations

import asyncio
import math
import random
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from config import settings
from core.logging.logger import StructuredLogger
from domain.errors import ApiError
from domain.result import Err, Result

RetryPredicate = Callable[[ApiError], bool]
Supplier = Callable[[], Awaitable[Result[Any, ApiError]]]


def is_throttled(error: ApiError) -> bool:
    return error.retryable


@dataclass(slots=True)
class RetryPolicy:
    """Bounded, sequential retry over suppliers that return a Result.

    ``max_retries`` counts retries, so a supplier runs at most
    ``max_retries + 1`` times. Attempt N+1 starts only after attempt N has
    returned. Errors rejected by the predicate are returned immediately.
    """

    max_retries: int
    backoff_base_ms: int = 0
    backoff_factor: float = 2.0
    jitter_ms: int = 0

    @classmethod
    def from_settings(cls) -> "RetryPolicy":
        return cls(
            max_retries=settings.MAX_RETRIES,
            backoff_base_ms=settings.RETRY_BACKOFF_MS,
            backoff_factor=settings.RETRY_BACKOFF_FACTOR,
            jitter_ms=settings.RETRY_JITTER_MS,
        )

    def backoff_seconds(self, retry: int) -> float:
        """Delay before the given retry (1-based)."""
        if self.backoff_base_ms <= 0 and self.jitter_ms <= 0:
            return 0.0
        delay_ms = self.backoff_base_ms * math.pow(self.backoff_factor, retry - 1)
        if self.jitter_ms > 0:
            delay_ms += random.uniform(0, self.jitter_ms)
        return delay_ms / 1000.0

    async def run(
        self,
        supplier: Supplier,
        *,
        is_retryable: RetryPredicate = is_throttled,
        logger: StructuredLogger,
        context: dict[str, Any] | None = None,
    ) -> Result[Any, ApiError]:
        retries = 0
        while True:
            result = await supplier()
            if not isinstance(result, Err) or not is_retryable(result.error):
                return result
            if retries >= self.max_retries:
                logger.warning(
                    lambda: f"retries-exhausted after {retries + 1} attempts",
                    extra={"attempt": retries + 1, "error": result.error.kind.value, **(context or {})},
                )
                return result
            retries += 1
            delay = self.backoff_seconds(retries)
            logger.info(
                lambda: f"retrying in {delay:.2f}s",
                extra={"attempt": retries, "error": result.error.kind.value, **(context or {})},
            )
            if delay > 0:
                await asyncio.sleep(delay)
