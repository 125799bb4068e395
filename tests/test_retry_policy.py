import pytest

from core.logging.logger import get_logger
from domain.errors import MatchNotFound, TooManyRequests
from domain.result import Err, Ok
from infrastructure.api import RetryPolicy

logger = get_logger(__name__)


class ScriptedSupplier:
    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]


@pytest.mark.asyncio
async def test_success_on_first_attempt_runs_once():
    supplier = ScriptedSupplier(Ok(1))
    result = await RetryPolicy(max_retries=3).run(supplier, logger=logger)
    assert result == Ok(1)
    assert supplier.calls == 1


@pytest.mark.asyncio
async def test_throttle_then_success():
    supplier = ScriptedSupplier(Err(TooManyRequests()), Err(TooManyRequests()), Ok("done"))
    result = await RetryPolicy(max_retries=3).run(supplier, logger=logger)
    assert result == Ok("done")
    assert supplier.calls == 3


@pytest.mark.asyncio
@pytest.mark.parametrize("max_retries", [0, 1, 4])
async def test_always_throttled_runs_max_retries_plus_one(max_retries):
    supplier = ScriptedSupplier(Err(TooManyRequests()))
    result = await RetryPolicy(max_retries=max_retries).run(supplier, logger=logger)
    assert result == Err(TooManyRequests())
    assert supplier.calls == max_retries + 1


@pytest.mark.asyncio
async def test_terminal_error_is_not_retried():
    supplier = ScriptedSupplier(Err(MatchNotFound()), Ok("never"))
    result = await RetryPolicy(max_retries=5).run(supplier, logger=logger)
    assert result == Err(MatchNotFound())
    assert supplier.calls == 1


@pytest.mark.asyncio
async def test_custom_predicate():
    supplier = ScriptedSupplier(Err(MatchNotFound()), Ok("found"))
    result = await RetryPolicy(max_retries=1).run(
        supplier, is_retryable=lambda e: isinstance(e, MatchNotFound), logger=logger
    )
    assert result == Ok("found")


def test_backoff_is_exponential_with_bounded_jitter():
    policy = RetryPolicy(max_retries=3, backoff_base_ms=100, backoff_factor=2.0, jitter_ms=50)
    first = policy.backoff_seconds(1)
    third = policy.backoff_seconds(3)
    assert 0.1 <= first <= 0.15
    assert 0.4 <= third <= 0.45


def test_no_backoff_by_default():
    assert RetryPolicy(max_retries=3).backoff_seconds(2) == 0.0
