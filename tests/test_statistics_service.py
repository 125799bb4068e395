import pytest

from application.services import DotaStatisticsService


class TrackedClient:
    def __init__(self):
        self.entered = False
        self.closed = False

    async def __aenter__(self):
        self.entered = True
        return self

    async def __aexit__(self, *exc):
        self.closed = True


class FailingHeroRepository:
    async def __aenter__(self):
        raise RuntimeError("cannot open browser session")

    async def __aexit__(self, *exc):
        raise AssertionError("never entered")


@pytest.mark.asyncio
async def test_api_client_is_closed_when_hero_repository_fails_to_open():
    client = TrackedClient()
    service = DotaStatisticsService(api_key="k", api_client=client, match_repo=object(),
                                    hero_repo=FailingHeroRepository())

    with pytest.raises(RuntimeError):
        async with service:
            pass

    assert client.entered
    assert client.closed


@pytest.mark.asyncio
async def test_both_resources_are_closed_on_exit():
    client, heroes = TrackedClient(), TrackedClient()
    async with DotaStatisticsService(api_key="k", api_client=client, match_repo=object(), hero_repo=heroes):
        assert client.entered and heroes.entered

    assert client.closed and heroes.closed
