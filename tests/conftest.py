import pytest

from domain.entities import Player
from tests.helpers import PLAYER_ID


@pytest.fixture
def player():
    return Player(PLAYER_ID)
