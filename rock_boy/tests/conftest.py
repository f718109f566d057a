"""
Shared fixtures. Games default to the finite level so layouts are fixed.
"""
import random

import pytest

from gameplay.config import Settings
from gameplay.game import Game


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def settings():
    return Settings(_env_file=None, seed=1, infinite_world=False)


@pytest.fixture
def game(settings):
    return Game(settings=settings, rng=random.Random(settings.seed))
