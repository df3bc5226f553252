import os
import random

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from world.grid import Grid


class ScriptedRandom(random.Random):
    """Always picks the lowest option: row 0, 'up' on a lateral tie."""

    def randint(self, a, b):
        return a

    def randrange(self, start, stop=None, step=1):
        return 0 if stop is None else start


class HighRandom(ScriptedRandom):
    """Always picks the highest option: 'down' on a lateral tie."""

    def randint(self, a, b):
        return b


OPEN_LAYOUT = [
    "......C",
    "......C",
    "......C",
    "......C",
    "......C",
]


@pytest.fixture
def open_grid():
    return Grid.from_layout(OPEN_LAYOUT)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom()


@pytest.fixture
def high_rng():
    return HighRandom()
