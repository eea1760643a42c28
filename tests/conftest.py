"""
Shared pytest fixtures for the pairing engine tests.

Running tests:
    pytest tests/
"""
import random

import pytest

from badminton.models import Court, Player


def build_players(n, **overrides):
    """n queued players p0..p(n-1), games played equal to their index."""
    return [
        Player(id=f"p{i}", name=f"Player {i}", games_played=i, **overrides)
        for i in range(n)
    ]


def build_courts(n, active=True):
    return [Court(id=f"c{i}", name=f"Court {i + 1}", is_active=active) for i in range(n)]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def four_players():
    return build_players(4)


@pytest.fixture
def one_court():
    return build_courts(1)


@pytest.fixture
def make_group():
    """Build four players with the given genders, all on zero games."""
    def _make(genders):
        return [
            Player(id=f"p{i}", name=f"Player {i}", gender=g)
            for i, g in enumerate(genders)
        ]
    return _make
