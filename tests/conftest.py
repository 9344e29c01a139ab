"""Shared fixtures for engine tests."""

import pytest

from hatchery.core.engine import GameEngine
from hatchery.core.tables import GameTables
from hatchery.data.loaders import load_default_tables, read_tables
from hatchery.data.models import Creature, CreatureStats, Tier


class FixedStream:
    """Stream that replays a fixed list of values and then runs dry."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def next(self) -> float:
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def tables() -> GameTables:
    """Packaged game tables."""
    return load_default_tables()


@pytest.fixture
def table_data() -> dict:
    """Fresh, mutable copy of the packaged tables as plain data."""
    return read_tables()


@pytest.fixture
def fixed_stream():
    return FixedStream


@pytest.fixture
def fixed_engine(tables):
    """Build an engine whose draws are the given values, in order."""
    def _build(*values):
        return GameEngine(tables, FixedStream(values))
    return _build


@pytest.fixture
def make_creature():
    """Build a creature with explicit stats."""
    def _build(
        type="FIRE",
        tier=Tier.COMMON,
        attack=50,
        defense=30,
        speed=40,
        health=100,
        level=1,
        id=None,
    ):
        return Creature(
            id=id,
            name="Test Creature",
            tier=tier,
            type=type,
            stats=CreatureStats(attack=attack, defense=defense, speed=speed, health=health),
            abilities=["test_ability"],
            level=level,
        )
    return _build
