"""Tests for random streams and draw primitives."""

import pytest

from hatchery.core.rng import (
    ParityStream,
    RandomDraw,
    SeededStream,
    SystemStream,
    make_stream,
)
from hatchery.data.models import Tier
from hatchery.errors import ConfigurationError

BASIC_WEIGHTS = [
    (Tier.COMMON, 50),
    (Tier.UNCOMMON, 30),
    (Tier.RARE, 15),
    (Tier.EPIC, 4),
    (Tier.LEGENDARY, 1),
]


class TestStreams:
    """Tests for stream implementations."""

    def test_seeded_streams_repeat(self):
        a = SeededStream(42)
        b = SeededStream(42)
        assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]

    def test_different_seeds_differ(self):
        a = SeededStream(1)
        b = SeededStream(2)
        assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]

    def test_parity_sequence(self):
        """Matches the client's generator: s = (s * 9301 + 49297) % 233280."""
        stream = ParityStream(1)
        assert stream.next() == 58598 / 233280
        assert stream.next() == 127215 / 233280

    def test_parity_rejects_seed_zero(self):
        # The client cannot replay seed 0
        with pytest.raises(ValueError):
            ParityStream(0)
        with pytest.raises(ValueError):
            make_stream(0, parity=True)

    def test_plain_seed_zero_allowed(self):
        assert isinstance(make_stream(0), SeededStream)

    def test_parity_values_in_unit_interval(self):
        stream = ParityStream(12345)
        for _ in range(1000):
            assert 0.0 <= stream.next() < 1.0

    def test_parity_rejects_negative_seed(self):
        with pytest.raises(ValueError):
            ParityStream(-1)

    def test_make_stream(self):
        assert isinstance(make_stream(), SystemStream)
        assert isinstance(make_stream(5), SeededStream)
        assert isinstance(make_stream(5, parity=True), ParityStream)
        # Parity without a seed still means system entropy
        assert isinstance(make_stream(None, parity=True), SystemStream)


class TestDrawUniform:
    """Tests for draw_uniform."""

    def test_returns_stream_value(self, fixed_stream):
        draw = RandomDraw(fixed_stream([0.25]))
        assert draw.draw_uniform() == 0.25
        assert draw.draws == 1

    def test_rejects_out_of_range_stream(self, fixed_stream):
        draw = RandomDraw(fixed_stream([1.0]))
        with pytest.raises(ValueError):
            draw.draw_uniform()


class TestDrawWeighted:
    """Tests for draw_weighted."""

    @pytest.mark.parametrize("value,expected", [
        (0.0, Tier.COMMON),
        (0.5, Tier.COMMON),
        (0.5001, Tier.UNCOMMON),
        (0.79, Tier.UNCOMMON),
        (0.81, Tier.RARE),
        (0.96, Tier.EPIC),
        (0.995, Tier.LEGENDARY),
        (0.9999, Tier.LEGENDARY),
    ])
    def test_cumulative_bounds(self, fixed_stream, value, expected):
        draw = RandomDraw(fixed_stream([value]))
        assert draw.draw_weighted(BASIC_WEIGHTS) == expected

    def test_accepts_mapping(self, fixed_stream):
        draw = RandomDraw(fixed_stream([0.9]))
        assert draw.draw_weighted({"a": 1, "b": 1}) == "b"

    def test_consumes_one_draw(self, fixed_stream):
        draw = RandomDraw(fixed_stream([0.3, 0.7]))
        draw.draw_weighted(BASIC_WEIGHTS)
        assert draw.draws == 1

    def test_zero_weight_never_selected(self, fixed_stream):
        draw = RandomDraw(fixed_stream([0.0, 0.99999]))
        assert draw.draw_weighted([("a", 0), ("b", 1)]) == "b"
        assert draw.draw_weighted([("a", 1), ("b", 0)]) == "a"

    def test_empty_table(self):
        with pytest.raises(ConfigurationError):
            RandomDraw(SeededStream(1)).draw_weighted([])

    def test_negative_weight(self):
        with pytest.raises(ConfigurationError):
            RandomDraw(SeededStream(1)).draw_weighted([("a", 5), ("b", -1)])

    def test_zero_total(self):
        with pytest.raises(ConfigurationError):
            RandomDraw(SeededStream(1)).draw_weighted([("a", 0), ("b", 0)])

    @pytest.mark.parametrize("weights", [
        [("a", float("nan")), ("b", float("nan"))],
        [("a", 50), ("b", float("nan"))],
        [("a", float("inf")), ("b", 1)],
        [("a", 1), ("b", float("-inf"))],
    ])
    def test_non_finite_weights(self, fixed_stream, weights):
        draw = RandomDraw(fixed_stream([]))
        with pytest.raises(ConfigurationError):
            draw.draw_weighted(weights)
        assert draw.draws == 0

    def test_overflowing_total(self, fixed_stream):
        draw = RandomDraw(fixed_stream([]))
        with pytest.raises(ConfigurationError):
            draw.draw_weighted([("a", 1e308), ("b", 1e308)])
        assert draw.draws == 0

    def test_rejected_tables_consume_nothing(self, fixed_stream):
        draw = RandomDraw(fixed_stream([]))
        with pytest.raises(ConfigurationError):
            draw.draw_weighted([("a", 0)])
        assert draw.draws == 0


class TestDrawIntInRange:
    """Tests for draw_int_in_range and draw_choice."""

    def test_bounds_inclusive(self, fixed_stream):
        draw = RandomDraw(fixed_stream([0.0, 0.99999]))
        assert draw.draw_int_in_range(1, 6) == 1
        assert draw.draw_int_in_range(1, 6) == 6

    def test_single_value_range(self, fixed_stream):
        draw = RandomDraw(fixed_stream([0.7]))
        assert draw.draw_int_in_range(5, 5) == 5
        assert draw.draws == 1

    def test_empty_range(self, fixed_stream):
        draw = RandomDraw(fixed_stream([]))
        with pytest.raises(ValueError):
            draw.draw_int_in_range(6, 1)
        assert draw.draws == 0

    def test_seeded_values_stay_in_range(self):
        draw = RandomDraw(SeededStream(3))
        values = {draw.draw_int_in_range(10, 14) for _ in range(500)}
        assert values == {10, 11, 12, 13, 14}

    def test_choice(self, fixed_stream):
        draw = RandomDraw(fixed_stream([0.5]))
        assert draw.draw_choice(["a", "b", "c", "d"]) == "c"

    def test_choice_empty(self):
        with pytest.raises(ValueError):
            RandomDraw(SeededStream(1)).draw_choice([])
