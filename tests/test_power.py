"""Tests for power and type advantage."""

import pytest

from hatchery.core.power import PowerCalculator, advantage_multiplier, level_factor
from hatchery.data.models import Advantage, Affinity, Tier, round_half_up


class TestCalculatePower:
    """Tests for calculate_power."""

    @pytest.fixture
    def calc(self, tables):
        return PowerCalculator(tables)

    def test_common_level_one(self, calc, make_creature):
        # 50 + 30 + 40 + 100 / 10
        assert calc.calculate_power(make_creature()) == 130

    def test_tier_multiplier(self, calc, make_creature):
        assert calc.calculate_power(make_creature(tier=Tier.RARE)) == 169
        assert calc.calculate_power(make_creature(tier=Tier.LEGENDARY)) == 260

    def test_level_factor(self, calc, make_creature):
        assert calc.calculate_power(make_creature(level=3)) == 156

    def test_rounds_half_up(self, calc, make_creature):
        creature = make_creature(attack=1, defense=0, speed=0, health=5)
        assert calc.raw_power(creature) == 1.5
        assert calc.calculate_power(creature) == 2

    def test_monotonic_in_tier(self, calc, make_creature):
        powers = [calc.calculate_power(make_creature(tier=t)) for t in Tier]
        assert powers == sorted(powers)

    def test_monotonic_in_level(self, calc, make_creature):
        powers = [calc.calculate_power(make_creature(level=lvl)) for lvl in range(1, 30)]
        assert powers == sorted(powers)

    @pytest.mark.parametrize("stat", ["attack", "defense", "speed", "health"])
    @pytest.mark.parametrize("tier", [Tier.COMMON, Tier.UNCOMMON, Tier.LEGENDARY])
    def test_monotonic_in_each_stat(self, calc, make_creature, stat, tier):
        powers = [
            calc.calculate_power(make_creature(tier=tier, level=2, **{stat: value}))
            for value in range(0, 301)
        ]
        assert powers == sorted(powers)

    def test_health_counts_one_tenth(self, calc, make_creature):
        # 50 + 30 + 40 + 104 / 10 = 130.4, 50 + 30 + 40 + 105 / 10 = 130.5
        assert calc.calculate_power(make_creature(health=104)) == 130
        assert calc.calculate_power(make_creature(health=105)) == 131

    def test_roster_power_sums_rounded_members(self, calc, make_creature):
        half = make_creature(attack=1, defense=0, speed=0, health=5)
        assert calc.roster_power([half, half]) == 4

    def test_level_factor_values(self):
        assert level_factor(1) == 1.0
        assert level_factor(11) == pytest.approx(2.0)


class TestTypeAdvantage:
    """Tests for type matchups."""

    @pytest.fixture
    def calc(self, tables):
        return PowerCalculator(tables)

    @pytest.mark.parametrize("attacker,defender,expected", [
        (Affinity.FIRE, Affinity.AIR, Advantage.STRONG),
        (Affinity.FIRE, Affinity.WATER, Advantage.WEAK),
        (Affinity.FIRE, Affinity.LIGHT, Advantage.NEUTRAL),
        (Affinity.FIRE, Affinity.FIRE, Advantage.NEUTRAL),
        (Affinity.WATER, Affinity.FIRE, Advantage.STRONG),
        (Affinity.LIGHT, Affinity.DARK, Advantage.STRONG),
        (Affinity.DARK, Affinity.LIGHT, Advantage.WEAK),
        (Affinity.DARK, Affinity.WATER, Advantage.STRONG),
    ])
    def test_matchups(self, calc, attacker, defender, expected):
        assert calc.type_advantage(attacker, defender) == expected

    def test_strength_is_anti_symmetric(self, calc):
        for a in Affinity:
            for b in Affinity:
                if calc.type_advantage(a, b) == Advantage.STRONG:
                    assert calc.type_advantage(b, a) != Advantage.STRONG

    def test_multipliers(self):
        assert advantage_multiplier(Advantage.STRONG) == 1.5
        assert advantage_multiplier(Advantage.WEAK) == 0.5
        assert advantage_multiplier(Advantage.NEUTRAL) == 1.0

    def test_engine_accepts_names(self, fixed_engine):
        engine = fixed_engine()
        assert engine.type_advantage("fire", "AIR") == Advantage.STRONG
        assert engine.advantage_multiplier("weak") == 0.5

    def test_engine_rejects_unknown_type(self, fixed_engine):
        with pytest.raises(ValueError):
            fixed_engine().type_advantage("PLASMA", "FIRE")


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (2.49, 2),
        (51.75, 52),
        (0.0, 0),
    ])
    def test_values(self, value, expected):
        assert round_half_up(value) == expected
