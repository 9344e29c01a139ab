"""Power and type-advantage calculations.

Power = (attack + defense + speed + health / 10) * tier multiplier * level
factor. Health is divided by ten so it does not dominate the other three
stats; the level factor grows linearly (+10% per level).
"""

from typing import Final

from hatchery.core.tables import GameTables
from hatchery.data.models import Advantage, Affinity, Creature, round_half_up

HEALTH_DIVISOR: Final[int] = 10
LEVEL_BONUS: Final[float] = 0.1

ADVANTAGE_MULTIPLIERS: Final[dict[Advantage, float]] = {
    Advantage.STRONG: 1.5,
    Advantage.WEAK: 0.5,
    Advantage.NEUTRAL: 1.0,
}


def advantage_multiplier(advantage: Advantage) -> float:
    return ADVANTAGE_MULTIPLIERS[advantage]


def level_factor(level: int) -> float:
    return 1 + (level - 1) * LEVEL_BONUS


class PowerCalculator:
    """Creature power and type-matchup lookups over one set of tables."""

    def __init__(self, tables: GameTables):
        self.tables = tables

    def raw_power(self, creature: Creature) -> float:
        """Unrounded power, used where fractions must not accumulate."""
        stats = creature.stats
        base = stats.attack + stats.defense + stats.speed + stats.health / HEALTH_DIVISOR
        return base * self.tables.stat_multiplier(creature.tier) * level_factor(creature.level)

    def calculate_power(self, creature: Creature) -> int:
        """Power rounded half-up to an integer."""
        return round_half_up(self.raw_power(creature))

    def roster_power(self, roster: list[Creature]) -> int:
        """Sum of each member's rounded power."""
        return sum(self.calculate_power(c) for c in roster)

    def type_advantage(self, attacker: Affinity, defender: Affinity) -> Advantage:
        """Strength is checked before weakness."""
        info = self.tables.type_info(attacker)
        if defender in info.strong_against:
            return Advantage.STRONG
        if defender in info.weak_against:
            return Advantage.WEAK
        return Advantage.NEUTRAL

    def type_multiplier(self, attacker: Affinity, defender: Affinity) -> float:
        return advantage_multiplier(self.type_advantage(attacker, defender))
