"""Creature Generator.

Turns an egg type into a creature. Draw order is fixed (tier, type, attack,
defense, speed, health, abilities) so that a seeded stream fully determines
the result.
"""

import logging

from hatchery.core.rng import RandomDraw
from hatchery.core.tables import GameTables
from hatchery.data.models import (
    Ability,
    Affinity,
    Creature,
    CreatureStats,
    Tier,
)
from hatchery.errors import ConfigurationError

logger = logging.getLogger(__name__)


class CreatureGenerator:
    """
    Roll creatures from egg drop tables.

    Eggs weight the tier only. Type is drawn uniformly over every configured
    type regardless of egg.
    """

    def __init__(self, tables: GameTables, draw: RandomDraw):
        self.tables = tables
        self.draw = draw

    def generate(self, egg_type: str, pity_counter: int = 0) -> Creature:
        """
        Hatch one creature.

        Args:
            egg_type: Egg type id, e.g. "BASIC".
            pity_counter: Hatches since the caller's last high-tier pull.

        Returns:
            A new Creature at level 1.

        Raises:
            UnknownEggTypeError: No table for ``egg_type``.
            ConfigurationError: The rolled type has no ability for the tier.
        """
        weights = self.tables.hatch_weights(egg_type, pity_counter)
        start = self.draw.draws

        tier = self.draw.draw_weighted(weights)
        affinity = self.roll_type()
        stats = self.roll_stats(tier)
        abilities = self.roll_abilities(affinity, tier)

        creature = Creature(
            name=self.generate_name(tier, affinity),
            tier=tier,
            type=affinity,
            stats=stats,
            abilities=[a.id for a in abilities],
        )
        logger.debug(
            "Hatched %s egg (pity=%d): %s %s %s using %d draws",
            egg_type,
            pity_counter,
            tier.name,
            affinity.value,
            stats,
            self.draw.draws - start,
        )
        return creature

    def roll_type(self) -> Affinity:
        return self.draw.draw_choice(self.tables.type_order)

    def roll_stats(self, tier: Tier) -> CreatureStats:
        """Each stat is drawn independently from its tier-scaled range."""
        multiplier = self.tables.stat_multiplier(tier)
        values = {}
        for name, stat_range in self.tables.stat_ranges.items():
            low, high = stat_range.scaled(multiplier)
            values[name] = self.draw.draw_int_in_range(low, high)
        return CreatureStats(**values)

    def roll_abilities(self, affinity: Affinity, tier: Tier) -> list[Ability]:
        """
        Primary ability first, then distinct extras up to the tier's slot count.

        Raises:
            ConfigurationError: No ability of ``affinity`` is unlocked at ``tier``.
        """
        available = self.tables.abilities_for(affinity, tier)
        if not available:
            raise ConfigurationError(
                f"No {affinity.value} ability is available at {tier.name}"
            )

        slots = self.tables.tier_info(tier).ability_slots
        chosen: list[Ability] = []
        while available and len(chosen) < slots:
            pick = self.draw.draw_choice(available)
            chosen.append(pick)
            available = [a for a in available if a.id != pick.id]
        return chosen

    def generate_name(self, tier: Tier, affinity: Affinity) -> str:
        """Deterministic display name, e.g. "Mighty Dragon"."""
        prefix = self.tables.tier_info(tier).name_prefix
        species = self.tables.type_info(affinity).species
        return f"{prefix} {species}"
