"""Egg Preview Generator.

Lists what an egg can hatch into, with the exact configured odds. Reads
tables only; it never touches a random stream, so showing a preview cannot
change what the next hatch rolls.
"""

from hatchery.core.tables import GameTables, TABLE_TOTAL, weights_sum_to_total
from hatchery.data.models import PreviewEntry
from hatchery.errors import ConfigurationError


class EggPreviewGenerator:
    """Read-only view of egg odds."""

    def __init__(self, tables: GameTables):
        self.tables = tables

    def preview(self, egg_type: str, pity_counter: int = 0) -> list[PreviewEntry]:
        """
        Every tier the egg can produce with its configured percentage.

        Tiers with zero weight are left out. Entries are sorted by
        probability, highest first; equal probabilities keep rank order.

        Args:
            egg_type: Egg type id.
            pity_counter: Hatches since the last high-tier pull. When the pity
                rule is active the pity odds are listed.

        Raises:
            UnknownEggTypeError: No table for ``egg_type``.
            ConfigurationError: Listed odds do not add up to 100.
        """
        weights = self.tables.hatch_weights(egg_type, pity_counter)
        if not weights_sum_to_total(weights):
            raise ConfigurationError(
                f"Preview odds for {egg_type} sum to {sum(weights.values())}, expected {TABLE_TOTAL:g}"
            )

        possible_types = self.tables.type_order
        entries = [
            PreviewEntry(
                tier=tier,
                type=None,
                probability=float(weight),
                tier_name=self.tables.tier_info(tier).name,
                possible_types=list(possible_types),
            )
            for tier, weight in weights.items()
            if weight > 0
        ]
        entries.sort(key=lambda e: (-e.probability, e.tier.rank))
        return entries

    def type_probability(self) -> float:
        """Percentage chance of any single type, identical for every egg."""
        return TABLE_TOTAL / len(self.tables.type_order)
