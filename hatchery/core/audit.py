"""Hatch audit.

Runs many seeded hatches and compares observed tier frequencies with the
configured drop table, for support and balance review.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from hatchery.core.engine import GameEngine
from hatchery.core.tables import GameTables
from hatchery.data.models import Tier


@dataclass
class HatchAuditReport:
    """Observed vs configured tier odds for one egg type."""

    egg_type: str
    samples: int
    seed: Optional[int]

    # Per-tier results, in rank order
    counts: dict[Tier, int] = field(default_factory=dict)
    observed: dict[Tier, float] = field(default_factory=dict)  # percent
    expected: dict[Tier, float] = field(default_factory=dict)  # percent

    @property
    def deviations(self) -> dict[Tier, float]:
        return {tier: self.observed.get(tier, 0.0) - pct for tier, pct in self.expected.items()}

    @property
    def max_deviation(self) -> float:
        """Largest absolute gap between observed and expected, in percentage points."""
        return max((abs(d) for d in self.deviations.values()), default=0.0)

    def within(self, tolerance: float) -> bool:
        return self.max_deviation <= tolerance


def audit_egg(
    tables: GameTables,
    egg_type: str,
    samples: int,
    seed: Optional[int] = None,
    pity_counter: int = 0,
) -> HatchAuditReport:
    """
    Hatch ``samples`` creatures on a fresh engine and tally their tiers.

    Args:
        tables: Tables under audit.
        egg_type: Egg type to hatch.
        samples: Number of hatches, at least 1.
        seed: Seed for a reproducible run; system entropy when None.
        pity_counter: Pity counter passed to every hatch.

    Raises:
        ValueError: ``samples`` is below 1.
        UnknownEggTypeError: No table for ``egg_type``.
    """
    if samples < 1:
        raise ValueError("samples must be >= 1")

    expected = tables.hatch_weights(egg_type, pity_counter)
    engine = GameEngine.seeded(tables, seed)
    counts: Counter = Counter(
        engine.generate_creature(egg_type, pity_counter).tier for _ in range(samples)
    )

    tiers = sorted(set(expected) | set(counts))
    return HatchAuditReport(
        egg_type=tables.egg(egg_type).id,
        samples=samples,
        seed=seed,
        counts={tier: counts.get(tier, 0) for tier in tiers},
        observed={tier: counts.get(tier, 0) * 100.0 / samples for tier in tiers},
        expected={tier: float(expected.get(tier, 0.0)) for tier in tiers},
    )
