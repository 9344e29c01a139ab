"""
Egg hatching service.
"""

from typing import List, Optional

from hatchery.core.audit import audit_egg
from hatchery.core.engine import GameEngine
from hatchery.core.tables import GameTables

from ..schemas.eggs import (
    AuditResponse,
    AuditTierSchema,
    EggPreviewResponse,
    EggTypeSchema,
    HatchRequest,
    HatchResponse,
)


class EggService:
    """Egg listing, preview, hatching and audit."""

    def __init__(self, tables: GameTables):
        self.tables = tables

    def list_eggs(self) -> List[EggTypeSchema]:
        """All configured egg types."""
        engine = GameEngine(self.tables)
        return [
            EggTypeSchema(
                id=egg.id,
                name=egg.name,
                description=egg.description,
                weights={tier.name: weight for tier, weight in egg.weights.items()},
            )
            for egg in engine.list_egg_types()
        ]

    def preview(self, egg_type: str, pity_counter: int = 0) -> EggPreviewResponse:
        """
        Odds for an egg. Consumes no randomness.

        Raises:
            UnknownEggTypeError: No table for ``egg_type``.
        """
        engine = GameEngine(self.tables)
        entries = engine.preview_egg(egg_type, pity_counter)
        return EggPreviewResponse(
            egg_type=self.tables.egg(egg_type).id,
            pity_active=self.tables.pity.applies(pity_counter),
            type_probability=engine.previewer.type_probability(),
            entries=entries,
        )

    def hatch(self, egg_type: str, request: HatchRequest) -> HatchResponse:
        """
        Hatch one creature on a fresh engine.

        Raises:
            UnknownEggTypeError: No table for ``egg_type``.
        """
        engine = GameEngine.seeded(self.tables, request.seed, parity=request.parity)
        creature = engine.generate_creature(egg_type, request.pity_counter)
        return HatchResponse(
            egg_type=self.tables.egg(egg_type).id,
            creature=creature,
            power=engine.calculate_power(creature),
            seed=request.seed,
            parity=request.parity,
            pity_active=self.tables.pity.applies(request.pity_counter),
            draws=engine.draws,
        )

    def audit(self, egg_type: str, samples: int, seed: Optional[int] = None) -> AuditResponse:
        """
        Compare observed hatch odds with the table.

        Raises:
            UnknownEggTypeError: No table for ``egg_type``.
        """
        report = audit_egg(self.tables, egg_type, samples, seed)
        return AuditResponse(
            egg_type=report.egg_type,
            samples=report.samples,
            seed=report.seed,
            max_deviation=report.max_deviation,
            tiers=[
                AuditTierSchema(
                    tier=tier,
                    count=report.counts[tier],
                    observed=report.observed[tier],
                    expected=report.expected[tier],
                )
                for tier in report.counts
            ],
        )
