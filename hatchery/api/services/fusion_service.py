"""
Fusion service.
"""

from hatchery.core.engine import GameEngine
from hatchery.core.tables import GameTables
from hatchery.data.models import FusionPreview, FusionRequirements, Tier

from ..schemas.fusion import FusionExecuteRequest, FusionExecuteResponse, FusionPreviewRequest


class FusionService:
    """Fusion requirements, previews and attempts."""

    def __init__(self, tables: GameTables):
        self.tables = tables

    def requirements(self, target_tier: Tier) -> FusionRequirements:
        return GameEngine(self.tables).calculate_fusion_requirements(target_tier)

    def preview(self, request: FusionPreviewRequest) -> FusionPreview:
        return GameEngine(self.tables).preview_fusion(request.materials, request.target_tier)

    def execute(self, request: FusionExecuteRequest) -> FusionExecuteResponse:
        """
        Attempt a fusion on a fresh engine.

        Raises:
            UnknownFusionTargetError: No recipe for the target tier.
            InsufficientMaterialsError: Materials break the recipe.
        """
        engine = GameEngine.seeded(self.tables, request.seed, parity=request.parity)
        outcome = engine.execute_fusion(request.materials, request.target_tier)
        return FusionExecuteResponse(outcome=outcome, seed=request.seed, parity=request.parity)
