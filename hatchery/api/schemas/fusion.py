"""
Fusion-related API schemas.
"""

from pydantic import BaseModel
from typing import List, Optional

from hatchery.data.models import FusionMaterial, FusionOutcome, TierName

from .common import SeededRequest


class FusionPreviewRequest(BaseModel):
    """Fusion odds request."""

    materials: List[FusionMaterial]
    target_tier: TierName


class FusionExecuteRequest(SeededRequest):
    """Fusion attempt."""

    materials: List[FusionMaterial]
    target_tier: TierName


class FusionExecuteResponse(BaseModel):
    """Fusion result."""

    outcome: FusionOutcome
    seed: Optional[int] = None
    parity: bool = False
