"""API services."""

from .egg_service import EggService
from .battle_service import BattleService
from .fusion_service import FusionService

__all__ = [
    "EggService",
    "BattleService",
    "FusionService",
]
