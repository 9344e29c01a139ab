# Core engine modules
from .rng import (
    RandomStream,
    SystemStream,
    SeededStream,
    ParityStream,
    RandomDraw,
    make_stream,
)
from .tables import GameTables, TABLE_TOTAL
from .battle import BattleResolver, CRITICAL_CHANCE
from .creature_generator import CreatureGenerator
from .egg_preview import EggPreviewGenerator
from .power import PowerCalculator, advantage_multiplier, ADVANTAGE_MULTIPLIERS
from .fusion import FusionResolver
from .rewards import RewardCalculator
from .engine import GameEngine
from .audit import HatchAuditReport, audit_egg

__all__ = [
    # Randomness
    "RandomStream",
    "SystemStream",
    "SeededStream",
    "ParityStream",
    "RandomDraw",
    "make_stream",
    # Tables
    "GameTables",
    "TABLE_TOTAL",
    # Engine parts
    "CreatureGenerator",
    "EggPreviewGenerator",
    "PowerCalculator",
    "advantage_multiplier",
    "ADVANTAGE_MULTIPLIERS",
    "BattleResolver",
    "CRITICAL_CHANCE",
    "FusionResolver",
    "RewardCalculator",
    "GameEngine",
    # Audit
    "HatchAuditReport",
    "audit_egg",
]
