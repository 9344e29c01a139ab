# Data Models
from .tier import Tier, TierInfo, TierName
from .affinity import Affinity, AffinityInfo, AffinityName, Advantage
from .ability import Ability
from .egg import EggTable, PityRule
from .rules import (
    StatRange,
    StatRanges,
    FusionRecipe,
    FusionRules,
    RewardRules,
    round_half_up,
)
from .creature import Creature, CreatureStats
from .outcome import (
    BattleSide,
    BattleOutcome,
    PreviewEntry,
    FusionRequirements,
    FusionMaterial,
    FusionOutcome,
    FusionPreview,
    RewardItem,
    BattleRewards,
)

__all__ = [
    "Tier",
    "TierInfo",
    "TierName",
    "Affinity",
    "AffinityInfo",
    "AffinityName",
    "Advantage",
    "Ability",
    "EggTable",
    "PityRule",
    "StatRange",
    "StatRanges",
    "FusionRecipe",
    "FusionRules",
    "RewardRules",
    "round_half_up",
    "Creature",
    "CreatureStats",
    "BattleSide",
    "BattleOutcome",
    "PreviewEntry",
    "FusionRequirements",
    "FusionMaterial",
    "FusionOutcome",
    "FusionPreview",
    "RewardItem",
    "BattleRewards",
]
