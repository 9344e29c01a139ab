"""Game engine facade.

One GameEngine binds a set of tables to one random stream and exposes every
engine operation. Engines are cheap; build one per request (or per replay)
rather than sharing a seeded engine between concurrent callers.
"""

from typing import Optional, Sequence, Union

from hatchery.core.battle import BattleResolver
from hatchery.core.creature_generator import CreatureGenerator
from hatchery.core.egg_preview import EggPreviewGenerator
from hatchery.core.fusion import FusionResolver
from hatchery.core.power import PowerCalculator, advantage_multiplier
from hatchery.core.rewards import RewardCalculator
from hatchery.core.rng import RandomDraw, RandomStream, make_stream
from hatchery.core.tables import GameTables
from hatchery.data.models import (
    Advantage,
    Affinity,
    BattleOutcome,
    BattleRewards,
    Creature,
    EggTable,
    FusionMaterial,
    FusionOutcome,
    FusionPreview,
    FusionRequirements,
    PreviewEntry,
    Tier,
)

TierLike = Union[Tier, str, int]
AffinityLike = Union[Affinity, str]


class GameEngine:
    """Hatching, battles and fusion over one table set and one stream."""

    def __init__(self, tables: GameTables, stream: Optional[RandomStream] = None):
        self.tables = tables
        self.draw = RandomDraw(stream)
        self.power = PowerCalculator(tables)
        self.generator = CreatureGenerator(tables, self.draw)
        self.previewer = EggPreviewGenerator(tables)
        self.battles = BattleResolver(self.power, self.draw)
        self.fusion = FusionResolver(tables, self.draw)
        self.rewards = RewardCalculator(tables, self.draw)

    @classmethod
    def seeded(cls, tables: GameTables, seed: Optional[int], parity: bool = False) -> "GameEngine":
        """Engine on a seeded stream, or on system entropy when ``seed`` is None."""
        return cls(tables, make_stream(seed, parity=parity))

    @property
    def draws(self) -> int:
        """Values consumed from the stream so far."""
        return self.draw.draws

    # Hatching

    def generate_creature(self, egg_type: str, pity_counter: int = 0) -> Creature:
        return self.generator.generate(egg_type, pity_counter)

    def preview_egg(self, egg_type: str, pity_counter: int = 0) -> list[PreviewEntry]:
        return self.previewer.preview(egg_type, pity_counter)

    def list_egg_types(self) -> list[EggTable]:
        return list(self.tables.eggs.values())

    # Power and matchups

    def calculate_power(self, creature: Creature) -> int:
        return self.power.calculate_power(creature)

    def type_advantage(self, attacker: AffinityLike, defender: AffinityLike) -> Advantage:
        return self.power.type_advantage(Affinity.parse(attacker), Affinity.parse(defender))

    def advantage_multiplier(self, advantage: Advantage) -> float:
        return advantage_multiplier(Advantage(advantage))

    # Battles

    def resolve_battle(self, attackers: Sequence[Creature], defenders: Sequence[Creature]) -> BattleOutcome:
        return self.battles.resolve(attackers, defenders)

    def calculate_battle_rewards(self, won: bool, player_level: int = 1, opponent_level: int = 1) -> BattleRewards:
        return self.rewards.calculate(won, player_level, opponent_level)

    # Fusion

    def calculate_fusion_requirements(self, target_tier: TierLike) -> FusionRequirements:
        return self.fusion.calculate_requirements(Tier.parse(target_tier))

    def calculate_fusion_success(self, materials: Sequence[FusionMaterial], target_tier: TierLike) -> float:
        return self.fusion.calculate_success(materials, Tier.parse(target_tier))

    def preview_fusion(self, materials: Sequence[FusionMaterial], target_tier: TierLike) -> FusionPreview:
        return self.fusion.preview(materials, Tier.parse(target_tier))

    def execute_fusion(self, materials: Sequence[FusionMaterial], target_tier: TierLike) -> FusionOutcome:
        return self.fusion.execute(materials, Tier.parse(target_tier))
