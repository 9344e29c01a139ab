"""
Battle service.
"""

from hatchery.core.engine import GameEngine
from hatchery.core.power import level_factor
from hatchery.core.tables import GameTables
from hatchery.data.models import Creature

from ..schemas.battle import (
    BattleRewardsRequest,
    BattleRewardsResponse,
    PowerResponse,
    ResolveBattleRequest,
    ResolveBattleResponse,
)


class BattleService:
    """Battle resolution, rewards and power lookups."""

    def __init__(self, tables: GameTables):
        self.tables = tables

    def resolve(self, request: ResolveBattleRequest) -> ResolveBattleResponse:
        """
        Resolve a battle on a fresh engine.

        Raises:
            InvalidRosterError: A roster is empty.
        """
        engine = GameEngine.seeded(self.tables, request.seed, parity=request.parity)
        outcome = engine.resolve_battle(request.attackers, request.defenders)
        return ResolveBattleResponse(outcome=outcome, seed=request.seed, parity=request.parity)

    def rewards(self, request: BattleRewardsRequest) -> BattleRewardsResponse:
        engine = GameEngine.seeded(self.tables, request.seed, parity=request.parity)
        rewards = engine.calculate_battle_rewards(
            won=request.won,
            player_level=request.player_level,
            opponent_level=request.opponent_level,
        )
        return BattleRewardsResponse(rewards=rewards, seed=request.seed)

    def power(self, creature: Creature) -> PowerResponse:
        engine = GameEngine(self.tables)
        return PowerResponse(
            power=engine.calculate_power(creature),
            tier_multiplier=self.tables.stat_multiplier(creature.tier),
            level_factor=level_factor(creature.level),
        )
