"""Battle reward calculation."""

import logging

from hatchery.core.rng import RandomDraw
from hatchery.core.tables import GameTables
from hatchery.data.models import BattleRewards, RewardItem

logger = logging.getLogger(__name__)


class RewardCalculator:
    """
    Coins and experience follow fixed formulas; one draw decides the item drop.

    coins = (win or loss base) + player_level * coins_per_level
            + max(0, opponent_level - player_level) * coins_per_level_gap  (wins only)
    experience = floor(coins * experience_ratio)
    """

    def __init__(self, tables: GameTables, draw: RandomDraw):
        self.rules = tables.rewards
        self.draw = draw

    def calculate_coins(self, won: bool, player_level: int, opponent_level: int) -> int:
        rules = self.rules
        coins = rules.win_coins if won else rules.loss_coins
        coins += player_level * rules.coins_per_level
        if won:
            coins += max(0, opponent_level - player_level) * rules.coins_per_level_gap
        return coins

    def calculate(self, won: bool, player_level: int = 1, opponent_level: int = 1) -> BattleRewards:
        if player_level < 1 or opponent_level < 1:
            raise ValueError("Levels start at 1")

        coins = self.calculate_coins(won, player_level, opponent_level)
        experience = int(coins * self.rules.experience_ratio)

        drop_chance = self.rules.win_item_chance if won else self.rules.loss_item_chance
        items = []
        if self.draw.draw_uniform() < drop_chance:
            items.append(RewardItem(type=self.rules.win_item if won else self.rules.loss_item))

        logger.debug("Battle rewards (won=%s): %d coins, %d xp, %d items", won, coins, experience, len(items))
        return BattleRewards(coins=coins, experience=experience, items=items)
