"""Battle Resolver.

Compares the summed power of two rosters. The attacker's total is scaled
once by the type matchup of the two leading creatures. The winner is
decided without randomness; one draw then sets the critical flag, which
only scales rewards.
"""

import logging
from typing import Final, Sequence

from hatchery.core.power import PowerCalculator
from hatchery.core.rng import RandomDraw
from hatchery.data.models import BattleOutcome, BattleSide, Creature
from hatchery.errors import InvalidRosterError

logger = logging.getLogger(__name__)

CRITICAL_CHANCE: Final[float] = 0.10


class BattleResolver:
    """Resolves roster-vs-roster battles."""

    def __init__(self, power: PowerCalculator, draw: RandomDraw):
        self.power = power
        self.draw = draw

    def resolve(
        self,
        attackers: Sequence[Creature],
        defenders: Sequence[Creature],
    ) -> BattleOutcome:
        """
        Resolve one battle.

        Args:
            attackers: Attacking roster; its first creature sets the team type.
            defenders: Defending roster; its first creature sets the team type.

        Returns:
            BattleOutcome. Equal adjusted power goes to the defender.

        Raises:
            InvalidRosterError: Either roster is empty. No draw is made.
        """
        if not attackers:
            raise InvalidRosterError("Attacking roster has no creatures")
        if not defenders:
            raise InvalidRosterError("Defending roster has no creatures")

        attacker_power = self.power.roster_power(list(attackers))
        defender_power = self.power.roster_power(list(defenders))

        attacker_type = attackers[0].type
        defender_type = defenders[0].type
        advantage = self.power.type_advantage(attacker_type, defender_type)
        multiplier = self.power.type_multiplier(attacker_type, defender_type)
        adjusted = attacker_power * multiplier

        if adjusted > defender_power:
            winner = BattleSide.ATTACKER
            margin = _margin(adjusted, defender_power)
        else:
            winner = BattleSide.DEFENDER
            margin = _margin(defender_power, adjusted)

        critical_roll = self.draw.draw_uniform()
        outcome = BattleOutcome(
            winner=winner,
            critical=critical_roll < CRITICAL_CHANCE,
            critical_roll=critical_roll,
            attacker_power=attacker_power,
            defender_power=defender_power,
            attacker_type=attacker_type,
            defender_type=defender_type,
            advantage=advantage,
            multiplier=multiplier,
            attacker_adjusted_power=adjusted,
            margin=margin,
        )
        logger.debug(
            "Battle %s(%d, %s x%.1f = %.1f) vs %s(%d): %s wins, critical=%s",
            attacker_type.value,
            attacker_power,
            advantage.value,
            multiplier,
            adjusted,
            defender_type.value,
            defender_power,
            winner.value,
            outcome.critical,
        )
        return outcome


def _margin(winner_power: float, loser_power: float) -> float:
    """Relative lead of the winner, 0 when the winner has no power."""
    if winner_power <= 0:
        return 0.0
    return (winner_power - loser_power) / winner_power
