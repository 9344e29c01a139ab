"""
Static data API schemas.
"""

from pydantic import BaseModel

from hatchery.data.models import Advantage, AffinityName


class AdvantageResponse(BaseModel):
    """Type matchup lookup."""

    attacker: AffinityName
    defender: AffinityName
    advantage: Advantage
    multiplier: float
