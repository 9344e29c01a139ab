"""
Battle API routes.
"""

from fastapi import APIRouter, HTTPException, Depends

from hatchery.errors import InvalidRosterError

from ..schemas.battle import (
    BattleRewardsRequest,
    BattleRewardsResponse,
    PowerRequest,
    PowerResponse,
    ResolveBattleRequest,
    ResolveBattleResponse,
)
from ..services.battle_service import BattleService
from ..dependencies import get_battle_service

router = APIRouter()


@router.post("/resolve", response_model=ResolveBattleResponse)
async def resolve_battle(
    request: ResolveBattleRequest,
    service: BattleService = Depends(get_battle_service),
):
    """
    Resolve a battle between two rosters.

    The first creature of each roster sets the team type.
    """
    try:
        return service.resolve(request)
    except InvalidRosterError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/rewards", response_model=BattleRewardsResponse)
async def battle_rewards(
    request: BattleRewardsRequest,
    service: BattleService = Depends(get_battle_service),
):
    """Coins, experience and item drops for a finished battle."""
    return service.rewards(request)


@router.post("/power", response_model=PowerResponse)
async def creature_power(
    request: PowerRequest,
    service: BattleService = Depends(get_battle_service),
):
    """Power of a single creature."""
    return service.power(request.creature)
