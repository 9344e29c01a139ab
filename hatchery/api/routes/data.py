"""
Static data API routes.
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import List, Dict, Any

from hatchery.core.engine import GameEngine
from hatchery.core.tables import GameTables
from hatchery.data.models import Affinity

from ..schemas.data import AdvantageResponse
from ..dependencies import get_game_tables

router = APIRouter()


@router.get("/tiers")
async def get_tiers(tables: GameTables = Depends(get_game_tables)) -> List[Dict[str, Any]]:
    """All tiers in rank order."""
    return [tables.tier_info(t).model_dump() for t in tables.tier_order]


@router.get("/types")
async def get_types(tables: GameTables = Depends(get_game_tables)) -> List[Dict[str, Any]]:
    """All types with their matchups."""
    return [info.model_dump() for info in tables.types.values()]


@router.get("/types/{type_id}/abilities")
async def get_type_abilities(
    type_id: str,
    tables: GameTables = Depends(get_game_tables),
) -> List[Dict[str, Any]]:
    """Ability pool of a type."""
    try:
        affinity = Affinity.parse(type_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [a.model_dump() for a in tables.abilities_for(affinity)]


@router.get("/advantage/{attacker}/{defender}", response_model=AdvantageResponse)
async def get_advantage(
    attacker: str,
    defender: str,
    tables: GameTables = Depends(get_game_tables),
):
    """Type advantage of ``attacker`` over ``defender``."""
    try:
        attacker_type = Affinity.parse(attacker)
        defender_type = Affinity.parse(defender)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    engine = GameEngine(tables)
    advantage = engine.type_advantage(attacker_type, defender_type)
    return AdvantageResponse(
        attacker=attacker_type,
        defender=defender_type,
        advantage=advantage,
        multiplier=engine.advantage_multiplier(advantage),
    )
