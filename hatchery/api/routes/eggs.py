"""
Egg API routes.
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from hatchery.errors import UnknownEggTypeError

from ..config import settings
from ..schemas.eggs import (
    AuditResponse,
    EggPreviewResponse,
    EggTypeSchema,
    HatchRequest,
    HatchResponse,
)
from ..services.egg_service import EggService
from ..dependencies import get_egg_service

router = APIRouter()


@router.get("", response_model=List[EggTypeSchema])
async def list_eggs(service: EggService = Depends(get_egg_service)):
    """List egg types with their drop tables."""
    return service.list_eggs()


@router.get("/{egg_type}/preview", response_model=EggPreviewResponse)
async def preview_egg(
    egg_type: str,
    pity_counter: int = Query(default=0, ge=0),
    service: EggService = Depends(get_egg_service),
):
    """
    Show the exact odds of an egg.

    Consumes no randomness; the odds are the ones a hatch with the same
    pity counter will use.
    """
    try:
        return service.preview(egg_type, pity_counter)
    except UnknownEggTypeError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{egg_type}/hatch", response_model=HatchResponse)
async def hatch_egg(
    egg_type: str,
    request: HatchRequest,
    service: EggService = Depends(get_egg_service),
):
    """Hatch one creature. Pass a seed to make the roll replayable."""
    try:
        return service.hatch(egg_type, request)
    except UnknownEggTypeError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{egg_type}/audit", response_model=AuditResponse)
def audit_egg(
    egg_type: str,
    samples: int = Query(default=settings.DEFAULT_AUDIT_SAMPLES, ge=1, le=settings.MAX_AUDIT_SAMPLES),
    seed: Optional[int] = Query(default=None, ge=0),
    service: EggService = Depends(get_egg_service),
):
    """
    Run seeded hatches and compare observed odds with the table.

    Runs in the FastAPI threadpool.
    """
    try:
        return service.audit(egg_type, samples, seed)
    except UnknownEggTypeError as e:
        raise HTTPException(status_code=404, detail=str(e))
