"""
Fusion API routes.
"""

from fastapi import APIRouter, HTTPException, Depends

from hatchery.data.models import FusionPreview, FusionRequirements, Tier
from hatchery.errors import InsufficientMaterialsError, UnknownFusionTargetError

from ..schemas.fusion import FusionExecuteRequest, FusionExecuteResponse, FusionPreviewRequest
from ..services.fusion_service import FusionService
from ..dependencies import get_fusion_service

router = APIRouter()


def _parse_tier(value: str) -> Tier:
    try:
        return Tier.parse(value)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/requirements/{target_tier}", response_model=FusionRequirements)
async def fusion_requirements(
    target_tier: str,
    service: FusionService = Depends(get_fusion_service),
):
    """Materials and cost needed to fuse into a tier."""
    try:
        return service.requirements(_parse_tier(target_tier))
    except UnknownFusionTargetError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/preview", response_model=FusionPreview)
async def preview_fusion(
    request: FusionPreviewRequest,
    service: FusionService = Depends(get_fusion_service),
):
    """Odds, cost and material value without rolling."""
    try:
        return service.preview(request)
    except UnknownFusionTargetError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/execute", response_model=FusionExecuteResponse)
async def execute_fusion(
    request: FusionExecuteRequest,
    service: FusionService = Depends(get_fusion_service),
):
    """
    Attempt a fusion.

    Materials are consumed whether or not it succeeds; the caller removes
    them from inventory.
    """
    try:
        return service.execute(request)
    except (InsufficientMaterialsError, UnknownFusionTargetError) as e:
        raise HTTPException(status_code=400, detail=str(e))
