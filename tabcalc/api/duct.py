"""
API routes for duct friction and fitting losses.
"""

from fastapi import APIRouter, HTTPException

from tabcalc.models.duct import (
    DuctFrictionInput,
    DuctFrictionResult,
    FittingLossInput,
    FittingLossResult,
)
from tabcalc.engine.duct import duct_friction_loss, fitting_loss_from_k

router = APIRouter(prefix="/api/v1/duct", tags=["duct"])


@router.post("/friction-loss", response_model=DuctFrictionResult)
async def friction_loss(data: DuctFrictionInput) -> DuctFrictionResult:
    """
    Darcy–Weisbach friction loss for a straight run of round or rectangular duct.
    """
    try:
        return duct_friction_loss(**data.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/fitting-loss", response_model=FittingLossResult)
async def fitting_loss(data: FittingLossInput) -> FittingLossResult:
    try:
        return fitting_loss_from_k(**data.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
