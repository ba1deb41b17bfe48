"""
API routes for fan affinity law calculations.
"""

from fastapi import APIRouter, HTTPException

from tabcalc.models.fan_affinity import FanAffinityInput, FanAffinityOutput
from tabcalc.engine.fan_affinity import calculate_fan_affinity

router = APIRouter(prefix="/api/v1", tags=["fan-affinity"])


@router.post("/fan-affinity", response_model=FanAffinityOutput)
async def fan_affinity(data: FanAffinityInput) -> FanAffinityOutput:
    """
    Scale flow, pressure and/or power to a new fan speed and impeller diameter.
    """
    try:
        return calculate_fan_affinity(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
