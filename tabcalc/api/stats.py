"""
API routes for field reading statistics.
"""

from fastapi import APIRouter, HTTPException

from tabcalc.models.stats import AverageOutput, PowerLawFit, PowerLawInput, ReadingsInput
from tabcalc.engine.stats import calc_average, power_law_regression

router = APIRouter(prefix="/api/v1/field-data", tags=["field-data"])


@router.post("/average", response_model=AverageOutput)
async def average(data: ReadingsInput) -> AverageOutput:
    return AverageOutput(average=calc_average(data.values), count=len(data.values))


@router.post("/power-law", response_model=PowerLawFit)
async def power_law(data: PowerLawInput) -> PowerLawFit:
    """
    Fit Q = C × ΔP^n to pressure/flow readings.
    """
    fit = power_law_regression(data.points)
    if fit is None:
        raise HTTPException(
            status_code=422,
            detail="At least two readings with distinct positive pressure and positive flow are required",
        )
    return fit
