"""
API routes for Pitot traverse and air change calculations.
"""

from fastapi import APIRouter, HTTPException

from tabcalc.models.airflow import (
    AirChangesInput,
    AirChangesOutput,
    PitotCalcInput,
    PitotCalcOutput,
)
from tabcalc.engine.airflow import calculate_air_changes, calculate_pitot

router = APIRouter(prefix="/api/v1/airflow", tags=["airflow"])


@router.post("/pitot", response_model=PitotCalcOutput)
async def pitot_calc(data: PitotCalcInput) -> PitotCalcOutput:
    """
    Solve the Pitot relation V = 4005 × √(Pv × 0.075 / ρ).

    Provide two of velocity, velocity pressure and density; the third is solved.
    """
    try:
        return calculate_pitot(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/air-changes", response_model=AirChangesOutput)
async def air_changes(data: AirChangesInput) -> AirChangesOutput:
    try:
        return calculate_air_changes(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
