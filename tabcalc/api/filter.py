"""
API routes for filter pressure drop.
"""

from fastapi import APIRouter, HTTPException

from tabcalc.models.filter import FilterPressureDropInput, FilterPressureDropOutput
from tabcalc.engine.filter import calculate_filter_pressure_drop

router = APIRouter(prefix="/api/v1/filter", tags=["filter"])


@router.post("/pressure-drop", response_model=FilterPressureDropOutput)
async def pressure_drop(data: FilterPressureDropInput) -> FilterPressureDropOutput:
    try:
        return calculate_filter_pressure_drop(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
