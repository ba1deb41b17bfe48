"""
API routes for moist-air properties, dew point and air mixing.
"""

from fastapi import APIRouter, HTTPException

from tabcalc.models.psychrometrics import (
    DewPointInput,
    DewPointResult,
    MixedAirInput,
    MixedAirResult,
    MoistAirState,
    MoistAirStateInput,
)
from tabcalc.engine.errors import ConvergenceError
from tabcalc.engine.mixing import mixed_air_from_streams
from tabcalc.engine.psychrometrics import dew_point_from_dry_bulb_rh, resolve_moist_air_state

router = APIRouter(prefix="/api/v1/psychrometrics", tags=["psychrometrics"])


@router.post("/state", response_model=MoistAirState)
async def moist_air_state(data: MoistAirStateInput) -> MoistAirState:
    """
    Resolve the full moist-air state from dry-bulb temperature and RH.

    Returns vapor pressure, humidity ratio, enthalpy, dew point, wet bulb
    and specific volume.
    """
    try:
        return resolve_moist_air_state(
            t_dry_bulb=data.t_dry_bulb,
            rh_percent=data.rh_percent,
            unit=data.unit,
            p_baro=data.pressure,
        )
    except (ValueError, ConvergenceError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/dew-point", response_model=DewPointResult)
async def dew_point(data: DewPointInput) -> DewPointResult:
    try:
        return dew_point_from_dry_bulb_rh(data.t_dry_bulb, data.rh_percent, data.unit)
    except (ValueError, ConvergenceError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/mixed-air", response_model=MixedAirResult)
async def mixed_air(data: MixedAirInput) -> MixedAirResult:
    """
    Mix two airstreams by flow-weighted humidity ratio and enthalpy.
    """
    try:
        return mixed_air_from_streams(data.stream1, data.stream2, data.pressure)
    except (ValueError, ConvergenceError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
