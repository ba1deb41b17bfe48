"""
Pydantic models for moist-air state, dew point and air mixing input/output.
"""

from typing import Optional

from pydantic import BaseModel, Field

from tabcalc.config import TempUnit, STANDARD_PRESSURE_PA


class MoistAirStateInput(BaseModel):
    """Input for resolving a moist-air state from dry-bulb and RH."""

    t_dry_bulb: float = Field(..., description="Dry-bulb temperature in `unit`")
    rh_percent: float = Field(..., description="Relative humidity (0-100%)")
    unit: TempUnit = Field(default=TempUnit.F, description="Temperature unit: F or C")
    pressure: float = Field(
        default=STANDARD_PRESSURE_PA,
        description="Barometric pressure (Pa)",
    )


class MoistAirState(BaseModel):
    """Full resolved moist-air state with all derived properties."""

    # Input echo
    unit: TempUnit = TempUnit.F
    pressure: float

    t_dry_bulb_f: float = Field(..., description="Dry-bulb temperature (°F)")
    t_dry_bulb_c: float = Field(..., description="Dry-bulb temperature (°C)")
    rh_percent: float = Field(..., description="Relative humidity (0-100%)")
    vapor_pressure: float = Field(..., description="Partial vapor pressure (Pa)")
    saturation_pressure: float = Field(..., description="Saturation pressure at dry-bulb (Pa)")
    humidity_ratio: float = Field(..., description="Humidity ratio (lb_w/lb_da)")
    humidity_ratio_grains: float = Field(..., description="Humidity ratio (grains/lb)")
    enthalpy: float = Field(..., description="Specific enthalpy (BTU/lb_da)")
    dew_point: Optional[float] = Field(..., description="Dew point temperature in `unit`; None at 0% RH")
    wet_bulb: float = Field(..., description="Wet-bulb temperature in `unit`")
    specific_volume: float = Field(..., description="Specific volume (ft³/lb_da)")


class DewPointInput(BaseModel):
    t_dry_bulb: float
    rh_percent: float
    unit: TempUnit = TempUnit.F


class DewPointResult(BaseModel):
    dew_point: float
    unit: TempUnit


class Airstream(BaseModel):
    """One entering airstream for the mixing calculation."""
    cfm: float              # Volumetric flow (CFM), >= 0
    t_dry_bulb_f: float     # Dry-bulb temperature (°F)
    rh_percent: float       # Relative humidity (0-100%)


class MixedAirInput(BaseModel):
    stream1: Airstream
    stream2: Airstream
    pressure: float = STANDARD_PRESSURE_PA  # Pa


class MixedAirResult(BaseModel):
    """Resultant state of two mixed airstreams."""
    t_dry_bulb_f: float
    rh_percent: float
    humidity_ratio: float   # lb_w/lb_da
    enthalpy_btu_lb: float  # BTU/lb_da
