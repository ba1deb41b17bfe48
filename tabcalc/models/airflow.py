"""
Pydantic models for airflow calculations.

Provides models for:
  - Pitot traverse: solve for velocity, velocity pressure, or air density
  - Air changes: solve for CFM or air changes per hour
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from tabcalc.config import STANDARD_AIR_DENSITY_LB_FT3


class PitotMode(str, Enum):
    SOLVE_VELOCITY = "solve_velocity"                      # V from Pv and ρ
    SOLVE_VELOCITY_PRESSURE = "solve_velocity_pressure"    # Pv from V and ρ
    SOLVE_DENSITY = "solve_density"                        # ρ from V and Pv


class AirChangesMode(str, Enum):
    SOLVE_CFM = "solve_cfm"  # CFM = V × ACH / 60
    SOLVE_ACH = "solve_ach"  # ACH = CFM × 60 / V


class PitotCalcInput(BaseModel):
    """Input for a Pitot / velocity pressure calculation."""
    calc_mode: PitotMode

    # Two of these three are used; the third is solved
    velocity: Optional[float] = None            # FPM
    velocity_pressure: Optional[float] = None   # in. w.g.
    density: float = STANDARD_AIR_DENSITY_LB_FT3  # lb/ft³


class PitotCalcOutput(BaseModel):
    """Result of a Pitot / velocity pressure calculation."""
    calc_mode: PitotMode
    velocity: float             # FPM
    velocity_pressure: float    # in. w.g.
    density: float              # lb/ft³
    formula: str                # Human-readable formula string


class AirChangesInput(BaseModel):
    calc_mode: AirChangesMode
    volume_ft3: float
    cfm: Optional[float] = None
    ach: Optional[float] = None


class AirChangesOutput(BaseModel):
    calc_mode: AirChangesMode
    volume_ft3: float
    cfm: float
    ach: float
