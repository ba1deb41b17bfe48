"""
Pydantic models for duct pressure loss calculations.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from tabcalc.config import (
    STANDARD_PRESSURE_PA,
    DEFAULT_DUCT_ROUGHNESS_MM,
    DEFAULT_AIR_TEMPERATURE_C,
)


class DuctShape(str, Enum):
    ROUND = "round"
    RECTANGULAR = "rectangular"


class DuctFrictionInput(BaseModel):
    """Input for a straight-run Darcy–Weisbach friction loss."""
    cfm: float
    length_ft: float
    shape: DuctShape
    diameter_in: Optional[float] = None   # round
    width_in: Optional[float] = None      # rectangular
    height_in: Optional[float] = None     # rectangular
    roughness_mm: float = Field(default=DEFAULT_DUCT_ROUGHNESS_MM, description="Absolute roughness")
    temperature_c: float = DEFAULT_AIR_TEMPERATURE_C
    pressure_pa: float = STANDARD_PRESSURE_PA


class DuctFrictionResult(BaseModel):
    velocity_m_s: float
    reynolds: float
    friction_factor: float
    delta_p_pa: float
    delta_p_in_wg: float


class FittingLossInput(BaseModel):
    """Input for a fitting loss from its loss coefficient K."""
    cfm: float
    k: float
    shape: DuctShape
    diameter_in: Optional[float] = None
    width_in: Optional[float] = None
    height_in: Optional[float] = None
    temperature_c: float = DEFAULT_AIR_TEMPERATURE_C
    pressure_pa: float = STANDARD_PRESSURE_PA


class FittingLossResult(BaseModel):
    velocity_m_s: float
    delta_p_pa: float
    delta_p_in_wg: float
