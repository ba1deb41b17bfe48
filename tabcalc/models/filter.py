"""
Pydantic models for filter pressure drop calculations.
"""

from typing import Optional

from pydantic import BaseModel


class FilterPressureDropInput(BaseModel):
    delta_p1: float                             # Measured ΔP at flow1 (in. w.g.)
    flow1: float                                # CFM at which delta_p1 was measured
    flow2: float                                # CFM of interest
    loading_multiplier: Optional[float] = None  # Dirty/clean ratio, >= 1


class FilterPressureDropOutput(BaseModel):
    delta_p_clean: float                # ΔP at flow2, clean media
    delta_p_loaded: Optional[float] = None  # ΔP at flow2 with loading applied
