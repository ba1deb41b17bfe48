"""
Pydantic models for fan affinity law calculations.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FanAffinityInput(BaseModel):
    """Known fan operating point and the new speed (and optionally diameter)."""

    speed1: float = Field(..., description="Original rotational speed (RPM)")
    speed2: float = Field(..., description="New rotational speed (RPM)")
    diameter1: Optional[float] = Field(default=None, description="Original impeller diameter")
    diameter2: Optional[float] = Field(default=None, description="New impeller diameter")

    # Any subset of the operating point may be scaled
    flow1: Optional[float] = None       # CFM
    pressure1: Optional[float] = None   # in. w.g.
    power1: Optional[float] = None      # BHP


class FanAffinityOutput(BaseModel):
    speed_ratio: float
    diameter_ratio: float
    flow2: Optional[float] = None
    pressure2: Optional[float] = None
    power2: Optional[float] = None
