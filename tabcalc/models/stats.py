"""
Pydantic models for field reading statistics and pressure/flow regression.
"""

from typing import Optional

from pydantic import BaseModel


class ReadingsInput(BaseModel):
    values: list[float]


class AverageOutput(BaseModel):
    average: Optional[float] = None  # None when no readings were given
    count: int


class PressureFlowPoint(BaseModel):
    pressure: float  # ΔP (Pa or in. w.g.)
    flow: float      # CFM or m³/s


class PowerLawInput(BaseModel):
    points: list[PressureFlowPoint]


class PowerLawFit(BaseModel):
    """Q = C × ΔP^n fitted in log space."""
    C: float
    n: float
    r2: float
    count: int  # Number of usable points in the fit
