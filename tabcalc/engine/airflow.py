"""
Airflow relationships for duct traverses and room air changes.

Provides:
  - Pitot / velocity pressure relations (Pv in in. w.g., ρ in lb/ft³):
        V (FPM) = 4005 × sqrt(Pv × 0.075 / ρ)
        Pv      = (V / 4005)² × (ρ / 0.075)
  - Air changes per hour:
        CFM = V × ACH / 60,   ACH = CFM × 60 / V

The scalar relations return NaN for invalid input instead of raising; callers
check math.isfinite() on the result. The calculate_* entry points turn a NaN
result into an InvalidInputError for callers that expect exceptions.
"""

import math

from tabcalc.config import STANDARD_AIR_DENSITY_LB_FT3
from tabcalc.engine.errors import InvalidInputError
from tabcalc.models.airflow import (
    AirChangesInput,
    AirChangesMode,
    AirChangesOutput,
    PitotCalcInput,
    PitotCalcOutput,
    PitotMode,
)

# V (FPM) = 4005 × sqrt(Pv) at standard density
_PITOT_CONSTANT = 4005.0


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


# --- Pitot / velocity pressure ---

def velocity_from_velocity_pressure(
    velocity_pressure: float,
    density: float = STANDARD_AIR_DENSITY_LB_FT3,
) -> float:
    """Air velocity (FPM) from velocity pressure (in. w.g.). NaN on invalid input."""
    if not _finite(velocity_pressure, density):
        return math.nan
    if velocity_pressure < 0.0 or density <= 0.0:
        return math.nan

    return _PITOT_CONSTANT * math.sqrt(velocity_pressure * STANDARD_AIR_DENSITY_LB_FT3 / density)


def velocity_pressure_from_velocity(
    velocity: float,
    density: float = STANDARD_AIR_DENSITY_LB_FT3,
) -> float:
    """Velocity pressure (in. w.g.) from air velocity (FPM). NaN on invalid input."""
    if not _finite(velocity, density):
        return math.nan
    if velocity < 0.0 or density <= 0.0:
        return math.nan

    return (velocity / _PITOT_CONSTANT) ** 2 * (density / STANDARD_AIR_DENSITY_LB_FT3)


def density_from_velocity_and_pressure(velocity: float, velocity_pressure: float) -> float:
    """Air density (lb/ft³) implied by a velocity and velocity pressure. NaN on invalid input."""
    if not _finite(velocity, velocity_pressure):
        return math.nan
    if velocity <= 0.0 or velocity_pressure < 0.0:
        return math.nan

    # ρ = 0.075 × Pv / (V/4005)²
    ratio = (velocity / _PITOT_CONSTANT) ** 2
    if ratio == 0.0:
        return math.nan
    return STANDARD_AIR_DENSITY_LB_FT3 * (velocity_pressure / ratio)


# --- Air changes ---

def cfm_from_ach(volume_ft3: float, ach: float) -> float:
    """Airflow (CFM) for a room volume and air change rate. NaN on invalid input."""
    if not _finite(volume_ft3, ach):
        return math.nan
    if volume_ft3 <= 0.0 or ach < 0.0:
        return math.nan
    return (volume_ft3 * ach) / 60.0


def ach_from_cfm(volume_ft3: float, cfm: float) -> float:
    """Air changes per hour for a room volume and airflow. NaN on invalid input."""
    if not _finite(volume_ft3, cfm):
        return math.nan
    if volume_ft3 <= 0.0 or cfm < 0.0:
        return math.nan
    return (cfm * 60.0) / volume_ft3


# --- Calculator entry points ---

def calculate_pitot(calc_input: PitotCalcInput) -> PitotCalcOutput:
    """
    Solve the Pitot relation for the unknown variable.
    """
    ci = calc_input

    if ci.calc_mode == PitotMode.SOLVE_VELOCITY:
        if ci.velocity_pressure is None:
            raise InvalidInputError("velocity_pressure is required when solving for velocity")
        velocity = velocity_from_velocity_pressure(ci.velocity_pressure, ci.density)
        velocity_pressure = ci.velocity_pressure
        density = ci.density

    elif ci.calc_mode == PitotMode.SOLVE_VELOCITY_PRESSURE:
        if ci.velocity is None:
            raise InvalidInputError("velocity is required when solving for velocity pressure")
        velocity_pressure = velocity_pressure_from_velocity(ci.velocity, ci.density)
        velocity = ci.velocity
        density = ci.density

    elif ci.calc_mode == PitotMode.SOLVE_DENSITY:
        if ci.velocity is None or ci.velocity_pressure is None:
            raise InvalidInputError(
                "velocity and velocity_pressure are required when solving for density"
            )
        density = density_from_velocity_and_pressure(ci.velocity, ci.velocity_pressure)
        velocity = ci.velocity
        velocity_pressure = ci.velocity_pressure

    else:
        raise InvalidInputError(f"Unknown calc_mode: {ci.calc_mode}")

    if not _finite(velocity, velocity_pressure, density):
        raise InvalidInputError(
            "Unable to compute: velocity and velocity pressure must be >= 0 "
            "and density must be > 0"
        )

    return PitotCalcOutput(
        calc_mode=ci.calc_mode,
        velocity=velocity,
        velocity_pressure=velocity_pressure,
        density=density,
        formula=_build_formula(ci.calc_mode, velocity, velocity_pressure, density),
    )


def calculate_air_changes(calc_input: AirChangesInput) -> AirChangesOutput:
    ci = calc_input

    if ci.calc_mode == AirChangesMode.SOLVE_CFM:
        if ci.ach is None:
            raise InvalidInputError("ach is required when solving for CFM")
        cfm = cfm_from_ach(ci.volume_ft3, ci.ach)
        ach = ci.ach
    else:
        if ci.cfm is None:
            raise InvalidInputError("cfm is required when solving for ACH")
        ach = ach_from_cfm(ci.volume_ft3, ci.cfm)
        cfm = ci.cfm

    if not _finite(cfm, ach):
        raise InvalidInputError(
            "Unable to compute: volume must be > 0 and airflow / air changes must be >= 0"
        )

    return AirChangesOutput(calc_mode=ci.calc_mode, volume_ft3=ci.volume_ft3, cfm=cfm, ach=ach)


def _build_formula(
    calc_mode: PitotMode,
    velocity: float,
    velocity_pressure: float,
    density: float,
) -> str:
    """Build a human-readable formula string showing the calculation."""
    V_str = f"{velocity:,.1f} FPM"
    Pv_str = f"{velocity_pressure:.4g} in.w.g."
    rho_str = f"{density:.4g} lb/ft³"

    if calc_mode == PitotMode.SOLVE_VELOCITY:
        return f"V = 4005 × √({Pv_str} × 0.075 / {rho_str}) = {V_str}"
    elif calc_mode == PitotMode.SOLVE_VELOCITY_PRESSURE:
        return f"Pv = ({V_str} / 4005)² × ({rho_str} / 0.075) = {Pv_str}"
    else:  # SOLVE_DENSITY
        return f"ρ = 0.075 × {Pv_str} / ({V_str} / 4005)² = {rho_str}"
