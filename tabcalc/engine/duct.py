"""
Duct pressure loss calculations.

Straight runs use Darcy–Weisbach with the Swamee–Jain explicit friction
factor (laminar 64/Re below Re = 2300):

    ΔP = f × (L / Dh) × (ρ V² / 2)
    f  = 0.25 / [log10(ε/(3.7·Dh) + 5.74 / Re^0.9)]²

Fittings use the loss-coefficient method, ΔP = K × (ρ V² / 2), or the
field form ΔP = C × VP with VP in in. w.g.

Internal calculations are SI; inputs follow field units (CFM, in, ft).
"""

import math
from typing import Optional

from tabcalc.config import (
    KELVIN_OFFSET,
    STANDARD_PRESSURE_PA,
    DEFAULT_DUCT_ROUGHNESS_MM,
    DEFAULT_AIR_TEMPERATURE_C,
)
from tabcalc.engine.conversions import cfm_to_m3s, ft_to_m, inch_to_m, m_to_ft, pa_to_in_wg
from tabcalc.engine.errors import InvalidInputError, check_finite
from tabcalc.models.duct import DuctFrictionResult, DuctShape, FittingLossResult

_R_DRY_AIR = 287.055        # J/(kg·K)
_NU_0 = 1.32e-5             # m²/s, kinematic viscosity near 0°C
_LAMINAR_RE_LIMIT = 2300.0


def air_density_kg_m3(
    temperature_c: float = DEFAULT_AIR_TEMPERATURE_C,
    pressure_pa: float = STANDARD_PRESSURE_PA,
) -> float:
    """Dry-air density from the ideal gas law."""
    check_finite(temperature_c, "temperature_c")
    check_finite(pressure_pa, "pressure_pa")
    T = temperature_c + KELVIN_OFFSET
    if T <= 0.0:
        raise InvalidInputError("temperature_c must be above absolute zero")
    return pressure_pa / (_R_DRY_AIR * T)


def air_kinematic_viscosity(temperature_c: float = DEFAULT_AIR_TEMPERATURE_C) -> float:
    """Approximate kinematic viscosity of air (m²/s); adequate for TAB field calcs."""
    check_finite(temperature_c, "temperature_c")
    T = temperature_c + KELVIN_OFFSET
    if T <= 0.0:
        raise InvalidInputError("temperature_c must be above absolute zero")
    return _NU_0 * (T / KELVIN_OFFSET) ** 1.5


def _rectangular_sides_m(width_in: Optional[float], height_in: Optional[float]) -> tuple[float, float]:
    if width_in is None or height_in is None:
        raise InvalidInputError("width_in and height_in are required for rectangular duct")
    check_finite(width_in, "width_in")
    check_finite(height_in, "height_in")
    if width_in <= 0.0 or height_in <= 0.0:
        raise InvalidInputError("Width and height must be > 0")
    return inch_to_m(width_in), inch_to_m(height_in)


def hydraulic_diameter_m(
    shape: DuctShape,
    diameter_in: Optional[float] = None,
    width_in: Optional[float] = None,
    height_in: Optional[float] = None,
) -> float:
    """Hydraulic diameter; 2ab/(a+b) for rectangular duct."""
    if shape == DuctShape.ROUND:
        if diameter_in is None:
            raise InvalidInputError("diameter_in is required for round duct")
        check_finite(diameter_in, "diameter_in")
        if diameter_in <= 0.0:
            raise InvalidInputError("Diameter must be > 0")
        return inch_to_m(diameter_in)

    a, b = _rectangular_sides_m(width_in, height_in)
    return (2.0 * a * b) / (a + b)


def area_m2(
    shape: DuctShape,
    diameter_in: Optional[float] = None,
    width_in: Optional[float] = None,
    height_in: Optional[float] = None,
) -> float:
    if shape == DuctShape.ROUND:
        d = hydraulic_diameter_m(shape, diameter_in=diameter_in)
        return math.pi * d ** 2 / 4.0
    a, b = _rectangular_sides_m(width_in, height_in)
    return a * b


def velocity_m_s(cfm: float, area: float) -> float:
    check_finite(cfm, "cfm")
    check_finite(area, "area")
    if cfm < 0.0:
        raise InvalidInputError("CFM must be >= 0")
    if area <= 0.0:
        raise InvalidInputError("Area must be > 0")
    return cfm_to_m3s(cfm) / area


def reynolds_number(velocity: float, hydraulic_diameter: float, nu: float) -> float:
    check_finite(velocity, "velocity")
    check_finite(hydraulic_diameter, "hydraulic_diameter")
    check_finite(nu, "nu")
    if hydraulic_diameter <= 0.0:
        raise InvalidInputError("Diameter must be > 0")
    if nu <= 0.0:
        raise InvalidInputError("Kinematic viscosity must be > 0")
    return velocity * hydraulic_diameter / nu


def friction_factor_swamee_jain(re: float, rel_roughness: float) -> float:
    check_finite(re, "re")
    check_finite(rel_roughness, "rel_roughness")
    if re <= 0.0:
        raise InvalidInputError("Re must be > 0")
    if rel_roughness < 0.0:
        raise InvalidInputError("Relative roughness must be >= 0")

    if re < _LAMINAR_RE_LIMIT:
        return 64.0 / re

    term = rel_roughness / 3.7 + 5.74 / re ** 0.9
    return 0.25 / math.log10(term) ** 2


def duct_friction_loss(
    cfm: float,
    length_ft: float,
    shape: DuctShape,
    diameter_in: Optional[float] = None,
    width_in: Optional[float] = None,
    height_in: Optional[float] = None,
    roughness_mm: float = DEFAULT_DUCT_ROUGHNESS_MM,
    temperature_c: float = DEFAULT_AIR_TEMPERATURE_C,
    pressure_pa: float = STANDARD_PRESSURE_PA,
) -> DuctFrictionResult:
    """Friction loss of a straight duct run."""
    check_finite(cfm, "cfm")
    check_finite(length_ft, "length_ft")
    check_finite(roughness_mm, "roughness_mm")
    if cfm < 0.0:
        raise InvalidInputError("CFM must be >= 0")
    if length_ft < 0.0:
        raise InvalidInputError("Length must be >= 0")

    Dh = hydraulic_diameter_m(shape, diameter_in, width_in, height_in)
    A = area_m2(shape, diameter_in, width_in, height_in)
    V = velocity_m_s(cfm, A)

    rho = air_density_kg_m3(temperature_c, pressure_pa)
    nu = air_kinematic_viscosity(temperature_c)
    re = reynolds_number(V, Dh, nu)
    if re == 0.0:
        # No flow, no friction loss
        return DuctFrictionResult(
            velocity_m_s=V, reynolds=0.0, friction_factor=0.0, delta_p_pa=0.0, delta_p_in_wg=0.0
        )

    f = friction_factor_swamee_jain(re, (roughness_mm / 1000.0) / Dh)
    dp = f * (ft_to_m(length_ft) / Dh) * (rho * V ** 2 / 2.0)

    return DuctFrictionResult(
        velocity_m_s=V,
        reynolds=re,
        friction_factor=f,
        delta_p_pa=dp,
        delta_p_in_wg=pa_to_in_wg(dp),
    )


def fitting_loss_from_k(
    cfm: float,
    k: float,
    shape: DuctShape,
    diameter_in: Optional[float] = None,
    width_in: Optional[float] = None,
    height_in: Optional[float] = None,
    temperature_c: float = DEFAULT_AIR_TEMPERATURE_C,
    pressure_pa: float = STANDARD_PRESSURE_PA,
) -> FittingLossResult:
    """Fitting loss ΔP = K × ρV²/2."""
    check_finite(k, "k")
    if k < 0.0:
        raise InvalidInputError("K must be >= 0")

    A = area_m2(shape, diameter_in, width_in, height_in)
    V = velocity_m_s(cfm, A)
    rho = air_density_kg_m3(temperature_c, pressure_pa)
    dp = k * (rho * V ** 2 / 2.0)
    return FittingLossResult(velocity_m_s=V, delta_p_pa=dp, delta_p_in_wg=pa_to_in_wg(dp))


def fitting_loss_from_c_and_vp(c_coefficient: float, velocity_pressure_in_wg: float) -> float:
    """Duct fitting loss (in. w.g.) = C × VP."""
    check_finite(c_coefficient, "c_coefficient")
    check_finite(velocity_pressure_in_wg, "velocity_pressure_in_wg")
    if c_coefficient < 0.0:
        raise InvalidInputError("c_coefficient must be >= 0")
    if velocity_pressure_in_wg < 0.0:
        raise InvalidInputError("velocity_pressure_in_wg must be >= 0")
    return c_coefficient * velocity_pressure_in_wg


def equivalent_length_from_k(
    k: float,
    shape: DuctShape,
    friction_factor: float,
    diameter_in: Optional[float] = None,
    width_in: Optional[float] = None,
    height_in: Optional[float] = None,
) -> float:
    """Equivalent straight length (ft) of a fitting: Le = K × Dh / f."""
    check_finite(k, "k")
    check_finite(friction_factor, "friction_factor")
    if k < 0.0:
        raise InvalidInputError("K must be >= 0")
    if friction_factor <= 0.0:
        raise InvalidInputError("Friction factor must be > 0")

    Dh = hydraulic_diameter_m(shape, diameter_in, width_in, height_in)
    return m_to_ft(k * Dh / friction_factor)


def k_from_equivalent_length(
    equivalent_length_ft: float,
    shape: DuctShape,
    friction_factor: float,
    diameter_in: Optional[float] = None,
    width_in: Optional[float] = None,
    height_in: Optional[float] = None,
) -> float:
    """Loss coefficient for an equivalent length: K = f × Le / Dh."""
    check_finite(equivalent_length_ft, "equivalent_length_ft")
    check_finite(friction_factor, "friction_factor")
    if equivalent_length_ft < 0.0:
        raise InvalidInputError("Equivalent length must be >= 0")
    if friction_factor <= 0.0:
        raise InvalidInputError("Friction factor must be > 0")

    Dh = hydraulic_diameter_m(shape, diameter_in, width_in, height_in)
    return friction_factor * ft_to_m(equivalent_length_ft) / Dh
