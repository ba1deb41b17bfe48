"""
Moist-air property engine.

Saturation vapor pressure follows the ASHRAE Fundamentals (Hyland–Wexler)
correlation over liquid water:

    ln(Pws) = C1/T + C2 + C3·T + C4·T² + C5·T³ + C6·ln(T)      T in K, Pws in Pa

Derived relationships:
    Pv = RH/100 × Pws(Tdb)
    W  = 0.621945 × Pv / (P - Pv)
    h  = 0.240·Tdb + W·(1061 + 0.444·Tdb)                    IP, BTU/lb_da

Dew point is the temperature where Pws(T) == Pv, found by bisection.
"""

import logging
import math

import psychrolib

from tabcalc.config import (
    TempUnit,
    STANDARD_PRESSURE_PA,
    HUMIDITY_RATIO_FACTOR,
    GRAINS_PER_LB,
    KELVIN_OFFSET,
)
from tabcalc.engine.conversions import f_to_c, c_to_f, c_to_k, m3_to_ft3
from tabcalc.engine.errors import ConvergenceError, InvalidInputError, check_finite
from tabcalc.models.psychrometrics import DewPointResult, MoistAirState

logger = logging.getLogger(__name__)

# Hyland–Wexler coefficients (saturation over liquid water)
_C1 = -5.8002206e3
_C2 = 1.3914993
_C3 = -4.8640239e-2
_C4 = 4.1764768e-5
_C5 = -1.4452093e-8
_C6 = 6.5459673

# Enthalpy (IP): h = 0.240·T + W·(1061 + 0.444·T)
_CP_DRY_AIR_IP = 0.240
_HFG_IP = 1061.0
_CP_VAPOR_IP = 0.444

# Dew point solver
_DEW_POINT_BRACKET_C = (-80.0, 90.0)
_BRACKET_STEP_C = 40.0
_MAX_BRACKET_EXPANSIONS = 30
_MAX_BISECTION_ITERATIONS = 80
_DEW_POINT_TOLERANCE_PA = 0.01

_KG_PER_LB = 0.45359237


def _set_unit_system() -> None:
    """psychrolib keeps a global unit system; all calls here are SI."""
    psychrolib.SetUnitSystem(psychrolib.SI)


def _coerce_unit(unit) -> TempUnit:
    try:
        return TempUnit(unit)
    except ValueError:
        raise InvalidInputError(f"Unknown temperature unit: {unit!r} (expected 'F' or 'C')")


# --- Core vapor pressure relationships ---

def saturation_vapor_pressure(t_c: float) -> float:
    """
    Saturation vapor pressure over liquid water (Pa) at t_c (°C).

    The correlation is meaningful roughly in [-80, 90] °C but is evaluated
    for any finite temperature above absolute zero.
    """
    check_finite(t_c, "t_c")
    T = c_to_k(t_c)
    if T <= 0.0:
        raise InvalidInputError("t_c must be above absolute zero (-273.15 °C)")

    ln_Pws = _C1 / T + _C2 + _C3 * T + _C4 * T ** 2 + _C5 * T ** 3 + _C6 * math.log(T)
    return math.exp(ln_Pws)


def vapor_pressure_from_rh(t_c: float, rh_percent: float) -> float:
    """Partial vapor pressure (Pa) from dry-bulb (°C) and relative humidity (%)."""
    check_finite(rh_percent, "rh_percent")
    if rh_percent < 0.0 or rh_percent > 100.0:
        raise InvalidInputError("Relative humidity must be between 0 and 100")
    Pws = saturation_vapor_pressure(t_c)
    return (rh_percent / 100.0) * Pws


def humidity_ratio_from_vapor_pressure(
    p_vapor: float, p_baro: float = STANDARD_PRESSURE_PA
) -> float:
    """Humidity ratio W (lb/lb or kg/kg) from vapor and barometric pressure (Pa)."""
    check_finite(p_vapor, "p_vapor")
    check_finite(p_baro, "p_baro")
    if p_baro <= 0.0:
        raise InvalidInputError("Barometric pressure must be > 0")
    if p_vapor < 0.0:
        raise InvalidInputError("Vapor pressure must be >= 0")
    if p_vapor >= p_baro:
        raise InvalidInputError("Vapor pressure must be less than barometric pressure")

    return HUMIDITY_RATIO_FACTOR * (p_vapor / (p_baro - p_vapor))


def humidity_ratio_from_rh(
    t_c: float, rh_percent: float, p_baro: float = STANDARD_PRESSURE_PA
) -> float:
    Pv = vapor_pressure_from_rh(t_c, rh_percent)
    return humidity_ratio_from_vapor_pressure(Pv, p_baro)


# --- Enthalpy (IP) ---

def enthalpy(t_dry_bulb_f: float, humidity_ratio: float) -> float:
    """Moist-air enthalpy (BTU/lb_da) from dry-bulb (°F) and W (lb/lb)."""
    check_finite(t_dry_bulb_f, "t_dry_bulb_f")
    check_finite(humidity_ratio, "humidity_ratio")
    if humidity_ratio < 0.0:
        raise InvalidInputError("Humidity ratio must be >= 0")

    return _CP_DRY_AIR_IP * t_dry_bulb_f + humidity_ratio * (_HFG_IP + _CP_VAPOR_IP * t_dry_bulb_f)


def dry_bulb_from_enthalpy(h: float, humidity_ratio: float) -> float:
    """
    Dry-bulb (°F) from enthalpy (BTU/lb_da) and W; the algebraic inverse of
    enthalpy():  h = (0.240 + 0.444·W)·T + 1061·W
    """
    check_finite(h, "h")
    check_finite(humidity_ratio, "humidity_ratio")
    if humidity_ratio < 0.0:
        raise InvalidInputError("Humidity ratio must be >= 0")

    denom = _CP_DRY_AIR_IP + _CP_VAPOR_IP * humidity_ratio
    if denom == 0.0:
        raise InvalidInputError("Invalid humidity ratio")
    return (h - _HFG_IP * humidity_ratio) / denom


# --- Dew point ---

def dew_point_from_vapor_pressure(p_vapor: float) -> float:
    """
    Dew point (°C) for a partial vapor pressure (Pa).

    Inverts saturation_vapor_pressure() by bisection. The initial bracket
    [-80, 90] °C is shifted in 40 °C steps (at most 30 times) until it
    encloses the root. Bisection stops early once |Pws(mid) - Pv| < 0.01 Pa;
    otherwise the midpoint after 80 halvings is returned.

    Raises:
        InvalidInputError: p_vapor is non-finite or not positive
        ConvergenceError: the root could not be bracketed
    """
    check_finite(p_vapor, "p_vapor")
    if p_vapor <= 0.0:
        raise InvalidInputError("Vapor pressure must be > 0")

    def objective(t_c: float) -> float:
        return saturation_vapor_pressure(t_c) - p_vapor

    lo, hi = _DEW_POINT_BRACKET_C

    for _ in range(_MAX_BRACKET_EXPANSIONS):
        if saturation_vapor_pressure(lo) > p_vapor:
            if lo - _BRACKET_STEP_C <= -KELVIN_OFFSET:
                raise ConvergenceError("Failed to bracket dew point")
            hi = lo
            lo -= _BRACKET_STEP_C
        elif saturation_vapor_pressure(hi) < p_vapor:
            lo = hi
            hi += _BRACKET_STEP_C
        else:
            break
        logger.debug("Dew point bracket shifted to [%s, %s] °C", lo, hi)

    if objective(lo) > 0.0 or objective(hi) < 0.0:
        raise ConvergenceError("Failed to bracket dew point")

    for _ in range(_MAX_BISECTION_ITERATIONS):
        mid = (lo + hi) / 2.0
        f_mid = objective(mid)
        if abs(f_mid) < _DEW_POINT_TOLERANCE_PA:
            return mid
        if f_mid > 0.0:
            hi = mid
        else:
            lo = mid

    logger.warning(
        "Dew point bisection exhausted %d iterations for Pv=%s Pa; returning best estimate",
        _MAX_BISECTION_ITERATIONS, p_vapor,
    )
    return (lo + hi) / 2.0


def dew_point_from_dry_bulb_rh(
    t_dry_bulb: float, rh_percent: float, unit: TempUnit = TempUnit.F
) -> DewPointResult:
    """Dew point from dry-bulb and RH, returned in the same unit as the input."""
    unit = _coerce_unit(unit)
    check_finite(t_dry_bulb, "t_dry_bulb")
    t_c = f_to_c(t_dry_bulb) if unit == TempUnit.F else t_dry_bulb
    Pv = vapor_pressure_from_rh(t_c, rh_percent)
    Tdp_c = dew_point_from_vapor_pressure(Pv)
    return DewPointResult(
        dew_point=c_to_f(Tdp_c) if unit == TempUnit.F else Tdp_c,
        unit=unit,
    )


# --- Full state ---

def resolve_moist_air_state(
    t_dry_bulb: float,
    rh_percent: float,
    unit: TempUnit = TempUnit.F,
    p_baro: float = STANDARD_PRESSURE_PA,
) -> MoistAirState:
    """
    Resolve every derived property for a dry-bulb / RH pair.

    Vapor pressure, humidity ratio, enthalpy and dew point come from this
    module; wet bulb and specific volume come from psychrolib (SI). Dew point
    is None at 0% RH.
    """
    unit = _coerce_unit(unit)
    check_finite(t_dry_bulb, "t_dry_bulb")
    if unit == TempUnit.F:
        Tdb_f, Tdb_c = t_dry_bulb, f_to_c(t_dry_bulb)
    else:
        Tdb_f, Tdb_c = c_to_f(t_dry_bulb), t_dry_bulb

    Pws = saturation_vapor_pressure(Tdb_c)
    Pv = vapor_pressure_from_rh(Tdb_c, rh_percent)
    W = humidity_ratio_from_vapor_pressure(Pv, p_baro)
    h = enthalpy(Tdb_f, W)
    # Bone-dry air has no dew point
    Tdp_c = dew_point_from_vapor_pressure(Pv) if Pv > 0.0 else None

    _set_unit_system()
    Twb_c = psychrolib.GetTWetBulbFromHumRatio(Tdb_c, W, p_baro)
    v_si = psychrolib.GetMoistAirVolume(Tdb_c, W, p_baro)  # m³/kg_da
    v_ip = m3_to_ft3(v_si) * _KG_PER_LB                    # ft³/lb_da

    if unit == TempUnit.F:
        Tdp = c_to_f(Tdp_c) if Tdp_c is not None else None
        Twb = c_to_f(Twb_c)
    else:
        Tdp, Twb = Tdp_c, Twb_c

    return MoistAirState(
        unit=unit,
        pressure=p_baro,
        t_dry_bulb_f=round(Tdb_f, 4),
        t_dry_bulb_c=round(Tdb_c, 4),
        rh_percent=round(rh_percent, 4),
        vapor_pressure=round(Pv, 4),
        saturation_pressure=round(Pws, 4),
        humidity_ratio=round(W, 7),
        humidity_ratio_grains=round(W * GRAINS_PER_LB, 4),
        enthalpy=round(h, 4),
        dew_point=round(Tdp, 4) if Tdp is not None else None,
        wet_bulb=round(Twb, 4),
        specific_volume=round(v_ip, 4),
    )
