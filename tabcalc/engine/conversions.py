"""
Scalar unit conversions used across the TAB calculators.

Exact affine/linear transforms with no range checks.
"""

from tabcalc.config import KELVIN_OFFSET, PA_PER_IN_WG

_M2_PER_FT2 = 0.09290304
_M3_PER_FT3 = 0.028316846592
_M3S_PER_CFM = 0.00047194745
_M_PER_INCH = 0.0254
_M_PER_FT = 0.3048


def f_to_c(f: float) -> float:
    return (f - 32.0) * (5.0 / 9.0)


def c_to_f(c: float) -> float:
    return c * (9.0 / 5.0) + 32.0


def c_to_k(c: float) -> float:
    return c + KELVIN_OFFSET


def ft2_to_m2(ft2: float) -> float:
    return ft2 * _M2_PER_FT2


def m2_to_ft2(m2: float) -> float:
    return m2 / _M2_PER_FT2


def ft3_to_m3(ft3: float) -> float:
    return ft3 * _M3_PER_FT3


def m3_to_ft3(m3: float) -> float:
    return m3 / _M3_PER_FT3


def pa_to_in_wg(pa: float) -> float:
    """Pa → inches of water gauge (1 in.w.g. ≈ 249.0889 Pa at 4°C)."""
    return pa / PA_PER_IN_WG


def in_wg_to_pa(in_wg: float) -> float:
    return in_wg * PA_PER_IN_WG


def cfm_to_m3s(cfm: float) -> float:
    return cfm * _M3S_PER_CFM


def inch_to_m(inches: float) -> float:
    return inches * _M_PER_INCH


def ft_to_m(ft: float) -> float:
    return ft * _M_PER_FT


def m_to_ft(m: float) -> float:
    return m / _M_PER_FT
