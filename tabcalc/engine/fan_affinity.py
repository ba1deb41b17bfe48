"""
Fan affinity laws for geometrically similar fans at constant air density.

    Q2  = Q1  × (N2/N1)   × (D2/D1)³
    P2  = P1  × (N2/N1)²  × (D2/D1)²
    HP2 = HP1 × (N2/N1)³  × (D2/D1)⁵

When either diameter is omitted the diameter ratio is 1 and the laws reduce
to the classic speed-only forms.
"""

from typing import Optional

from tabcalc.engine.errors import InvalidInputError, check_finite
from tabcalc.models.fan_affinity import FanAffinityInput, FanAffinityOutput


def _speed_ratio(n1: float, n2: float) -> float:
    check_finite(n1, "n1")
    check_finite(n2, "n2")
    if n1 <= 0.0 or n2 <= 0.0:
        raise InvalidInputError("Speeds must be > 0")
    return n2 / n1


def _diameter_ratio(d1: Optional[float], d2: Optional[float]) -> float:
    if d1 is None or d2 is None:
        return 1.0
    check_finite(d1, "d1")
    check_finite(d2, "d2")
    if d1 <= 0.0 or d2 <= 0.0:
        raise InvalidInputError("Diameters must be > 0")
    return d2 / d1


def fan_law_flow(
    q1: float,
    n1: float,
    n2: float,
    d1: Optional[float] = None,
    d2: Optional[float] = None,
) -> float:
    check_finite(q1, "q1")
    if q1 < 0.0:
        raise InvalidInputError("q1 must be >= 0")
    return q1 * _speed_ratio(n1, n2) * _diameter_ratio(d1, d2) ** 3


def fan_law_pressure(
    p1: float,
    n1: float,
    n2: float,
    d1: Optional[float] = None,
    d2: Optional[float] = None,
) -> float:
    check_finite(p1, "p1")
    return p1 * _speed_ratio(n1, n2) ** 2 * _diameter_ratio(d1, d2) ** 2


def fan_law_power(
    hp1: float,
    n1: float,
    n2: float,
    d1: Optional[float] = None,
    d2: Optional[float] = None,
) -> float:
    check_finite(hp1, "hp1")
    if hp1 < 0.0:
        raise InvalidInputError("hp1 must be >= 0")
    return hp1 * _speed_ratio(n1, n2) ** 3 * _diameter_ratio(d1, d2) ** 5


def calculate_fan_affinity(fan_input: FanAffinityInput) -> FanAffinityOutput:
    """
    Scale whichever parts of the operating point were supplied.
    """
    fi = fan_input
    if fi.flow1 is None and fi.pressure1 is None and fi.power1 is None:
        raise InvalidInputError("At least one of flow1, pressure1, power1 is required")

    args = (fi.speed1, fi.speed2, fi.diameter1, fi.diameter2)
    return FanAffinityOutput(
        speed_ratio=_speed_ratio(fi.speed1, fi.speed2),
        diameter_ratio=_diameter_ratio(fi.diameter1, fi.diameter2),
        flow2=fan_law_flow(fi.flow1, *args) if fi.flow1 is not None else None,
        pressure2=fan_law_pressure(fi.pressure1, *args) if fi.pressure1 is not None else None,
        power2=fan_law_power(fi.power1, *args) if fi.power1 is not None else None,
    )
