"""
Two-stream air mixing for field TAB use.

The mixed state is a flow-weighted average of the entering streams:

    W_mix = (CFM_1·W_1 + CFM_2·W_2) / (CFM_1 + CFM_2)
    h_mix = (CFM_1·h_1 + CFM_2·h_2) / (CFM_1 + CFM_2)

Volumetric flow stands in for dry-air mass flow. This is the usual field
approximation; reference values downstream are calibrated to it, so it is
not converted to a density-corrected mass balance.
"""

import logging

from tabcalc.config import STANDARD_PRESSURE_PA, HUMIDITY_RATIO_FACTOR
from tabcalc.engine.conversions import f_to_c
from tabcalc.engine.errors import InvalidInputError, check_finite
from tabcalc.engine.psychrometrics import (
    dry_bulb_from_enthalpy,
    enthalpy,
    humidity_ratio_from_rh,
    saturation_vapor_pressure,
)
from tabcalc.models.psychrometrics import Airstream, MixedAirResult

logger = logging.getLogger(__name__)


def mixed_air_from_streams(
    stream1: Airstream,
    stream2: Airstream,
    p_baro: float = STANDARD_PRESSURE_PA,
) -> MixedAirResult:
    """
    Mix two airstreams and return the resultant dry-bulb, RH, W and h.

    Raises:
        InvalidInputError: a non-finite input, negative CFM, zero total CFM,
            or an invalid stream state (e.g. RH out of range)
    """
    c1, t1, rh1 = stream1.cfm, stream1.t_dry_bulb_f, stream1.rh_percent
    c2, t2, rh2 = stream2.cfm, stream2.t_dry_bulb_f, stream2.rh_percent

    for name, value in (
        ("stream1.cfm", c1), ("stream1.t_dry_bulb_f", t1), ("stream1.rh_percent", rh1),
        ("stream2.cfm", c2), ("stream2.t_dry_bulb_f", t2), ("stream2.rh_percent", rh2),
    ):
        check_finite(value, name)
    if c1 < 0.0 or c2 < 0.0:
        raise InvalidInputError("CFM must be >= 0")
    total = c1 + c2
    if total <= 0.0:
        raise InvalidInputError("Total CFM must be > 0")

    # --- Entering states ---
    W_1 = humidity_ratio_from_rh(f_to_c(t1), rh1, p_baro)
    W_2 = humidity_ratio_from_rh(f_to_c(t2), rh2, p_baro)
    h_1 = enthalpy(t1, W_1)
    h_2 = enthalpy(t2, W_2)

    # --- Flow-weighted averages ---
    W_mix = (c1 * W_1 + c2 * W_2) / total
    h_mix = (c1 * h_1 + c2 * h_2) / total

    # --- Back-calculate Tdb from h and W (algebraic, not iterative) ---
    Tdb_mix = dry_bulb_from_enthalpy(h_mix, W_mix)

    # --- RH from Tdb and W ---
    Pv = (W_mix * p_baro) / (HUMIDITY_RATIO_FACTOR + W_mix)
    Pws = saturation_vapor_pressure(f_to_c(Tdb_mix))
    RH_mix = max(0.0, min(100.0, (Pv / Pws) * 100.0))

    logger.debug(
        "Mixed %s CFM @ %s°F with %s CFM @ %s°F -> %.3f°F, %.2f%% RH",
        c1, t1, c2, t2, Tdb_mix, RH_mix,
    )

    return MixedAirResult(
        t_dry_bulb_f=Tdb_mix,
        rh_percent=RH_mix,
        humidity_ratio=W_mix,
        enthalpy_btu_lb=h_mix,
    )
