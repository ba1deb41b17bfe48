"""
Filter pressure drop relationships.

Most filter media follow an approximately square-law relationship between
airflow and pressure drop:

    ΔP2 = ΔP1 × (Q2 / Q1)²

Loading over time depends heavily on media and dust; it is modelled here as a
simple multiplier on the clean pressure drop.
"""

from tabcalc.engine.errors import InvalidInputError, check_finite
from tabcalc.models.filter import FilterPressureDropInput, FilterPressureDropOutput


def filter_delta_p_at_flow(delta_p1: float, flow1: float, flow2: float) -> float:
    check_finite(delta_p1, "delta_p1")
    check_finite(flow1, "flow1")
    check_finite(flow2, "flow2")
    if delta_p1 < 0.0:
        raise InvalidInputError("delta_p1 must be >= 0")
    if flow1 <= 0.0:
        raise InvalidInputError("flow1 must be > 0")
    if flow2 < 0.0:
        raise InvalidInputError("flow2 must be >= 0")

    return delta_p1 * (flow2 / flow1) ** 2


def apply_loading_multiplier(delta_p_clean: float, loading_multiplier: float) -> float:
    check_finite(delta_p_clean, "delta_p_clean")
    check_finite(loading_multiplier, "loading_multiplier")
    if delta_p_clean < 0.0:
        raise InvalidInputError("delta_p_clean must be >= 0")
    if loading_multiplier < 1.0:
        raise InvalidInputError("loading_multiplier must be >= 1")
    return delta_p_clean * loading_multiplier


def calculate_filter_pressure_drop(fi: FilterPressureDropInput) -> FilterPressureDropOutput:
    clean = filter_delta_p_at_flow(fi.delta_p1, fi.flow1, fi.flow2)
    loaded = None
    if fi.loading_multiplier is not None:
        loaded = apply_loading_multiplier(clean, fi.loading_multiplier)
    return FilterPressureDropOutput(delta_p_clean=clean, delta_p_loaded=loaded)
