"""
Tests for filter pressure drop relations.
"""

import math

import pytest

from tabcalc.engine.errors import InvalidInputError
from tabcalc.engine.filter import (
    apply_loading_multiplier,
    calculate_filter_pressure_drop,
    filter_delta_p_at_flow,
)
from tabcalc.models.filter import FilterPressureDropInput


class TestSquareLaw:

    def test_doubling_flow_quadruples_pressure_drop(self):
        assert filter_delta_p_at_flow(0.5, 1000, 2000) == pytest.approx(2.0, abs=1e-8)

    def test_reduced_flow(self):
        assert filter_delta_p_at_flow(0.8, 2000, 1500) == pytest.approx(0.45)

    def test_zero_flow(self):
        assert filter_delta_p_at_flow(0.5, 1000, 0) == 0.0

    def test_zero_reference_flow(self):
        with pytest.raises(InvalidInputError, match="flow1 must be > 0"):
            filter_delta_p_at_flow(0.5, 0, 2000)

    def test_negative_pressure_drop(self):
        with pytest.raises(InvalidInputError, match="delta_p1 must be >= 0"):
            filter_delta_p_at_flow(-0.5, 1000, 2000)

    def test_negative_flow(self):
        with pytest.raises(InvalidInputError, match="flow2 must be >= 0"):
            filter_delta_p_at_flow(0.5, 1000, -1)

    def test_non_finite(self):
        with pytest.raises(InvalidInputError, match="finite"):
            filter_delta_p_at_flow(math.nan, 1000, 2000)


class TestLoadingMultiplier:

    def test_multiplier(self):
        assert apply_loading_multiplier(0.6, 1.5) == pytest.approx(0.9, abs=1e-10)

    def test_clean_multiplier(self):
        assert apply_loading_multiplier(0.6, 1.0) == 0.6

    def test_multiplier_below_one(self):
        with pytest.raises(InvalidInputError, match="loading_multiplier must be >= 1"):
            apply_loading_multiplier(0.6, 0.9)

    def test_negative_clean_pressure_drop(self):
        with pytest.raises(InvalidInputError, match="delta_p_clean must be >= 0"):
            apply_loading_multiplier(-0.1, 1.5)


class TestCalculateFilterPressureDrop:

    def test_clean_only(self):
        result = calculate_filter_pressure_drop(FilterPressureDropInput(
            delta_p1=0.5, flow1=1000, flow2=2000,
        ))
        assert result.delta_p_clean == pytest.approx(2.0)
        assert result.delta_p_loaded is None

    def test_loaded(self):
        result = calculate_filter_pressure_drop(FilterPressureDropInput(
            delta_p1=0.5, flow1=1000, flow2=2000, loading_multiplier=2.0,
        ))
        assert result.delta_p_loaded == pytest.approx(4.0)
