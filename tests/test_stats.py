"""
Tests for field reading statistics and power-law regression.
"""

import math

import pytest

from tabcalc.engine.stats import calc_average, power_law_regression
from tabcalc.models.stats import PressureFlowPoint


class TestAverage:

    def test_empty_returns_none(self):
        assert calc_average([]) is None

    def test_average(self):
        assert calc_average([80, 100, 120]) == 100

    def test_single_value(self):
        assert calc_average([42.5]) == 42.5

    def test_tuple_input(self):
        assert calc_average((1.0, 2.0)) == 1.5


def _points(C: float, n: float, pressures: list[float]) -> list[PressureFlowPoint]:
    return [PressureFlowPoint(pressure=p, flow=C * p ** n) for p in pressures]


class TestPowerLawRegression:

    def setup_method(self):
        self.points = _points(100.0, 0.65, [10, 20, 30, 40, 50])
        self.fit = power_law_regression(self.points)

    def test_fit_returned(self):
        assert self.fit is not None
        assert self.fit.count == len(self.points)

    def test_recovers_coefficient(self):
        assert self.fit.C == pytest.approx(100.0, rel=1e-9)

    def test_recovers_exponent(self):
        assert self.fit.n == pytest.approx(0.65, rel=1e-9)

    def test_perfect_fit_r2(self):
        assert self.fit.r2 == pytest.approx(1.0, abs=1e-12)

    def test_noisy_data_r2_below_one(self):
        points = [
            PressureFlowPoint(pressure=p, flow=f)
            for p, f in [(10, 440), (20, 720), (30, 900), (40, 1120), (50, 1250)]
        ]
        fit = power_law_regression(points)
        assert 0.9 < fit.r2 < 1.0
        assert 0.5 < fit.n < 0.8

    def test_unusable_points_dropped(self):
        points = self.points + [
            PressureFlowPoint(pressure=-10, flow=100),
            PressureFlowPoint(pressure=20, flow=0),
            PressureFlowPoint(pressure=math.nan, flow=100),
        ]
        fit = power_law_regression(points)
        assert fit.count == len(self.points)
        assert fit.n == pytest.approx(0.65, rel=1e-9)

    def test_constant_flow_zero_exponent(self):
        points = [PressureFlowPoint(pressure=p, flow=500) for p in (10, 20, 40)]
        fit = power_law_regression(points)
        assert fit.n == pytest.approx(0.0, abs=1e-12)


class TestPowerLawRegressionNone:

    def test_single_point(self):
        assert power_law_regression([PressureFlowPoint(pressure=10, flow=100)]) is None

    def test_no_usable_points(self):
        points = [PressureFlowPoint(pressure=-10, flow=100), PressureFlowPoint(pressure=20, flow=-5)]
        assert power_law_regression(points) is None

    def test_identical_pressures(self):
        points = [PressureFlowPoint(pressure=25, flow=f) for f in (100, 110, 120)]
        assert power_law_regression(points) is None

    def test_empty(self):
        assert power_law_regression([]) is None
