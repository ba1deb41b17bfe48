"""
Tests for the Pitot / velocity pressure relations and air changes.

The scalar relations return NaN for invalid input; the calculate_* entry
points raise InvalidInputError instead.
"""

import math

import pytest

from tabcalc.config import STANDARD_AIR_DENSITY_LB_FT3
from tabcalc.engine.airflow import (
    ach_from_cfm,
    calculate_air_changes,
    calculate_pitot,
    cfm_from_ach,
    density_from_velocity_and_pressure,
    velocity_from_velocity_pressure,
    velocity_pressure_from_velocity,
)
from tabcalc.engine.errors import InvalidInputError
from tabcalc.models.airflow import (
    AirChangesInput,
    AirChangesMode,
    PitotCalcInput,
    PitotMode,
)


# ---------------------------------------------------------------------------
# Pitot relations
# ---------------------------------------------------------------------------

class TestStandardDensity:

    def test_velocity_from_pressure(self):
        """V = 4005 × √0.01 = 400.5 FPM."""
        V = velocity_from_velocity_pressure(0.01, STANDARD_AIR_DENSITY_LB_FT3)
        assert V == pytest.approx(400.5, abs=1e-6)

    def test_default_density_is_standard(self):
        assert velocity_from_velocity_pressure(0.01) == pytest.approx(4005 * math.sqrt(0.01))

    def test_round_trip(self):
        V = velocity_from_velocity_pressure(0.01)
        assert velocity_pressure_from_velocity(V) == pytest.approx(0.01, rel=1e-9)

    def test_zero_pressure_zero_velocity(self):
        assert velocity_from_velocity_pressure(0.0) == 0.0
        assert velocity_pressure_from_velocity(0.0) == 0.0


class TestNonStandardDensity:

    def test_velocity_scales_with_density(self):
        """4005 × √(0.01 × 0.075 / 0.06) = 4005 × √0.0125."""
        V = velocity_from_velocity_pressure(0.01, 0.06)
        assert V == pytest.approx(447.7726, abs=1e-4)

    def test_density_recovered(self):
        V = velocity_from_velocity_pressure(0.01, 0.06)
        assert density_from_velocity_and_pressure(V, 0.01) == pytest.approx(0.06, abs=1e-6)

    @pytest.mark.parametrize("Pv,rho", [
        (0.0, 0.075),
        (0.05, 0.075),
        (0.25, 0.068),
        (1.5, 0.080),
        (3.0, 0.0601),
    ])
    def test_round_trip(self, Pv, rho):
        V = velocity_from_velocity_pressure(Pv, rho)
        assert velocity_pressure_from_velocity(V, rho) == pytest.approx(Pv, rel=1e-9, abs=1e-15)


class TestInvalidPitotInputs:

    def test_negative_velocity_pressure(self):
        assert math.isnan(velocity_from_velocity_pressure(-0.01, 0.075))

    def test_zero_density(self):
        assert math.isnan(velocity_from_velocity_pressure(0.01, 0))

    def test_negative_velocity(self):
        assert math.isnan(velocity_pressure_from_velocity(-10, 0.075))

    def test_zero_velocity_density(self):
        assert math.isnan(density_from_velocity_and_pressure(0, 0.01))

    def test_negative_density(self):
        assert math.isnan(velocity_pressure_from_velocity(1000.0, -0.075))

    def test_negative_pressure_for_density(self):
        assert math.isnan(density_from_velocity_and_pressure(1000.0, -0.01))

    def test_underflowing_velocity_ratio(self):
        """(V/4005)² underflows to zero for tiny V."""
        assert math.isnan(density_from_velocity_and_pressure(1e-300, 0.01))

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_returns_nan(self, bad):
        assert math.isnan(velocity_from_velocity_pressure(bad))
        assert math.isnan(velocity_from_velocity_pressure(0.01, bad))
        assert math.isnan(velocity_pressure_from_velocity(bad))
        assert math.isnan(density_from_velocity_and_pressure(bad, 0.01))
        assert math.isnan(density_from_velocity_and_pressure(1000.0, bad))


# ---------------------------------------------------------------------------
# Pitot calculator entry point
# ---------------------------------------------------------------------------

class TestCalculatePitot:

    def test_solve_velocity(self):
        result = calculate_pitot(PitotCalcInput(
            calc_mode=PitotMode.SOLVE_VELOCITY,
            velocity_pressure=0.01,
        ))
        assert result.velocity == pytest.approx(400.5)
        assert result.density == STANDARD_AIR_DENSITY_LB_FT3
        assert "4005" in result.formula

    def test_solve_velocity_pressure(self):
        result = calculate_pitot(PitotCalcInput(
            calc_mode=PitotMode.SOLVE_VELOCITY_PRESSURE,
            velocity=801.0,
        ))
        assert result.velocity_pressure == pytest.approx(0.04)
        assert result.formula.startswith("Pv")

    def test_solve_density(self):
        result = calculate_pitot(PitotCalcInput(
            calc_mode=PitotMode.SOLVE_DENSITY,
            velocity=400.5,
            velocity_pressure=0.01,
        ))
        assert result.density == pytest.approx(0.075)
        assert result.formula.startswith("ρ")

    def test_missing_input(self):
        with pytest.raises(InvalidInputError, match="velocity_pressure is required"):
            calculate_pitot(PitotCalcInput(calc_mode=PitotMode.SOLVE_VELOCITY))

    def test_nan_result_raises(self):
        with pytest.raises(InvalidInputError, match="Unable to compute"):
            calculate_pitot(PitotCalcInput(
                calc_mode=PitotMode.SOLVE_VELOCITY,
                velocity_pressure=-0.02,
            ))


# ---------------------------------------------------------------------------
# Air changes
# ---------------------------------------------------------------------------

class TestAirChanges:

    def test_cfm_from_ach(self):
        assert cfm_from_ach(6000.0, 10.0) == pytest.approx(1000.0, abs=1e-12)

    def test_round_trip(self):
        cfm = cfm_from_ach(6000.0, 10.0)
        assert ach_from_cfm(6000.0, cfm) == pytest.approx(10.0, abs=1e-12)

    @pytest.mark.parametrize("volume,value", [
        (0.0, 10.0),
        (-100.0, 10.0),
        (6000.0, -1.0),
        (math.nan, 10.0),
        (6000.0, math.inf),
    ])
    def test_invalid_returns_nan(self, volume, value):
        assert math.isnan(cfm_from_ach(volume, value))
        assert math.isnan(ach_from_cfm(volume, value))

    def test_calculate_solve_ach(self):
        result = calculate_air_changes(AirChangesInput(
            calc_mode=AirChangesMode.SOLVE_ACH,
            volume_ft3=12000.0,
            cfm=1000.0,
        ))
        assert result.ach == pytest.approx(5.0)

    def test_calculate_invalid_volume(self):
        with pytest.raises(InvalidInputError, match="Unable to compute"):
            calculate_air_changes(AirChangesInput(
                calc_mode=AirChangesMode.SOLVE_CFM,
                volume_ft3=0.0,
                ach=6.0,
            ))
