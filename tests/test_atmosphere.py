"""Tests for the International Standard Atmosphere model."""

import math

import numpy as np
import pytest

from isa_calc.atmosphere import (
    LAYERS,
    StandardAtmosphere,
    calculate_atmosphere,
    calculate_dynamic_viscosity,
    calculate_pressure,
    calculate_speed_of_sound,
    calculate_temperature,
    clamp_altitude,
)
from isa_calc.utils.constants import SPECIFIC_GAS_CONSTANT, SUTHERLAND_MU0


INTERNAL_BOUNDARIES = [11000.0, 20000.0, 32000.0, 47000.0, 51000.0, 71000.0]


class TestReferenceValues:
    """Tests against ICAO standard atmosphere table values."""

    def test_sea_level(self):
        """Test sea level state."""
        r = calculate_atmosphere(0.0)
        assert r.temperature == pytest.approx(288.15, abs=1e-9)
        assert r.temperature_celsius == pytest.approx(15.0, abs=1e-9)
        assert r.pressure == pytest.approx(101325.0, abs=1e-9)
        assert r.density == pytest.approx(1.225, rel=1e-4)
        assert r.speed_of_sound == pytest.approx(340.3, abs=0.1)
        assert r.layer_name == "Troposphere"

    def test_sea_level_viscosity(self):
        """Test Sutherland's law returns the reference viscosity at 288.15 K."""
        r = calculate_atmosphere(0.0)
        assert r.dynamic_viscosity == pytest.approx(SUTHERLAND_MU0, rel=1e-12)
        assert r.kinematic_viscosity == pytest.approx(1.4607e-5, rel=1e-3)

    def test_tropopause(self):
        """Test temperature and pressure at 11 km."""
        r = calculate_atmosphere(11000.0)
        assert r.temperature == pytest.approx(216.65, abs=1e-9)
        assert r.pressure == pytest.approx(22632.0, rel=1e-4)
        assert r.layer_name == "Tropopause"

    def test_upper_limit(self):
        """Test temperature at 86 km."""
        r = calculate_atmosphere(86000.0)
        assert r.temperature == pytest.approx(186.87, abs=1e-6)
        assert r.layer_name == "Mesopause"

    def test_upper_limit_density(self):
        """Test 86 km uses the continuous base pressure with 186.87 K."""
        r = calculate_atmosphere(86000.0)
        assert r.pressure == pytest.approx(LAYERS[-2].pressure_at(86000.0), rel=1e-12)
        assert r.pressure == pytest.approx(0.3023, rel=1e-2)
        assert r.density == pytest.approx(r.pressure / (SPECIFIC_GAS_CONSTANT * 186.87), rel=1e-12)
        assert r.density == pytest.approx(5.64e-6, rel=1e-2)

    def test_isothermal_tropopause(self):
        """Test temperature is constant between 11 and 20 km."""
        assert calculate_temperature(15000.0) == pytest.approx(216.65)
        assert calculate_temperature(19999.0) == pytest.approx(216.65)


class TestPhysicalConsistency:
    """Tests for relations that hold by construction."""

    @pytest.mark.parametrize("altitude", np.linspace(0.0, 86000.0, 87))
    def test_ideal_gas_law(self, altitude):
        """Test density equals P / (R T) at every altitude."""
        r = calculate_atmosphere(altitude)
        expected = r.pressure / (SPECIFIC_GAS_CONSTANT * r.temperature)
        assert r.density == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("altitude", np.linspace(0.0, 86000.0, 44))
    def test_kinematic_viscosity(self, altitude):
        """Test kinematic viscosity equals dynamic viscosity over density."""
        r = calculate_atmosphere(altitude)
        assert r.kinematic_viscosity == pytest.approx(
            r.dynamic_viscosity / r.density, rel=1e-12
        )

    @pytest.mark.parametrize("boundary", INTERNAL_BOUNDARIES)
    def test_temperature_continuity(self, boundary):
        """Test temperature is continuous across internal layer boundaries."""
        below = calculate_temperature(boundary - 1e-6)
        above = calculate_temperature(boundary)
        assert below == pytest.approx(above, abs=1e-6)

    @pytest.mark.parametrize("boundary", INTERNAL_BOUNDARIES)
    def test_pressure_continuity(self, boundary):
        """Test pressure is continuous across internal layer boundaries."""
        below = calculate_pressure(boundary - 1e-6)
        above = calculate_pressure(boundary)
        assert below == pytest.approx(above, rel=1e-6)

    def test_pressure_decreases_with_altitude(self):
        """Test pressure decreases monotonically."""
        pressures = [calculate_atmosphere(h).pressure for h in range(0, 86001, 500)]
        assert all(p1 > p2 for p1, p2 in zip(pressures, pressures[1:]))

    def test_lowest_temperature_positive(self):
        """Test speed of sound is finite across the whole range."""
        for h in range(0, 86001, 1000):
            assert math.isfinite(calculate_atmosphere(h).speed_of_sound)


class TestClamping:
    """Tests for out-of-range altitude handling."""

    def test_below_sea_level(self):
        """Test negative altitudes saturate to sea level."""
        assert calculate_atmosphere(-500.0) == calculate_atmosphere(0.0)
        assert calculate_atmosphere(-500.0).altitude == 0.0

    def test_above_upper_limit(self):
        """Test altitudes above 86 km saturate to 86 km."""
        assert calculate_atmosphere(200000.0) == calculate_atmosphere(86000.0)
        assert calculate_atmosphere(200000.0).altitude == 86000.0

    def test_clamp_altitude(self):
        """Test the clamp helper."""
        assert clamp_altitude(-1.0) == 0.0
        assert clamp_altitude(5000.0) == 5000.0
        assert clamp_altitude(1e9) == 86000.0

    def test_in_range_unchanged(self):
        """Test in-range altitudes are reported unchanged."""
        assert calculate_atmosphere(12345.6).altitude == 12345.6


class TestHelpers:
    """Tests for the individual property functions."""

    def test_speed_of_sound_non_positive_temperature(self):
        """Test speed of sound is NaN for non-physical temperatures."""
        assert math.isnan(calculate_speed_of_sound(0.0))
        assert math.isnan(calculate_speed_of_sound(-10.0))

    def test_viscosity_increases_with_temperature(self):
        """Test Sutherland viscosity grows with temperature."""
        assert calculate_dynamic_viscosity(300.0) > calculate_dynamic_viscosity(200.0)

    def test_result_immutable(self):
        """Test results cannot be modified."""
        r = calculate_atmosphere(1000.0)
        with pytest.raises(AttributeError):
            r.pressure = 0.0

    def test_result_holds_layer_value(self):
        """Test results carry the resolved layer."""
        r = calculate_atmosphere(60000.0)
        assert r.layer == LAYERS[5]

    def test_to_dict_fields(self):
        """Test flattened records use unit-suffixed names."""
        record = calculate_atmosphere(0.0).to_dict()
        assert list(record) == [
            "altitude_m", "temperature_K", "temperature_C", "pressure_Pa",
            "density_kgm3", "speed_of_sound_ms", "dynamic_viscosity_Pas",
            "kinematic_viscosity_m2s", "layer",
        ]
        assert record["layer"] == "Troposphere"


class TestStandardAtmosphere:
    """Tests for the array interface."""

    @pytest.fixture
    def atmosphere(self):
        return StandardAtmosphere()

    def test_temperature_array(self, atmosphere):
        """Test vector evaluation of temperature."""
        T = atmosphere.temperature(np.array([0.0, 11000.0]))
        assert np.allclose(T, [288.15, 216.65])

    def test_shape_preserved(self, atmosphere):
        """Test output shape matches input shape."""
        z = np.linspace(0, 50000, 12).reshape(3, 4)
        assert atmosphere.pressure(z).shape == (3, 4)

    def test_matches_scalar_model(self, atmosphere):
        """Test each element equals the scalar computation."""
        z = [0.0, 5000.0, 30000.0, 80000.0]
        rho = atmosphere.density(z)
        for zi, value in zip(z, rho):
            assert value == calculate_atmosphere(zi).density

    def test_clamps_out_of_range(self, atmosphere):
        """Test array evaluation applies clamping."""
        a = atmosphere.speed_of_sound([-100.0, 0.0])
        assert a[0] == a[1]

    def test_viscosities(self, atmosphere):
        """Test viscosity accessors."""
        mu = atmosphere.dynamic_viscosity([0.0])
        nu = atmosphere.kinematic_viscosity([0.0])
        assert np.isclose(mu[0], SUTHERLAND_MU0)
        assert nu[0] == pytest.approx(mu[0] / calculate_atmosphere(0.0).density)
        assert nu[0] < mu[0]

    def test_calculate(self, atmosphere):
        """Test single-point access."""
        assert atmosphere.calculate(1000.0) == calculate_atmosphere(1000.0)
