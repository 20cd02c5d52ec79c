"""
International Standard Atmosphere model.

Evaluates temperature, pressure, density, speed of sound and viscosity at
a geopotential altitude between 0 and 86 km (ISO 2533:1975 / ICAO).

References
----------
ISO 2533:1975, Standard Atmosphere
"""

import math
from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from isa_calc.atmosphere.layers import AtmosphericLayer, get_layer
from isa_calc.utils.constants import (
    HEAT_CAPACITY_RATIO,
    KELVIN_OFFSET,
    MAX_ALTITUDE,
    MIN_ALTITUDE,
    SPECIFIC_GAS_CONSTANT,
    SUTHERLAND_MU0,
    SUTHERLAND_S,
    SUTHERLAND_T0,
)

# Field names of a flattened result, in export order
RECORD_FIELDS = (
    "altitude_m",
    "temperature_K",
    "temperature_C",
    "pressure_Pa",
    "density_kgm3",
    "speed_of_sound_ms",
    "dynamic_viscosity_Pas",
    "kinematic_viscosity_m2s",
    "layer",
)


@dataclass(frozen=True)
class AtmosphericResult:
    """
    Atmospheric state at one altitude.

    Attributes
    ----------
    altitude : float
        Altitude after clamping to the model range, in meters
    temperature : float
        Temperature in Kelvin
    temperature_celsius : float
        Temperature in degrees Celsius
    pressure : float
        Pressure in Pa
    density : float
        Density in kg/m³
    speed_of_sound : float
        Speed of sound in m/s
    dynamic_viscosity : float
        Dynamic viscosity in Pa·s
    kinematic_viscosity : float
        Kinematic viscosity in m²/s
    layer : AtmosphericLayer
        Layer containing the altitude
    """

    altitude: float
    temperature: float
    temperature_celsius: float
    pressure: float
    density: float
    speed_of_sound: float
    dynamic_viscosity: float
    kinematic_viscosity: float
    layer: AtmosphericLayer

    @property
    def layer_name(self) -> str:
        """Name of the containing layer."""
        return self.layer.name

    def to_dict(self) -> Dict[str, Any]:
        """Flat record keyed by ``RECORD_FIELDS``."""
        values = (
            self.altitude,
            self.temperature,
            self.temperature_celsius,
            self.pressure,
            self.density,
            self.speed_of_sound,
            self.dynamic_viscosity,
            self.kinematic_viscosity,
            self.layer_name,
        )
        return dict(zip(RECORD_FIELDS, values))


def clamp_altitude(altitude: float) -> float:
    """Saturate ``altitude`` into the modeled range [0, 86000] m."""
    return float(max(MIN_ALTITUDE, min(MAX_ALTITUDE, altitude)))


def calculate_temperature(altitude: float) -> float:
    """Temperature in Kelvin at ``altitude`` (m), without clamping."""
    return get_layer(altitude).temperature_at(altitude)


def calculate_pressure(altitude: float) -> float:
    """Pressure in Pa at ``altitude`` (m), without clamping."""
    return get_layer(altitude).pressure_at(altitude)


def calculate_density(pressure: float, temperature: float) -> float:
    """Density from the ideal gas law, ρ = P / (R·T)."""
    return pressure / (SPECIFIC_GAS_CONSTANT * temperature)


def calculate_speed_of_sound(temperature: float) -> float:
    """Speed of sound a = sqrt(γ·R·T); NaN for non-positive temperatures."""
    value = HEAT_CAPACITY_RATIO * SPECIFIC_GAS_CONSTANT * temperature
    if value <= 0:
        return math.nan
    return math.sqrt(value)


def calculate_dynamic_viscosity(temperature: float) -> float:
    """
    Dynamic viscosity of air from Sutherland's law.

        μ = μ0 · (T/T0)^1.5 · (T0 + S) / (T + S)

    Parameters
    ----------
    temperature : float
        Temperature in Kelvin

    Returns
    -------
    mu : float
        Dynamic viscosity in Pa·s
    """
    return (
        SUTHERLAND_MU0
        * (temperature / SUTHERLAND_T0) ** 1.5
        * ((SUTHERLAND_T0 + SUTHERLAND_S) / (temperature + SUTHERLAND_S))
    )


def calculate_atmosphere(altitude: float) -> AtmosphericResult:
    """
    Compute the full atmospheric state at a geopotential altitude.

    Altitudes outside [0, 86000] m are clamped to the nearest bound rather
    than rejected, so this function never raises for numeric input.

    Parameters
    ----------
    altitude : float
        Geopotential altitude in meters

    Returns
    -------
    result : AtmosphericResult
        All properties at the clamped altitude
    """
    h = clamp_altitude(altitude)

    layer = get_layer(h)
    temperature = layer.temperature_at(h)
    pressure = layer.pressure_at(h)
    density = calculate_density(pressure, temperature)
    dynamic_viscosity = calculate_dynamic_viscosity(temperature)

    return AtmosphericResult(
        altitude=h,
        temperature=temperature,
        temperature_celsius=temperature - KELVIN_OFFSET,
        pressure=pressure,
        density=density,
        speed_of_sound=calculate_speed_of_sound(temperature),
        dynamic_viscosity=dynamic_viscosity,
        kinematic_viscosity=dynamic_viscosity / density,
        layer=layer,
    )


class StandardAtmosphere:
    """
    Array interface to the International Standard Atmosphere.

    Every method accepts a scalar or array-like of altitudes in meters and
    returns an ndarray of the same shape. Each element is evaluated through
    :func:`calculate_atmosphere`, so out-of-range altitudes are clamped.

    Examples
    --------
    >>> atm = StandardAtmosphere()
    >>> atm.temperature([0.0, 11000.0])
    array([288.15, 216.65])
    """

    def calculate(self, altitude: float) -> AtmosphericResult:
        """Full atmospheric state at a single altitude."""
        return calculate_atmosphere(altitude)

    def _evaluate(self, altitude, attribute: str) -> np.ndarray:
        altitude = np.asarray(altitude, dtype=float)
        result = np.zeros_like(altitude, dtype=float)

        for i, z in enumerate(altitude.flat):
            result.flat[i] = getattr(calculate_atmosphere(z), attribute)

        return result

    def temperature(self, altitude) -> np.ndarray:
        """Temperature in Kelvin."""
        return self._evaluate(altitude, "temperature")

    def pressure(self, altitude) -> np.ndarray:
        """Pressure in Pa."""
        return self._evaluate(altitude, "pressure")

    def density(self, altitude) -> np.ndarray:
        """Density in kg/m³."""
        return self._evaluate(altitude, "density")

    def speed_of_sound(self, altitude) -> np.ndarray:
        """Speed of sound in m/s."""
        return self._evaluate(altitude, "speed_of_sound")

    def dynamic_viscosity(self, altitude) -> np.ndarray:
        """Dynamic viscosity in Pa·s."""
        return self._evaluate(altitude, "dynamic_viscosity")

    def kinematic_viscosity(self, altitude) -> np.ndarray:
        """Kinematic viscosity in m²/s."""
        return self._evaluate(altitude, "kinematic_viscosity")
