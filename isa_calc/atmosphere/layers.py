"""
Layer table of the International Standard Atmosphere.

Eight layers from the troposphere to the mesopause, each described by its
base geopotential altitude, base temperature and temperature lapse rate.
Base pressures are integrated once at import time from sea level so that
pressure is continuous across every layer boundary.
"""

import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import Tuple

from isa_calc.utils.constants import (
    SEA_LEVEL_PRESSURE,
    SPECIFIC_GAS_CONSTANT,
    STANDARD_GRAVITY,
)


@dataclass(frozen=True)
class AtmosphericLayer:
    """
    A single layer of the standard atmosphere.

    Attributes
    ----------
    name : str
        Layer name (e.g. "Troposphere")
    base_altitude : float
        Geopotential altitude of the layer base in meters
    base_temperature : float
        Temperature at the layer base in Kelvin
    lapse_rate : float
        Temperature gradient in K/m (negative when temperature decreases
        with altitude, exactly 0 for isothermal layers)
    base_pressure : float
        Pressure at the layer base in Pa
    """

    name: str
    base_altitude: float
    base_temperature: float
    lapse_rate: float
    base_pressure: float

    @property
    def is_isothermal(self) -> bool:
        """True when the layer has a zero lapse rate."""
        return self.lapse_rate == 0

    def temperature_at(self, altitude: float) -> float:
        """Temperature in Kelvin at ``altitude`` using this layer's gradient."""
        return self.base_temperature + self.lapse_rate * (altitude - self.base_altitude)

    def pressure_at(self, altitude: float) -> float:
        """
        Pressure in Pa at ``altitude`` from the hydrostatic closed form.

        Isothermal layers use the exponential form, gradient layers the
        power law. The branch is chosen on exact equality with zero.
        """
        T = self.temperature_at(altitude)

        if self.lapse_rate == 0:
            # P = Pb * exp(-g0 * dh / (R * T))
            return self.base_pressure * math.exp(
                -STANDARD_GRAVITY
                * (altitude - self.base_altitude)
                / (SPECIFIC_GAS_CONSTANT * T)
            )

        # P = Pb * (T / Tb) ^ (-g0 / (L * R))
        exponent = -STANDARD_GRAVITY / (self.lapse_rate * SPECIFIC_GAS_CONSTANT)
        return self.base_pressure * (T / self.base_temperature) ** exponent


# (name, base altitude [m], base temperature [K], lapse rate [K/m])
_LAYER_DEFINITIONS = [
    ("Troposphere", 0.0, 288.15, -0.0065),
    ("Tropopause", 11000.0, 216.65, 0.0),
    ("Stratosphere I", 20000.0, 216.65, 0.001),
    ("Stratosphere II", 32000.0, 228.65, 0.0028),
    ("Stratopause", 47000.0, 270.65, 0.0),
    ("Mesosphere I", 51000.0, 270.65, -0.0028),
    ("Mesosphere II", 71000.0, 214.65, -0.002),
    ("Mesopause", 86000.0, 186.87, 0.0),
]


def _build_layers() -> Tuple[AtmosphericLayer, ...]:
    """Attach base pressures to the layer definitions, bottom to top."""
    name, z_b, T_b, L = _LAYER_DEFINITIONS[0]
    layers = [AtmosphericLayer(name, z_b, T_b, L, SEA_LEVEL_PRESSURE)]

    for name, z_b, T_b, L in _LAYER_DEFINITIONS[1:]:
        P_b = layers[-1].pressure_at(z_b)
        layers.append(AtmosphericLayer(name, z_b, T_b, L, P_b))

    return tuple(layers)


# Mesopause carries the published 186.87 K with the continuous base pressure
# (~0.3023 Pa), so density at 86 km is ~5.64e-6 kg/m^3, not the tabulated
# ~6.96e-6 kg/m^3 (0.3734 Pa).
LAYERS: Tuple[AtmosphericLayer, ...] = _build_layers()

_BASE_ALTITUDES = [layer.base_altitude for layer in LAYERS]


def get_layer_index(altitude: float) -> int:
    """
    Index of the layer containing ``altitude``.

    Picks the layer with the greatest base altitude not above ``altitude``.
    Altitudes below the first base map to the first layer.
    """
    return max(bisect_right(_BASE_ALTITUDES, altitude) - 1, 0)


def get_layer(altitude: float) -> AtmosphericLayer:
    """
    Get the atmospheric layer for a given altitude.

    Parameters
    ----------
    altitude : float
        Geopotential altitude in meters

    Returns
    -------
    layer : AtmosphericLayer
        The layer whose base is the highest one at or below ``altitude``
    """
    return LAYERS[get_layer_index(altitude)]
