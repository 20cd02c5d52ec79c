"""
isa-calc: International Standard Atmosphere calculator.

Computes temperature, pressure, density, speed of sound and viscosity as a
function of geopotential altitude from 0 to 86 km, following the
piecewise-linear standard atmosphere (ISO 2533:1975 / ICAO).

Modules
-------
atmosphere
    Layer table, single-altitude model and altitude profiles
utils
    Physical constants, unit conversion, configuration and CSV/JSON output
cli
    ``isa-calc`` command-line entry point
"""

__version__ = "0.1.0"
__author__ = "isa-calc Contributors"

from isa_calc.atmosphere import (
    AtmosphericLayer,
    AtmosphericProfile,
    AtmosphericResult,
    InvalidStepError,
    StandardAtmosphere,
    calculate_atmosphere,
    generate_profile,
)
from isa_calc.utils.units import UnknownUnitError

__all__ = [
    "__version__",
    "AtmosphericLayer",
    "AtmosphericProfile",
    "AtmosphericResult",
    "InvalidStepError",
    "StandardAtmosphere",
    "UnknownUnitError",
    "calculate_atmosphere",
    "generate_profile",
]
