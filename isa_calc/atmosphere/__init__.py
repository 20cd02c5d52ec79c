"""
Standard atmosphere model.

This module provides the layer table of the International Standard
Atmosphere, the single-altitude evaluator and the profile sampler.

Classes
-------
AtmosphericLayer
    Immutable definition of one layer (base altitude, temperature, lapse rate, pressure)
AtmosphericResult
    Atmospheric state at one altitude
AtmosphericProfile
    Altitude-ascending sequence of results
StandardAtmosphere
    Array interface to the model

Functions
---------
get_layer
    Layer containing an altitude
calculate_atmosphere
    Full property set at one altitude (clamped to 0-86 km)
generate_profile
    Sample the model over an altitude range
"""

from isa_calc.atmosphere.layers import (
    LAYERS,
    AtmosphericLayer,
    get_layer,
    get_layer_index,
)
from isa_calc.atmosphere.model import (
    AtmosphericResult,
    StandardAtmosphere,
    calculate_atmosphere,
    calculate_density,
    calculate_dynamic_viscosity,
    calculate_pressure,
    calculate_speed_of_sound,
    calculate_temperature,
    clamp_altitude,
)
from isa_calc.atmosphere.profile import (
    AtmosphericProfile,
    InvalidStepError,
    generate_profile,
)

__all__ = [
    "LAYERS",
    "AtmosphericLayer",
    "get_layer",
    "get_layer_index",
    "AtmosphericResult",
    "StandardAtmosphere",
    "calculate_atmosphere",
    "calculate_density",
    "calculate_dynamic_viscosity",
    "calculate_pressure",
    "calculate_speed_of_sound",
    "calculate_temperature",
    "clamp_altitude",
    "AtmosphericProfile",
    "InvalidStepError",
    "generate_profile",
]
