"""
Utility functions and physical constants.

Constants
---------
ISA_CONSTANTS : PhysicalConstants
    Standard gravity, gas constant, heat capacity ratio and sea level state
SUTHERLAND_MU0, SUTHERLAND_T0, SUTHERLAND_S : float
    Reference values of Sutherland's viscosity law

Functions
---------
convert, convert_altitude, convert_pressure, convert_density, convert_velocity
    Linear unit conversions
convert_temperature
    Temperature conversion between K, C and F

Configuration
-------------
CalculatorConfig
    Profile and output configuration dataclass
load_config
    Load configuration from YAML or JSON file
"""

from isa_calc.utils.constants import (
    ISA_CONSTANTS,
    PhysicalConstants,
    SUTHERLAND_MU0,
    SUTHERLAND_T0,
    SUTHERLAND_S,
)
from isa_calc.utils.units import (
    UNITS,
    UnknownUnitError,
    available_units,
    convert,
    convert_altitude,
    convert_density,
    convert_pressure,
    convert_temperature,
    convert_velocity,
    unit_symbol,
)
from isa_calc.utils.config import (
    CalculatorConfig,
    OutputConfig,
    ProfileConfig,
    create_default_config,
    load_config,
    validate_config,
)
from isa_calc.utils.output import OutputFormatter, format_number, format_result

__all__ = [
    "ISA_CONSTANTS",
    "PhysicalConstants",
    "SUTHERLAND_MU0",
    "SUTHERLAND_T0",
    "SUTHERLAND_S",
    "UNITS",
    "UnknownUnitError",
    "available_units",
    "convert",
    "convert_altitude",
    "convert_density",
    "convert_pressure",
    "convert_temperature",
    "convert_velocity",
    "unit_symbol",
    # Configuration
    "CalculatorConfig",
    "OutputConfig",
    "ProfileConfig",
    "create_default_config",
    "load_config",
    "validate_config",
    # Output
    "OutputFormatter",
    "format_number",
    "format_result",
]
