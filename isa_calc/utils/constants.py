"""
Physical constants for International Standard Atmosphere calculations.

All constants are in SI units unless otherwise specified.
"""

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class PhysicalConstants:
    """
    Reference constants of the standard atmosphere (ISO 2533:1975).

    Attributes
    ----------
    g0 : float
        Standard gravity in m/s²
    R : float
        Specific gas constant for dry air in J/(kg·K)
    M : float
        Molar mass of dry air in kg/mol
    R_star : float
        Universal gas constant in J/(mol·K)
    gamma : float
        Ratio of specific heats (cp/cv)
    T0 : float
        Sea level temperature in Kelvin
    P0 : float
        Sea level pressure in Pa
    rho0 : float
        Sea level density in kg/m³
    """

    g0: float = 9.80665
    R: float = 287.05287
    M: float = 0.0289644
    R_star: float = 8.31432
    gamma: float = 1.4
    T0: float = 288.15
    P0: float = 101325.0
    rho0: float = 1.225

    def to_dict(self) -> Dict[str, float]:
        """Snapshot of the constants as a plain dictionary."""
        return asdict(self)


ISA_CONSTANTS = PhysicalConstants()

STANDARD_GRAVITY = ISA_CONSTANTS.g0  # m/s^2
SPECIFIC_GAS_CONSTANT = ISA_CONSTANTS.R  # J/(kg·K)
HEAT_CAPACITY_RATIO = ISA_CONSTANTS.gamma
SEA_LEVEL_TEMPERATURE = ISA_CONSTANTS.T0  # K
SEA_LEVEL_PRESSURE = ISA_CONSTANTS.P0  # Pa
SEA_LEVEL_DENSITY = ISA_CONSTANTS.rho0  # kg/m^3

# Sutherland's law reference values for air. These belong to the viscosity
# fit and are kept apart from the sea level constants above.
SUTHERLAND_MU0 = 1.7894e-5  # Pa·s
SUTHERLAND_T0 = 288.15  # K
SUTHERLAND_S = 110.4  # K

KELVIN_OFFSET = 273.15  # K at 0 °C

# Valid geopotential altitude range of the model (m)
MIN_ALTITUDE = 0.0
MAX_ALTITUDE = 86000.0
