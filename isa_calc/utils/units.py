"""
Unit conversion tables for atmospheric quantities.

Linear quantities (altitude, pressure, density, velocity) are defined by a
scale factor relative to their SI unit. Temperature is affine and handled
separately by :func:`convert_temperature`.
"""

from dataclasses import dataclass
from typing import Dict, List


class UnknownUnitError(ValueError):
    """Raised when a unit or quantity is not in the conversion tables."""
    pass


@dataclass(frozen=True)
class Unit:
    """A unit with its scale factor to the canonical SI unit."""

    factor: float
    symbol: str
    name: str


UNITS: Dict[str, Dict[str, Unit]] = {
    "altitude": {
        "m": Unit(1.0, "m", "meters"),
        "km": Unit(1000.0, "km", "kilometers"),
        "ft": Unit(0.3048, "ft", "feet"),
    },
    "pressure": {
        "Pa": Unit(1.0, "Pa", "Pascal"),
        "hPa": Unit(100.0, "hPa", "hectopascal"),
        "mbar": Unit(100.0, "mbar", "millibar"),
        "atm": Unit(101325.0, "atm", "atmosphere"),
        "psi": Unit(6894.76, "psi", "pounds per square inch"),
    },
    "density": {
        "kgm3": Unit(1.0, "kg/m³", "kilograms per cubic meter"),
        "gm3": Unit(0.001, "g/m³", "grams per cubic meter"),
    },
    "velocity": {
        "ms": Unit(1.0, "m/s", "meters per second"),
        "kmh": Unit(0.277778, "km/h", "kilometers per hour"),
        "mph": Unit(0.44704, "mph", "miles per hour"),
        "kts": Unit(0.514444, "kts", "knots"),
    },
}

TEMPERATURE_UNITS: Dict[str, str] = {
    "K": "K",
    "C": "°C",
    "F": "°F",
}


def _lookup(quantity: str, unit: str) -> Unit:
    try:
        table = UNITS[quantity]
    except KeyError:
        raise UnknownUnitError(f"Unknown quantity: {quantity!r}") from None
    try:
        return table[unit]
    except KeyError:
        raise UnknownUnitError(
            f"Unknown {quantity} unit: {unit!r}. Available: {', '.join(table)}"
        ) from None


def available_units(quantity: str) -> List[str]:
    """Unit identifiers accepted for ``quantity``."""
    if quantity == "temperature":
        return list(TEMPERATURE_UNITS)
    if quantity not in UNITS:
        raise UnknownUnitError(f"Unknown quantity: {quantity!r}")
    return list(UNITS[quantity])


def unit_symbol(quantity: str, unit: str) -> str:
    """Display symbol for ``unit`` (e.g. ``"kg/m³"`` for ``"kgm3"``)."""
    if quantity == "temperature":
        if unit not in TEMPERATURE_UNITS:
            raise UnknownUnitError(f"Unknown temperature unit: {unit!r}")
        return TEMPERATURE_UNITS[unit]
    return _lookup(quantity, unit).symbol


def convert(value: float, from_unit: str, to_unit: str, quantity: str = "altitude") -> float:
    """
    Convert a linear quantity between two units of the same table.

    Parameters
    ----------
    value : float
        Value expressed in ``from_unit``
    from_unit, to_unit : str
        Unit identifiers from ``UNITS[quantity]``
    quantity : str
        One of "altitude", "pressure", "density", "velocity"

    Returns
    -------
    converted : float
        ``value * factor(from_unit) / factor(to_unit)``

    Raises
    ------
    UnknownUnitError
        If the quantity or either unit is not in the tables
    """
    source = _lookup(quantity, from_unit)
    target = _lookup(quantity, to_unit)
    return value * source.factor / target.factor


def convert_altitude(value: float, from_unit: str, to_unit: str) -> float:
    """Convert an altitude between m, km and ft."""
    return convert(value, from_unit, to_unit, "altitude")


def convert_pressure(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a pressure between Pa, hPa, mbar, atm and psi."""
    return convert(value, from_unit, to_unit, "pressure")


def convert_density(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a density between kg/m³ and g/m³."""
    return convert(value, from_unit, to_unit, "density")


def convert_velocity(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a velocity between m/s, km/h, mph and knots."""
    return convert(value, from_unit, to_unit, "velocity")


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a temperature between K, C and F."""
    if from_unit == "K":
        kelvin = value
    elif from_unit == "C":
        kelvin = value + 273.15
    elif from_unit == "F":
        kelvin = (value + 459.67) / 1.8
    else:
        raise UnknownUnitError(f"Unknown temperature unit: {from_unit!r}")

    if to_unit == "K":
        return kelvin
    elif to_unit == "C":
        return kelvin - 273.15
    elif to_unit == "F":
        return kelvin * 1.8 - 459.67
    raise UnknownUnitError(f"Unknown temperature unit: {to_unit!r}")
