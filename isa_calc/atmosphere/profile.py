"""
Altitude profiles sampled from the standard atmosphere.
"""

import logging
import math
from collections.abc import Sequence
from typing import Dict, Iterator, List

import numpy as np

from isa_calc.atmosphere.model import (
    RECORD_FIELDS,
    AtmosphericResult,
    calculate_atmosphere,
)
from isa_calc.utils.units import convert_altitude

logger = logging.getLogger(__name__)


class InvalidStepError(ValueError):
    """Raised when a profile is requested with a non-positive step."""
    pass


class AtmosphericProfile(Sequence):
    """
    Ordered, altitude-ascending sequence of atmospheric results.

    Behaves like a read-only list of :class:`AtmosphericResult` and adds
    ndarray accessors for plotting and boundary-condition tooling.
    """

    def __init__(self, results=()):
        self._results: List[AtmosphericResult] = list(results)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return AtmosphericProfile(self._results[index])
        return self._results[index]

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[AtmosphericResult]:
        return iter(self._results)

    def __eq__(self, other) -> bool:
        if isinstance(other, AtmosphericProfile):
            return self._results == other._results
        return NotImplemented

    def __repr__(self) -> str:
        if not self._results:
            return "AtmosphericProfile([])"
        return (
            f"AtmosphericProfile({len(self)} samples, "
            f"{self._results[0].altitude:g}-{self._results[-1].altitude:g} m)"
        )

    @property
    def altitudes(self) -> np.ndarray:
        """Sample altitudes in meters."""
        return np.array([r.altitude for r in self._results], dtype=float)

    @property
    def temperatures(self) -> np.ndarray:
        """Sample temperatures in Kelvin."""
        return np.array([r.temperature for r in self._results], dtype=float)

    @property
    def pressures(self) -> np.ndarray:
        """Sample pressures in Pa."""
        return np.array([r.pressure for r in self._results], dtype=float)

    @property
    def densities(self) -> np.ndarray:
        """Sample densities in kg/m³."""
        return np.array([r.density for r in self._results], dtype=float)

    def as_arrays(self) -> Dict[str, np.ndarray]:
        """
        Column view of the profile.

        Returns
        -------
        columns : dict
            One ndarray per numeric field, keyed like the JSON records
            (``altitude_m``, ``temperature_K``, ...). Layer names are
            returned as an object array under ``layer``.
        """
        records = [r.to_dict() for r in self._results]

        columns = {}
        for key in RECORD_FIELDS:
            dtype = object if key == "layer" else float
            columns[key] = np.array([rec[key] for rec in records], dtype=dtype)
        return columns


def generate_profile(
    start: float,
    end: float,
    step: float,
    unit: str = "m",
) -> AtmosphericProfile:
    """
    Sample the atmosphere from ``start`` to ``end`` inclusive.

    Samples are taken at ``start + i * step`` for as long as they do not
    exceed ``end``. Start and end are not clamped; each sample is clamped
    by :func:`calculate_atmosphere`, so a range reaching past 86 km repeats
    the mesopause values.

    Parameters
    ----------
    start : float
        First altitude
    end : float
        Last altitude (included when reached exactly)
    step : float
        Spacing between samples, must be positive
    unit : str
        Altitude unit of ``start``, ``end`` and ``step`` (m, km or ft)

    Returns
    -------
    profile : AtmosphericProfile
        Samples in ascending altitude order; empty when ``start > end``

    Raises
    ------
    InvalidStepError
        If ``step`` is not a positive finite number
    UnknownUnitError
        If ``unit`` is not an altitude unit
    """
    if not (step > 0 and math.isfinite(step)):
        raise InvalidStepError(f"Profile step must be positive and finite, got {step!r}")

    if unit != "m":
        start = convert_altitude(start, unit, "m")
        end = convert_altitude(end, unit, "m")
        step = convert_altitude(step, unit, "m")

    if start <= end and not math.isfinite(end - start):
        raise ValueError(f"Profile bounds must be finite, got {start!r} to {end!r}")

    results = []
    i = 0
    altitude = start
    while altitude <= end:
        results.append(calculate_atmosphere(altitude))
        i += 1
        altitude = start + i * step

    logger.debug(
        "Generated profile with %d samples from %g m to %g m (step %g m)",
        len(results), start, end, step,
    )
    return AtmosphericProfile(results)
