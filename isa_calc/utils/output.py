"""
Output formatter for exporting atmosphere results.

Supports two output formats:
- CSV: Tabular data with a fixed header row
- JSON: Structured output with model metadata and a constants snapshot
"""

import csv
import io
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Union

from isa_calc.utils.constants import ISA_CONSTANTS
from isa_calc.utils.units import convert_altitude, convert_pressure, convert_temperature, unit_symbol

logger = logging.getLogger(__name__)

MODEL_IDENTIFIER = "ISA (ISO 2533:1975)"

CSV_HEADER = [
    "Altitude (m)",
    "Temperature (K)",
    "Temperature (°C)",
    "Pressure (Pa)",
    "Density (kg/m³)",
    "Speed of Sound (m/s)",
    "Dynamic Viscosity (Pa·s)",
    "Kinematic Viscosity (m²/s)",
    "Layer",
]


def format_number(value: float, decimals: int = 4) -> str:
    """
    Format a value with fixed decimals, or scientific notation when tiny or huge.

    Magnitudes below 0.001 (zero included) or at least 1e6 are written as
    ``1.2346e-05``; everything else as ``123.4568``.
    """
    magnitude = abs(value)
    if magnitude < 0.001 or magnitude >= 1e6:
        return f"{value:.{decimals}e}"
    return f"{value:.{decimals}f}"


def format_result(
    result,
    altitude_unit: str = "m",
    pressure_unit: str = "Pa",
    temperature_unit: str = "K",
) -> str:
    """Plain-text summary of one result in the requested display units."""
    altitude = convert_altitude(result.altitude, "m", altitude_unit)
    pressure = convert_pressure(result.pressure, "Pa", pressure_unit)
    temperature = convert_temperature(result.temperature, "K", temperature_unit)

    lines = [
        f"ISA Atmospheric Properties at {format_number(altitude)} {unit_symbol('altitude', altitude_unit)}",
        f"Layer: {result.layer_name}",
        f"Temperature: {temperature:.4f} {unit_symbol('temperature', temperature_unit)}"
        f" ({result.temperature_celsius:.2f} °C)",
        f"Pressure: {format_number(pressure)} {unit_symbol('pressure', pressure_unit)}",
        f"Density: {result.density:.6e} kg/m³",
        f"Speed of Sound: {result.speed_of_sound:.4f} m/s",
        f"Dynamic Viscosity: {result.dynamic_viscosity:.6e} Pa·s",
        f"Kinematic Viscosity: {result.kinematic_viscosity:.6e} m²/s",
    ]
    return "\n".join(lines)


class OutputFormatter:
    """Formatter for exporting atmosphere results to text formats.

    Accepts any iterable of ``AtmosphericResult`` (a single-point list or
    an ``AtmosphericProfile``).

    Example:
        >>> formatter = OutputFormatter()
        >>> profile = generate_profile(0, 86000, 1000)
        >>> text = formatter.to_csv(profile)
        >>> formatter.save(profile, "profile.json", format="json")
    """

    FORMATS = ("csv", "json")

    def to_csv(self, results: Iterable, delimiter: str = ",") -> str:
        """Render results as a delimited table with a header row.

        Args:
            results: Atmospheric results in output order
            delimiter: Column delimiter

        Returns:
            Table text, rows separated by newlines
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
        writer.writerow(CSV_HEADER)

        for r in results:
            writer.writerow([
                format_number(r.altitude),
                format_number(r.temperature),
                format_number(r.temperature_celsius),
                format_number(r.pressure),
                f"{r.density:.6e}",
                format_number(r.speed_of_sound),
                f"{r.dynamic_viscosity:.6e}",
                f"{r.kinematic_viscosity:.6e}",
                r.layer_name,
            ])

        return buffer.getvalue().rstrip("\n")

    def to_json(self, results: Iterable, indent: int = 2) -> str:
        """Render results as a JSON document with metadata.

        Args:
            results: Atmospheric results in output order
            indent: JSON indentation

        Returns:
            JSON text
        """
        data = {
            "metadata": {
                "model": MODEL_IDENTIFIER,
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "software": "isa-calc",
                "constants": ISA_CONSTANTS.to_dict(),
            },
            "data": [r.to_dict() for r in results],
        }
        return json.dumps(data, indent=indent, ensure_ascii=False)

    def save(
        self,
        results: Iterable,
        output_path: Union[str, Path],
        format: str = "csv",
        **kwargs,
    ) -> str:
        """Save results to file.

        Args:
            results: Atmospheric results
            output_path: Output file path
            format: Output format (csv, json)
            **kwargs: Passed to ``to_csv``/``to_json``

        Returns:
            Path to saved file

        Raises:
            ValueError: If format is not supported
        """
        format = format.lower()
        if format == "json":
            text = self.to_json(results, **kwargs)
        elif format == "csv":
            text = self.to_csv(results, **kwargs)
        else:
            raise ValueError(f"Unsupported format: {format}")

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
            f.write("\n")

        logger.info(f"Saved {format.upper()} output to {output_path}")
        return str(output_path)
