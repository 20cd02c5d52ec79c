"""
Command-line interface for isa-calc.

Provides CLI commands for:
- Atmospheric properties at a single altitude
- Altitude profiles exported as CSV or JSON
"""

import argparse
import logging
import sys
from typing import List, Optional

from isa_calc import __version__
from isa_calc.atmosphere import calculate_atmosphere, generate_profile
from isa_calc.utils.config import CalculatorConfig, load_config, validate_config
from isa_calc.utils.output import OutputFormatter, format_result
from isa_calc.utils.units import TEMPERATURE_UNITS, UNITS, convert_altitude

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _resolve_config(args: argparse.Namespace) -> CalculatorConfig:
    """Merge the optional config file with explicit command-line flags."""
    config = load_config(args.config) if args.config else CalculatorConfig()

    overrides = {
        "start_altitude": args.start,
        "end_altitude": args.end,
        "step": args.step,
        "altitude_unit": args.altitude_unit,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config.profile, key, value)

    overrides = {
        "format": args.format,
        "path": args.output,
        "pressure_unit": args.pressure_unit,
        "temperature_unit": args.temperature_unit,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config.output, key, value)

    return config


def run(args: argparse.Namespace) -> int:
    """Compute a point or a profile and write it out."""
    config = _resolve_config(args)

    issues = validate_config(config)
    for issue in issues:
        logger.warning(issue)

    formatter = OutputFormatter()
    profile_cfg = config.profile
    output_cfg = config.output

    if args.altitude is not None:
        altitude_m = convert_altitude(args.altitude, profile_cfg.altitude_unit, "m")
        result = calculate_atmosphere(altitude_m)
        if altitude_m != result.altitude:
            logger.info(f"Altitude {altitude_m:g} m clamped to {result.altitude:g} m")
        results = [result]

        if not output_cfg.path and args.format is None:
            print(format_result(
                result,
                altitude_unit=profile_cfg.altitude_unit,
                pressure_unit=output_cfg.pressure_unit,
                temperature_unit=output_cfg.temperature_unit,
            ))
            return 0
    else:
        results = generate_profile(
            profile_cfg.start_altitude,
            profile_cfg.end_altitude,
            profile_cfg.step,
            unit=profile_cfg.altitude_unit,
        )
        logger.info(f"Computed {len(results)} profile samples")

    fmt = output_cfg.resolve_format()
    if output_cfg.path:
        output_path = formatter.save(results, output_cfg.path, format=fmt)
        print(f"Results saved to: {output_path}")
    elif fmt == "json":
        print(formatter.to_json(results))
    elif fmt == "csv":
        print(formatter.to_csv(results))
    else:
        raise ValueError(f"Unsupported format: {fmt}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the ``isa-calc`` command."""
    parser = argparse.ArgumentParser(
        prog="isa-calc",
        description="isa-calc: International Standard Atmosphere calculator (0-86 km)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Properties at FL350
    isa-calc --altitude 35000 --altitude-unit ft --pressure-unit hPa

    # Full profile as CSV
    isa-calc --start 0 --end 86000 --step 1000 --output profile.csv

    # Profile from a configuration file, exported as JSON
    isa-calc --config profile.yaml --format json
        """,
    )

    # Global options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"isa-calc {__version__}",
    )
    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to YAML or JSON configuration file",
    )

    # Altitude options
    parser.add_argument(
        "-a", "--altitude",
        type=float,
        help="Single altitude to evaluate (skips the profile)",
    )
    parser.add_argument(
        "--start",
        type=float,
        help="Profile start altitude [default 0]",
    )
    parser.add_argument(
        "--end",
        type=float,
        help="Profile end altitude [default 86000]",
    )
    parser.add_argument(
        "--step",
        type=float,
        help="Profile step [default 1000]",
    )
    parser.add_argument(
        "--altitude-unit",
        type=str,
        choices=list(UNITS["altitude"]),
        help="Unit of altitude arguments",
    )

    # Display options
    parser.add_argument(
        "--pressure-unit",
        type=str,
        choices=list(UNITS["pressure"]),
        help="Pressure unit of the single-altitude summary",
    )
    parser.add_argument(
        "--temperature-unit",
        type=str,
        choices=list(TEMPERATURE_UNITS),
        help="Temperature unit of the single-altitude summary",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Output file path",
    )
    parser.add_argument(
        "-f", "--format",
        type=str,
        choices=list(OutputFormatter.FORMATS),
        help="Output format",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        return run(args)
    except Exception as e:
        logging.exception(f"Calculation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
