"""
Configuration file support for isa-calc.

Provides YAML and JSON configuration file loading and validation
for profile runs and exports.

Usage
-----
>>> from isa_calc.utils.config import load_config
>>> config = load_config("profile.yaml")
>>> print(config.profile.step)
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from isa_calc.utils.units import TEMPERATURE_UNITS, UNITS

logger = logging.getLogger(__name__)


@dataclass
class ProfileConfig:
    """Altitude range sampled by a profile run."""

    start_altitude: float = 0.0
    end_altitude: float = 86000.0
    step: float = 1000.0
    altitude_unit: str = "m"  # m, km, ft

    def __post_init__(self):
        # YAML reads exponent literals such as 1e3 as strings
        for name in ("start_altitude", "end_altitude", "step"):
            value = getattr(self, name)
            if isinstance(value, str):
                try:
                    setattr(self, name, float(value))
                except ValueError:
                    continue  # reported by validate_config


@dataclass
class OutputConfig:
    """Output configuration."""

    format: Optional[str] = None  # csv, json; inferred from path when None
    path: Optional[str] = None  # stdout when None
    pressure_unit: str = "Pa"  # Pa, hPa, mbar, atm, psi
    temperature_unit: str = "K"  # K, C, F

    def resolve_format(self) -> str:
        """Explicit format, else the output file suffix, else csv."""
        if self.format:
            return self.format.lower()
        if self.path and Path(self.path).suffix.lower() == ".json":
            return "json"
        return "csv"


@dataclass
class CalculatorConfig:
    """Complete calculator configuration."""

    name: str = "isa_profile"
    description: str = ""

    profile: ProfileConfig = field(default_factory=ProfileConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CalculatorConfig":
        """Build a configuration from a (possibly partial) dictionary."""
        data = data or {}
        config = cls(
            name=data.get('name', 'isa_profile'),
            description=data.get('description', ''),
        )
        if 'profile' in data:
            config.profile = ProfileConfig(**data['profile'])
        if 'output' in data:
            config.output = OutputConfig(**data['output'])
        return config

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_json(self, path: Union[str, Path], indent: int = 2) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)


def load_config(path: Union[str, Path]) -> CalculatorConfig:
    """
    Load calculator configuration from YAML or JSON file.

    Parameters
    ----------
    path : str or Path
        Path to configuration file (.yaml, .yml, or .json)

    Returns
    -------
    config : CalculatorConfig
        Loaded configuration

    Raises
    ------
    FileNotFoundError
        If configuration file doesn't exist
    ValueError
        If file format is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in ('.yaml', '.yml'):
        with open(path) as f:
            data = yaml.safe_load(f)
    elif suffix == '.json':
        with open(path) as f:
            data = json.load(f)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Use .yaml, .yml, or .json")

    logger.debug(f"Loaded configuration from {path}")
    return CalculatorConfig.from_dict(data)


def create_default_config(path: Union[str, Path] = "isa_config.yaml") -> CalculatorConfig:
    """
    Create and save a default configuration file.

    Parameters
    ----------
    path : str or Path
        Output path for configuration file

    Returns
    -------
    config : CalculatorConfig
        Default configuration
    """
    config = CalculatorConfig(
        name="default_profile",
        description="Full 0-86 km profile at 1 km steps",
    )

    path = Path(path)
    if path.suffix.lower() in ('.yaml', '.yml'):
        config.to_yaml(path)
    else:
        config.to_json(path)

    return config


def validate_config(config: CalculatorConfig) -> List[str]:
    """
    Validate configuration and return list of issues.

    Parameters
    ----------
    config : CalculatorConfig
        Configuration to validate

    Returns
    -------
    issues : list of str
        List of validation issues (empty if valid)
    """
    issues = []

    # Profile validation
    numeric = True
    for name in ("start_altitude", "end_altitude", "step"):
        value = getattr(config.profile, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            issues.append(f"Profile {name} must be a number, got {value!r}")
            numeric = False

    if numeric:
        if not config.profile.step > 0:
            issues.append("Profile step must be positive")
        if config.profile.start_altitude > config.profile.end_altitude:
            issues.append("Start altitude is above end altitude; the profile will be empty")
    if config.profile.altitude_unit not in UNITS["altitude"]:
        issues.append(f"Unknown altitude unit: {config.profile.altitude_unit}")

    # Output validation
    if config.output.resolve_format() not in ("csv", "json"):
        issues.append(f"Unsupported output format: {config.output.format}")
    if config.output.pressure_unit not in UNITS["pressure"]:
        issues.append(f"Unknown pressure unit: {config.output.pressure_unit}")
    if config.output.temperature_unit not in TEMPERATURE_UNITS:
        issues.append(f"Unknown temperature unit: {config.output.temperature_unit}")

    return issues
