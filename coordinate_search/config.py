"""
Display configuration for converted coordinates.

Settings can be loaded from a YAML file with a ``coordinates`` section:

    coordinates:
      precision: 6        # digits after the decimal point for DD output
      symbolic: true      # use ° ' " symbols in DMS/DDM output

load_config() resolves the file from an explicit path, then from the
COORDINATE_SEARCH_CONFIG environment variable, and otherwise returns the
defaults.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from coordinate_search.formatter import DEFAULT_PRECISION

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "COORDINATE_SEARCH_CONFIG"
MAX_PRECISION = 15


@dataclass(frozen=True)
class DisplayConfig:
    """Configuration for rendering conversion results.

    Attributes:
        precision: Digits after the decimal point for decimal degrees.
        symbolic: Render DMS/DDM with degree/minute/second symbols.
    """

    precision: int = DEFAULT_PRECISION
    symbolic: bool = True

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"precision must be an integer, got {self.precision!r}")
        if not 0 <= self.precision <= MAX_PRECISION:
            raise ValueError(
                f"precision must be between 0 and {MAX_PRECISION}, got {self.precision}"
            )
        if not isinstance(self.symbolic, bool):
            raise ValueError(f"symbolic must be a boolean, got {self.symbolic!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DisplayConfig':
        """Create configuration from a dictionary.

        Args:
            data: Mapping with optional 'precision' and 'symbolic' keys.

        Returns:
            DisplayConfig instance

        Raises:
            ValueError: If a key is unknown or a value is invalid
        """
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

        unknown = set(data) - {'precision', 'symbolic'}
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        kwargs: Dict[str, Any] = {}
        if 'precision' in data:
            kwargs['precision'] = data['precision']
        if 'symbolic' in data:
            kwargs['symbolic'] = data['symbolic']
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'DisplayConfig':
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            DisplayConfig instance loaded from file

        Raises:
            FileNotFoundError: If configuration file does not exist
            ValueError: If configuration file is malformed or contains invalid values

        Example:
            >>> config = DisplayConfig.from_yaml('coordinates.yaml')
            >>> config.precision
            6
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                f"Please create a configuration file or use get_default_config()"
            )

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not data:
            raise ValueError(
                f"Configuration file is empty: {path}\n"
                f"Expected a 'coordinates' section"
            )

        if not isinstance(data, dict) or 'coordinates' not in data:
            raise ValueError(
                f"Configuration file missing 'coordinates' section: {path}\n"
                f"Expected structure: coordinates:\n  precision: ...\n  ..."
            )

        return cls.from_dict(data['coordinates'] or {})

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a YAML-serialisable dictionary."""
        return {
            'precision': self.precision,
            'symbolic': self.symbolic,
        }


def get_default_config() -> DisplayConfig:
    """Return the built-in display configuration."""
    return DisplayConfig()


def load_config(path: Optional[Union[str, Path]] = None) -> DisplayConfig:
    """
    Resolve the display configuration.

    Args:
        path: Explicit YAML file. When None, the COORDINATE_SEARCH_CONFIG
            environment variable is consulted.

    Returns:
        Loaded configuration, or the defaults when no file is configured.
    """
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR) or None

    if path is None:
        return get_default_config()

    logger.info(f"Loading display configuration from {path}")
    return DisplayConfig.from_yaml(path)
