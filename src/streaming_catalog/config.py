"""Configuration model for the streaming catalog."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict

from .exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CatalogConfig:
    """Main configuration model."""
    log_level: str = "WARNING"
    max_events_in_memory: int = 1000
    seed_sample_data: bool = True

    def __post_init__(self) -> None:
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log_level {self.log_level!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        if not isinstance(self.max_events_in_memory, int) or self.max_events_in_memory < 1:
            raise ConfigurationError("max_events_in_memory must be a positive integer")

    @classmethod
    def default(cls) -> "CatalogConfig":
        """Create a default configuration."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogConfig":
        """Build a config from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config_path: Path) -> CatalogConfig:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r') as f:
            config_data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read config {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Config {config_path} must contain a JSON object")

    return CatalogConfig.from_dict(config_data)


def save_config(config: CatalogConfig, config_path: Path) -> None:
    """Save configuration to JSON file."""
    with open(config_path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
