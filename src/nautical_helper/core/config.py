"""Configuration loader and dataclasses for calculator defaults."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

CONFIG_ENV_VAR = "NAUTICAL_HELPER_CONFIG"


@dataclass
class SweptPathConfig:
    """Drift angle table for the swept path calculator."""
    preset_drift_angles_deg: List[float] = field(default_factory=lambda: [2.0, 4.0, 6.0, 8.0, 10.0])
    duplicate_tolerance_deg: float = 0.001


@dataclass
class SquatConfig:
    """Squat / UKC settings."""
    regulatory_ukc_m: float = 1.83


@dataclass
class WatchConfig:
    """Watch schedule settings."""
    operator_names: List[str] = field(default_factory=lambda: ["Pilot 1", "Pilot 2"])
    default_max_watch_hours: float = 6.0


@dataclass
class UnitsConfig:
    """Unit converter display settings."""
    decimals: int = 4


@dataclass
class HelperConfig:
    """Complete configuration."""
    swept_path: SweptPathConfig = field(default_factory=SweptPathConfig)
    squat: SquatConfig = field(default_factory=SquatConfig)
    watch: WatchConfig = field(default_factory=WatchConfig)
    units: UnitsConfig = field(default_factory=UnitsConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "HelperConfig":
        """Load configuration from a YAML file."""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        config = cls(
            swept_path=SweptPathConfig(**data.get('swept_path', {})),
            squat=SquatConfig(**data.get('squat', {})),
            watch=WatchConfig(**data.get('watch', {})),
            units=UnitsConfig(**data.get('units', {})),
        )
        if len(config.watch.operator_names) != 2:
            raise ValueError("watch.operator_names must list exactly two names")
        return config


# Global config instance - lazily loaded
_config: Optional[HelperConfig] = None


def _default_config_path() -> Path:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    # configs/defaults.yaml relative to project root
    return Path(__file__).resolve().parents[3] / "configs" / "defaults.yaml"


def get_config(config_path: Optional[Path] = None) -> HelperConfig:
    """Get the global configuration, loading from file if not already loaded.

    Args:
        config_path: Path to the config file. If None, uses ``$NAUTICAL_HELPER_CONFIG``
            or ``configs/defaults.yaml``.

    Returns:
        The HelperConfig instance.
    """
    global _config

    if _config is None or config_path is not None:
        if config_path is None:
            config_path = _default_config_path()

        if config_path.exists():
            _config = HelperConfig.from_yaml(config_path)
        else:
            # Use defaults if config file not found
            _config = HelperConfig()

    return _config


def reload_config(config_path: Optional[Path] = None) -> HelperConfig:
    """Force reload of configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
