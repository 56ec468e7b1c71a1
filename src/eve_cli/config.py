"""Configuration management for Eve."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.eve/config.yaml")
DATA_FILE_ENV = "EVE_DATA_FILE"


@dataclass
class ConfigModel:
    """Settings for an Eve session."""

    # Where tasks are persisted
    data_file: str = "~/.eve/eve.txt"

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    # Display
    use_color: bool = True

    def __post_init__(self):
        self.data_file = os.path.expanduser(str(self.data_file))
        if self.log_file:
            self.log_file = os.path.expanduser(str(self.log_file))
        self.log_level = str(self.log_level).upper()

    @property
    def data_path(self) -> Path:
        return Path(self.data_file)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_file": self.data_file,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "use_color": self.use_color,
        }
        return yaml.safe_dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a YAML mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")

        return cls(**{key: value for key, value in data.items() if key in known})


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file, falling back to defaults.

    A missing file yields the defaults; an unreadable or invalid one is
    logged and also yields the defaults. ``EVE_DATA_FILE`` overrides the
    configured data file.
    """
    path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
    config = ConfigModel()

    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                config = ConfigModel.from_yaml(f.read())
            logger.debug(f"Loaded configuration from {path}")
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {path}: {e}. Using default configuration.")
            config = ConfigModel()

    env_data_file = os.environ.get(DATA_FILE_ENV)
    if env_data_file:
        config.data_file = os.path.expanduser(env_data_file)

    return config


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> bool:
    """Save configuration to file."""
    path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(config.to_yaml())
        logger.debug(f"Configuration saved to {path}")
        return True
    except OSError as e:
        logger.warning(f"Failed to save config to {path}: {e}")
        return False
